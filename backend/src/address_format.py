"""Format a postal address according to per-locale layout rules.

A locale record carries a `fmt` template such as ``%N%n%O%n%A%n%C, %S %Z``:
``%<char>`` placeholders name address fields (see ``address_fields.TOKEN_FIELDS``)
and ``%n`` marks a line break.

Usage::

    f = AddressFormatter()
    f.set_locale("US")
    f.set_attribute("RECIPIENT", "Jane Doe")
    f.set_attribute("ADDRESS_LINE_1", "123 Main St")
    print(f.format_address())

HTML mode only turns line breaks into ``\\n<br>``; attribute values are NOT
escaped, so callers rendering untrusted input must escape values themselves.
"""

from __future__ import annotations

from typing import Any, Mapping

from address_errors import (
    AddressFormatError,
    AttributeInvalidError,
    LocaleNotSupportedError,
    LocaleParseError,
)
from address_fields import LINE_BREAK, TOKEN_FIELDS, AddressField, coerce_field, empty_attributes
from locale_store import LocaleStore, locale_store_from_env


__all__ = [
    "AddressField",
    "AddressFormatError",
    "AddressFormatter",
    "AttributeInvalidError",
    "LocaleNotSupportedError",
    "LocaleParseError",
    "render_template",
]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


# A rendered address is a list of (text, from_template) pieces. Only template
# pieces are searched for markers; substituted values are never rescanned.
_Pieces = list[tuple[str, bool]]


def _join_template_text(pieces: _Pieces) -> _Pieces:
    # Empty values vanish, so the template text around them is searched as one string.
    joined: _Pieces = []
    for text, from_template in pieces:
        if not text:
            continue
        if from_template and joined and joined[-1][1]:
            joined[-1] = (joined[-1][0] + text, True)
        else:
            joined.append((text, from_template))
    return joined


def _replace_marker(pieces: _Pieces, marker: str, replacement: str) -> _Pieces:
    out: _Pieces = []
    for text, from_template in _join_template_text(pieces):
        if not from_template or marker not in text:
            out.append((text, from_template))
            continue
        for i, part in enumerate(text.split(marker)):
            if i:
                out.append((replacement, False))
            out.append((part, True))
    return out


def render_template(fmt: str, values: Mapping[AddressField, Any], *, html: bool = False) -> str:
    """Expand `fmt`: every %<char> token in table order, then every %n line break."""
    pieces: _Pieces = [(fmt, True)]
    for char, field in TOKEN_FIELDS:
        pieces = _replace_marker(pieces, "%" + char, _text(values.get(field)))

    pieces = _replace_marker(pieces, LINE_BREAK, "\n<br>" if html else "\n")
    return "".join(text for text, _ in pieces)


class AddressFormatter:
    def __init__(self, locale_store: LocaleStore | None = None):
        self._store = locale_store if locale_store is not None else locale_store_from_env()
        self._locale: dict[str, Any] | None = None
        self._locale_code: str | None = None
        self._attributes = empty_attributes()

    @property
    def locale(self) -> str | None:
        """Code of the active locale, or None before the first successful set_locale()."""
        return self._locale_code

    def set_locale(self, code: str) -> bool:
        """Load the locale record for `code` and make it active.

        The previous record stays active if the lookup fails.
        """
        record = self._store.lookup(code)
        self._locale = record
        self._locale_code = code
        return True

    def format_address(self, html: bool = False) -> str:
        fmt = (self._locale or {}).get("fmt")
        if not isinstance(fmt, str):
            raise LocaleNotSupportedError(f"locale_not_supported: {self._locale_code}")
        return render_template(fmt, self._attributes, html=html)

    def _field(self, field: Any) -> AddressField:
        f = coerce_field(field)
        if f is None:
            raise AttributeInvalidError(f"attribute_invalid: {field!r}")
        return f

    def set_attribute(self, field: AddressField | str, value: str) -> str:
        self._attributes[self._field(field)] = value
        return value

    def get_attribute(self, field: AddressField | str) -> str:
        return self._attributes[self._field(field)]

    def set_attributes(self, values: Mapping[Any, str] | None = None, **fields: str) -> dict[str, str]:
        """Set several attributes at once.

        Every key is checked before anything is stored, so one bad key leaves
        all attributes unchanged.
        """
        merged = dict(values or {})
        merged.update(fields)
        resolved = [(self._field(k), v) for k, v in merged.items()]
        for f, v in resolved:
            self._attributes[f] = v
        return self.attributes()

    def attributes(self) -> dict[str, str]:
        return {f.value: v for f, v in self._attributes.items()}

    def clear_attributes(self) -> None:
        for f in self._attributes:
            self._attributes[f] = ""
