from __future__ import annotations

import json
import os
from importlib import resources
from pathlib import Path
from typing import Any, Mapping, Protocol

import boto3

from address_errors import LocaleNotSupportedError, LocaleParseError


DEFAULT_I18N_DIR = Path(str(resources.files("address_i18n")))


class LocaleStore(Protocol):
    def lookup(self, code: str) -> dict[str, Any]:
        """Return the locale record for `code`.

        Raises LocaleNotSupportedError when there is no entry and
        LocaleParseError when the entry is not a mapping.
        """
        ...


def parse_record(code: str, raw: Any) -> dict[str, Any]:
    """Turn a raw dataset entry (JSON text or an already-decoded value) into a dict."""
    data = raw
    if isinstance(raw, (bytes, bytearray, str)):
        try:
            data = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LocaleParseError(f"locale_parse_error: {code}") from e

    if not isinstance(data, Mapping):
        raise LocaleParseError(f"locale_parse_error: {code}")
    return dict(data)


class DictLocaleStore:
    """In-memory store. Values may be mappings or raw JSON strings."""

    def __init__(self, records: Mapping[str, Any] | None = None):
        self._records = dict(records or {})

    def lookup(self, code: str) -> dict[str, Any]:
        if code not in self._records:
            raise LocaleNotSupportedError(f"locale_not_supported: {code}")
        return parse_record(code, self._records[code])


class FileLocaleStore:
    """Reads `<i18n_dir>/<code>.json` records from the local filesystem."""

    def __init__(self, i18n_dir: str | Path | None = None):
        self.i18n_dir = Path(i18n_dir or os.getenv("ADDRESS_FORMAT_I18N_DIR") or DEFAULT_I18N_DIR)

    def _path(self, code: str) -> Path | None:
        # A code is a file stem, never a path.
        if not code or "/" in code or "\\" in code or code in (".", ".."):
            return None
        return self.i18n_dir / f"{code}.json"

    def lookup(self, code: str) -> dict[str, Any]:
        path = self._path(code)
        if path is None or not path.is_file():
            raise LocaleNotSupportedError(f"locale_not_supported: {code}")

        return parse_record(code, path.read_bytes())

    def available_locales(self) -> list[str]:
        if not self.i18n_dir.is_dir():
            return []
        return sorted(p.stem for p in self.i18n_dir.glob("*.json"))


def _pk(code: str) -> str:
    return f"LOCALE#{code}"


class DynamoLocaleStore:
    """Locale records stored in DynamoDB.

    Table key: PK = "LOCALE#<code>". The `record` attribute holds either the
    JSON text of the record or a DynamoDB map.
    """

    def __init__(self, table_name: str, region: str | None = None):
        if not table_name:
            raise ValueError("missing_locale_table")
        self.table_name = table_name
        self.region = region

    def _table(self):
        return boto3.resource("dynamodb", region_name=self.region).Table(self.table_name)

    def lookup(self, code: str) -> dict[str, Any]:
        if not code:
            raise LocaleNotSupportedError(f"locale_not_supported: {code}")

        resp = self._table().get_item(Key={"PK": _pk(code)})
        item = resp.get("Item")
        if not item or "record" not in item:
            raise LocaleNotSupportedError(f"locale_not_supported: {code}")
        return parse_record(code, item["record"])


def locale_store_from_env() -> LocaleStore:
    table_name = os.getenv("ADDRESS_FORMAT_LOCALE_TABLE", "")
    if table_name:
        return DynamoLocaleStore(table_name, region=os.getenv("AWS_REGION_NAME"))
    return FileLocaleStore()
