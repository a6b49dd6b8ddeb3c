class AddressFormatError(ValueError):
    """Base class for every error raised by the address formatter."""


class LocaleNotSupportedError(AddressFormatError):
    """No usable locale record: unknown code, none loaded, or no `fmt` template."""


class LocaleParseError(AddressFormatError):
    """A locale record exists but is not a structured mapping."""


class AttributeInvalidError(AddressFormatError):
    """Field identifier outside the fixed address schema."""
