from enum import Enum
from typing import Any


class AddressField(str, Enum):
    ADMIN_AREA = "ADMIN_AREA"  # state
    LOCALITY = "LOCALITY"  # city
    RECIPIENT = "RECIPIENT"  # name
    ORGANIZATION = "ORGANIZATION"
    ADDRESS_LINE_1 = "ADDRESS_LINE_1"
    ADDRESS_LINE_2 = "ADDRESS_LINE_2"
    DEPENDENT_LOCALITY = "DEPENDENT_LOCALITY"
    POSTAL_CODE = "POSTAL_CODE"
    SORTING_CODE = "SORTING_CODE"
    STREET_ADDRESS = "STREET_ADDRESS"  # deprecated
    COUNTRY = "COUNTRY"


# Token char -> field, in substitution order.
# See libaddressinput AddressField for the origin of the short codes.
TOKEN_FIELDS: tuple[tuple[str, AddressField], ...] = (
    ("S", AddressField.ADMIN_AREA),
    ("C", AddressField.LOCALITY),
    ("N", AddressField.RECIPIENT),
    ("O", AddressField.ORGANIZATION),
    ("1", AddressField.ADDRESS_LINE_1),
    ("2", AddressField.ADDRESS_LINE_2),
    ("D", AddressField.DEPENDENT_LOCALITY),
    ("Z", AddressField.POSTAL_CODE),
    ("X", AddressField.SORTING_CODE),
    ("A", AddressField.STREET_ADDRESS),
    ("R", AddressField.COUNTRY),
)

ALL_FIELDS: tuple[AddressField, ...] = tuple(f for _, f in TOKEN_FIELDS)

LINE_BREAK = "%n"


def coerce_field(field: Any) -> AddressField | None:
    """Map a field identifier (enum member or its name) to an AddressField.

    Returns None for anything outside the fixed schema.
    """
    if isinstance(field, AddressField):
        return field
    if not isinstance(field, str):
        return None
    try:
        return AddressField(field)
    except ValueError:
        return None


def empty_attributes() -> dict[AddressField, str]:
    return {f: "" for f in ALL_FIELDS}
