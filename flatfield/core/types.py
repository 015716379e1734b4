"""Logical field types, their physical kinds and the pad side constants."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Optional

# Pad sides. The name says where the fill characters go.
PAD_LEFT = -1
PAD_RIGHT = 0

PRECISION = 2
DECIMAL = "."
THOUSAND_SEPARATOR = ","

DEFAULT_TYPE = "string"


class PhysicalKind(str, Enum):
    """How a logical type is represented natively and which format code it uses."""

    TEXT = "str"
    WHOLE = "int"
    DECIMAL = "float"

    @property
    def code(self) -> str:
        return _FORMAT_CODES[self]


_FORMAT_CODES = {
    PhysicalKind.TEXT: "s",
    PhysicalKind.WHOLE: "d",
    PhysicalKind.DECIMAL: "f",
}

# string   value is treated as text (default)
# integer  value is presented as a whole number
# float    value is presented as a decimal number
# sfloat   value is presented as a decimal number with the decimal point removed
# currency value is presented as a decimal number
# blank    value is treated as empty text padded to width
# void     field is ignored, nothing is rendered
DATA_TYPES: dict[str, PhysicalKind] = {
    "string": PhysicalKind.TEXT,
    "integer": PhysicalKind.WHOLE,
    "float": PhysicalKind.DECIMAL,
    "sfloat": PhysicalKind.DECIMAL,
    "currency": PhysicalKind.DECIMAL,
    "blank": PhysicalKind.TEXT,
    "void": PhysicalKind.TEXT,
}

# Types whose value is never checked against the physical kind.
UNCHECKED_TYPES = frozenset({"blank", "void"})

_PAD_NAMES = {
    "left": PAD_LEFT,
    "pad_left": PAD_LEFT,
    "true": PAD_LEFT,
    "right": PAD_RIGHT,
    "pad_right": PAD_RIGHT,
    "false": PAD_RIGHT,
}


def native_kind(value: Any) -> Optional[PhysicalKind]:
    """Return the physical kind a Python value already has, or ``None``.

    ``bool`` is not a whole number here even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return PhysicalKind.TEXT
    if isinstance(value, int):
        return PhysicalKind.WHOLE
    if isinstance(value, (float, Decimal)):
        return PhysicalKind.DECIMAL
    return None


def normalize_pad(pad: Any) -> int:
    """Map the accepted pad spellings onto ``PAD_LEFT`` / ``PAD_RIGHT``.

    Raises:
        ValueError: If *pad* is not a recognized spelling.
    """
    if isinstance(pad, bool):
        return PAD_LEFT if pad else PAD_RIGHT
    if isinstance(pad, int):
        return PAD_LEFT if pad < 0 else PAD_RIGHT
    if isinstance(pad, str):
        key = pad.strip().lower()
        if key in _PAD_NAMES:
            return _PAD_NAMES[key]
        try:
            return PAD_LEFT if int(key) < 0 else PAD_RIGHT
        except ValueError:
            pass
    raise ValueError(f"Invalid pad direction: {pad!r}")


def is_empty(value: Any) -> bool:
    return value is None or value == ""


def text_of(value: Any) -> str:
    """Textual form of an unformatted value, used for width checks."""
    if value is None:
        return ""
    return str(value)
