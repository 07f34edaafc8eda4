"""
Cell values - Tagged union for parsed CSV fields.

The parser attempts numeric coercion per field, so a column may mix numbers
and text. Every field is stored as a Cell with an explicit kind instead of
relying on runtime type tests scattered across the engine.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# Same literal shapes a spreadsheet-style CSV parser accepts as numbers
_FLOAT_PATTERN = re.compile(r'^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$')
_INT_PATTERN = re.compile(r'^\s*-?\d+\s*$')

Number = Union[int, float]


class CellKind(Enum):
    """Kinds of values a cell can hold."""
    NULL = "null"
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True)
class Cell:
    """
    A single field value.

    Attributes:
        kind: CellKind tag
        value: int/float for NUMBER, str for TEXT, None for NULL
    """
    kind: CellKind
    value: Optional[Union[int, float, str]] = None

    @classmethod
    def null(cls) -> "Cell":
        return _NULL

    @classmethod
    def number(cls, value: Number) -> "Cell":
        return cls(CellKind.NUMBER, value)

    @classmethod
    def text(cls, value: str) -> "Cell":
        return cls(CellKind.TEXT, value)

    @property
    def is_null(self) -> bool:
        return self.kind is CellKind.NULL

    @property
    def is_number(self) -> bool:
        return self.kind is CellKind.NUMBER

    def as_text(self) -> str:
        """Return the text form used for display, search and export."""
        if self.kind is CellKind.NULL:
            return ""
        if self.kind is CellKind.NUMBER:
            return format_number(self.value)
        return self.value


_NULL = Cell(CellKind.NULL, None)


def format_number(value: Number) -> str:
    """
    Format a number the way it would appear in the source file.

    Integral values print without a fractional part (2.0 -> "2").
    """
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def coerce_field(raw: Optional[str], dynamic_typing: bool = True) -> Cell:
    """
    Convert a raw parsed field into a Cell.

    Args:
        raw: Field text from the parser (None when the field was missing)
        dynamic_typing: Attempt numeric coercion and map "" to null

    Returns:
        Cell for the field
    """
    if raw is None or not isinstance(raw, str):
        return Cell.null()

    if not dynamic_typing:
        return Cell.text(raw)

    if raw == "":
        return Cell.null()

    if _FLOAT_PATTERN.match(raw):
        if _INT_PATTERN.match(raw):
            return Cell.number(int(raw))
        return Cell.number(float(raw))

    return Cell.text(raw)


def cell_from_value(value) -> Cell:
    """Wrap an already-typed Python value (None, int, float, str)."""
    if value is None:
        return Cell.null()
    if isinstance(value, Cell):
        return value
    if isinstance(value, bool):
        return Cell.text(str(value).lower())
    if isinstance(value, (int, float)):
        if isinstance(value, float) and value != value:
            return Cell.null()  # NaN
        return Cell.number(value)
    return Cell.text(str(value))
