"""
Row Sorter - Stable, type-aware ordering of filtered rows.

Null values always sort after defined values, in both directions. Two
numbers compare numerically; everything else compares the lowered text form
with locale-aware collation. Python's sort is stable, so rows with equal
keys keep their filtered order.
"""

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import List, Optional, Sequence

from .collation import locale_compare
from .dataset import Row, cell_at


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortConfig:
    """Active sort column (None = unsorted) and direction."""
    key: Optional[str] = None
    direction: SortDirection = SortDirection.ASCENDING

    def toggled(self, key: str) -> "SortConfig":
        """
        Config after a user picks a column.

        Picking the active ascending column flips it to descending; anything
        else sorts the picked column ascending.
        """
        if self.key == key and self.direction is SortDirection.ASCENDING:
            return SortConfig(key, SortDirection.DESCENDING)
        return SortConfig(key, SortDirection.ASCENDING)

    @property
    def indicator(self) -> str:
        return "↑" if self.direction is SortDirection.ASCENDING else "↓"


def compare_rows(
    left: Row,
    right: Row,
    key: str,
    direction: SortDirection = SortDirection.ASCENDING,
    locale_name: Optional[str] = None
) -> int:
    """Comparator for two rows on one column."""
    a = cell_at(left, key)
    b = cell_at(right, key)

    if a.is_null and b.is_null:
        return 0
    if a.is_null:
        return 1
    if b.is_null:
        return -1

    if a.is_number and b.is_number:
        diff = a.value - b.value
        result = (diff > 0) - (diff < 0)
    else:
        result = locale_compare(a.as_text().lower(), b.as_text().lower(), locale_name)

    if direction is SortDirection.DESCENDING:
        return -result
    return result


def sort_rows(
    rows: Sequence[Row],
    config: SortConfig,
    locale_name: Optional[str] = None
) -> List[Row]:
    """
    Return a new, sorted list; the input sequence is left untouched.

    Args:
        rows: Filtered rows
        config: Sort column and direction; no key returns the rows in input order
        locale_name: Collation locale for text comparison (None = system)
    """
    if config.key is None:
        return list(rows)

    key_func = cmp_to_key(
        lambda a, b: compare_rows(a, b, config.key, config.direction, locale_name)
    )
    return sorted(rows, key=key_func)
