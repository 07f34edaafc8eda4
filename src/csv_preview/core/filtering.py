"""
Row Filter - Case-insensitive substring search across all columns.
"""

from typing import List, Sequence

from .dataset import Row, cell_at


def row_matches(row: Row, headers: Sequence[str], needle: str) -> bool:
    """True if any column's text form contains the (already lowered) needle."""
    return any(needle in cell_at(row, header).as_text().lower() for header in headers)


def filter_rows(rows: Sequence[Row], headers: Sequence[str], search_term: str) -> List[Row]:
    """
    Keep rows where at least one column contains the search term.

    Args:
        rows: Rows in dataset order
        headers: Columns to search
        search_term: Case-insensitive substring; empty matches everything

    Returns:
        Matching rows, order preserved
    """
    if not search_term:
        return list(rows)

    needle = search_term.lower()
    return [row for row in rows if row_matches(row, headers, needle)]
