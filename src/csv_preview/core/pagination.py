"""
Paginator - Page slicing, navigation and adaptive page sizing.

All functions are total: out-of-range pages clip to an empty slice and
navigation past either end is a no-op.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, TypeVar

from ..constants import (
    DEFAULT_ROWS_PER_PAGE,
    ESTIMATED_ROW_HEIGHT,
    MIN_ROWS_PER_PAGE,
    PAGINATION_BAR_HEIGHT,
    SCROLLBAR_HEIGHT,
    TABLE_HEADER_HEIGHT,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PaginationState:
    """1-based current page and page size."""
    current_page: int = 1
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE


@dataclass(frozen=True)
class LayoutMetrics:
    """Fixed pixel heights used to derive how many rows fit on screen."""
    row_height: int = ESTIMATED_ROW_HEIGHT
    header_height: int = TABLE_HEADER_HEIGHT
    pagination_height: int = PAGINATION_BAR_HEIGHT
    scrollbar_height: int = SCROLLBAR_HEIGHT
    min_rows_per_page: int = MIN_ROWS_PER_PAGE
    row_padding: int = 0

    @property
    def chrome_height(self) -> int:
        return self.header_height + self.pagination_height + self.scrollbar_height


def total_pages(total_rows: int, rows_per_page: int) -> int:
    """ceil(total_rows / rows_per_page); 0 when there are no rows."""
    if rows_per_page <= 0:
        return 0
    return math.ceil(total_rows / rows_per_page)


def display_total_pages(total_rows: int, rows_per_page: int) -> int:
    """Page count as shown to users: an empty result is one page of zero rows."""
    return total_pages(total_rows, rows_per_page) or 1


def page_slice(rows: Sequence[T], current_page: int, rows_per_page: int) -> List[T]:
    """Rows in [(page-1)*size, page*size), clipped to what exists."""
    if current_page < 1 or rows_per_page <= 0:
        return []
    start = (current_page - 1) * rows_per_page
    return list(rows[start:start + rows_per_page])


def display_range(total_rows: int, current_page: int, rows_per_page: int) -> tuple:
    """
    1-based (start_row, end_row) shown as "Showing X to Y of N rows".

    Both are 0 when there are no rows.
    """
    if total_rows <= 0:
        return 0, 0
    start = (current_page - 1) * rows_per_page + 1
    end = min(current_page * rows_per_page, total_rows)
    return start, end


def next_page(state: PaginationState, total_rows: int) -> bool:
    """Advance one page if possible. Returns True when the page changed."""
    if state.current_page < total_pages(total_rows, state.rows_per_page):
        state.current_page += 1
        return True
    return False


def previous_page(state: PaginationState) -> bool:
    """Go back one page if possible. Returns True when the page changed."""
    if state.current_page > 1:
        state.current_page -= 1
        return True
    return False


def visible_rows(available_height: int, metrics: LayoutMetrics) -> int:
    """Whole rows that fit below the table header and above the pagination bar."""
    if metrics.row_height <= 0:
        return 0
    return math.floor((available_height - metrics.chrome_height) / metrics.row_height)


def adaptive_rows_per_page(
    container_height: Optional[int],
    viewport_height: int,
    total_rows: int,
    metrics: LayoutMetrics
) -> int:
    """
    Derive the page size from the available display height.

    Args:
        container_height: Height of the table container, None before layout
        viewport_height: Window height, used until the container is laid out
        total_rows: Rows in the loaded dataset
        metrics: Row and chrome heights

    Returns:
        max(min_rows_per_page, min(visible rows, total_rows)) plus row_padding
    """
    height = container_height if container_height is not None else viewport_height
    fitted = min(visible_rows(height, metrics), total_rows)
    return max(metrics.min_rows_per_page, fitted) + metrics.row_padding


def apply_adaptive_size(
    state: PaginationState,
    container_height: Optional[int],
    viewport_height: int,
    total_rows: int,
    metrics: LayoutMetrics
) -> bool:
    """
    Update state.rows_per_page from the layout, only when it differs.

    A change resets the current page to 1. Returns True when the page size changed.
    """
    optimal = adaptive_rows_per_page(container_height, viewport_height, total_rows, metrics)
    if optimal == state.rows_per_page:
        return False

    logger.debug(
        f"Adaptive page size {state.rows_per_page} -> {optimal} "
        f"(container={container_height}, viewport={viewport_height})"
    )
    state.rows_per_page = optimal
    state.current_page = 1
    return True
