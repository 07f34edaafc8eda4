"""
View Session - Owns one dataset and every piece of state derived from it.

State machine:
    EMPTY -> LOADING -> READY
                     -> ERROR    (prior dataset, if any, is kept)
    any   -> EMPTY              (reset)

Every mutator leaves derived state consistent before it returns; the
filtered/sorted view is memoized per (dataset generation, search term,
sort key, sort direction) so repeated reads while paging are cheap.

Ingestion is the only asynchronous step. begin_load() hands out a token and
only the most recent token is honoured by complete_load()/fail_load(), so
the last load always wins and stale results are dropped.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from cachetools import LRUCache

from ..config.viewer_settings import ViewerSettings
from .column_stats import ColumnStats, DatasetSummary, compute_column_stats, summarize
from .dataset import Dataset, Row
from .errors import CsvPreviewError, ParseError, ReadError, ValidationError
from .exporter import export_csv
from .filtering import filter_rows
from .pagination import (
    PaginationState,
    apply_adaptive_size,
    display_range,
    display_total_pages,
    next_page,
    page_slice,
    previous_page,
    total_pages,
)
from .parser import ParseOptions, ParseResult, parse
from .sorting import SortConfig, sort_rows

logger = logging.getLogger(__name__)


class SessionState(Enum):
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ViewTab(Enum):
    """Displays offered over a loaded dataset."""
    DATA = "data"
    COLUMNS = "columns"
    ANALYSIS = "analysis"
    DETAILED = "detailed"


@dataclass(frozen=True)
class FileMeta:
    """Name and byte size of the loaded input."""
    name: str = ""
    size: int = 0

    @property
    def size_kb(self) -> float:
        return self.size / 1024


class ViewSession:
    """
    Interactive view over one in-memory dataset.

    Usage:
        session = ViewSession()
        session.load(text, FileMeta("sales.csv", len(text)))
        session.set_search_term("paris")
        session.request_sort("amount")
        rows = session.page_rows
    """

    def __init__(
        self,
        settings: Optional[ViewerSettings] = None,
        parse_func: Callable[[str, ParseOptions], ParseResult] = parse,
        parse_options: Optional[ParseOptions] = None
    ):
        """
        Initialize an empty session.

        Args:
            settings: ViewerSettings (defaults when None)
            parse_func: Parser collaborator
            parse_options: Options passed to the parser
        """
        self.settings = settings or ViewerSettings()
        self._parse = parse_func
        self._parse_options = parse_options or ParseOptions()
        self._metrics = self.settings.layout_metrics
        self._view_cache = LRUCache(maxsize=self.settings.view_cache_size)

        self._teardowns: List[Callable[[], None]] = []
        self._closed = False
        self._load_token = 0
        self._pending_meta: Optional[FileMeta] = None
        self._generation = 0
        self._layout: Optional[tuple] = None  # (container_height, viewport_height)

        self._clear()

    def _clear(self):
        self._state = SessionState.EMPTY
        self._error: Optional[str] = None
        self._dataset = Dataset()
        self._file_meta: Optional[FileMeta] = None
        self._stats: Dict[str, ColumnStats] = {}
        self._search_term = ""
        self._sort = SortConfig()
        self._pagination = PaginationState(rows_per_page=self.settings.default_rows_per_page)
        self._active_tab = ViewTab.DATA
        self._generation += 1
        self._view_cache.clear()

    # ==================== Ingestion ====================

    def begin_load(self, file_meta: Optional[FileMeta] = None) -> int:
        """
        Enter LOADING and return the token that identifies this load.

        Any load started earlier is superseded.
        """
        self._load_token += 1
        self._pending_meta = file_meta
        self._state = SessionState.LOADING
        self._error = None
        logger.debug(f"Load #{self._load_token} started ({file_meta.name if file_meta else 'text'})")
        return self._load_token

    def complete_load(self, token: int, raw_text: str) -> bool:
        """
        Parse raw text for a load started with begin_load().

        Returns:
            True if the dataset was replaced, False if the result was stale or unusable
        """
        if token != self._load_token:
            logger.debug(f"Discarding stale load #{token} (current #{self._load_token})")
            return False

        try:
            result = self._parse(raw_text, self._parse_options)
        except CsvPreviewError as e:
            self._enter_error(e)
            return False

        if not result.rows:
            self._enter_error(ParseError(result.first_error or "No rows found in input"))
            return False

        self._install(result.to_dataset(), self._pending_meta)

        if result.errors:
            self._error = f"Parse error: {result.first_error}"
            logger.warning(f"Loaded with {len(result.errors)} parse issue(s): {result.first_error}")
        return True

    def fail_load(self, token: int, error: Union[CsvPreviewError, str]) -> bool:
        """
        Record that a load could not obtain its input.

        Returns:
            True if the failure applied, False if the load was stale
        """
        if token != self._load_token:
            logger.debug(f"Ignoring failure of stale load #{token}")
            return False

        if not isinstance(error, CsvPreviewError):
            error = ReadError(str(error))
        self._enter_error(error)
        return True

    def load(self, raw_text: str, file_meta: Optional[FileMeta] = None) -> bool:
        """Load raw CSV text synchronously. Returns True on success."""
        token = self.begin_load(file_meta)
        return self.complete_load(token, raw_text)

    def load_records(
        self,
        records: Sequence[Mapping[str, Any]],
        headers: Optional[List[str]] = None,
        file_meta: Optional[FileMeta] = None
    ) -> bool:
        """
        Load already-typed records (dicts of None/number/str).

        Empty input is ignored and leaves the session unchanged.
        """
        if not records:
            return False

        self._load_token += 1
        self._install(Dataset.from_records(records, headers), file_meta)
        return True

    def _install(self, dataset: Dataset, file_meta: Optional[FileMeta]):
        self._clear()
        self._dataset = dataset
        self._file_meta = file_meta
        self._stats = compute_column_stats(dataset, self.settings.top_values_limit)
        self._state = SessionState.READY

        if self._layout is not None:
            self._resize(*self._layout)

        logger.info(
            f"Loaded dataset: {file_meta.name if file_meta else '<records>'} "
            f"({dataset.row_count} rows, {dataset.column_count} cols)"
        )

    def _enter_error(self, error: CsvPreviewError):
        if isinstance(error, ReadError):
            self._error = f"File reading error: {error}"
            logger.error(self._error)
        elif isinstance(error, ParseError):
            self._error = f"Parse error: {error}"
            logger.warning(self._error)
        else:
            self._error = str(error)
            logger.error(self._error)
        self._state = SessionState.ERROR

    def reset(self):
        """Discard the dataset and all derived state; in-flight loads are dropped."""
        self._load_token += 1
        self._pending_meta = None
        self._clear()
        self._active_tab = ViewTab.COLUMNS
        logger.debug("Session reset")

    # ==================== Mutators ====================

    def set_search_term(self, term: Optional[str]):
        """Filter rows by a case-insensitive substring; returns to page 1 on change."""
        term = term or ""
        if term == self._search_term:
            return
        self._search_term = term
        self._pagination.current_page = 1

    def request_sort(self, key: str):
        """Sort by a column; picking the active column again flips the direction."""
        if key not in self._dataset.headers:
            logger.warning(f"Ignoring sort on unknown column: {key!r}")
            return
        self._sort = self._sort.toggled(key)
        logger.debug(f"Sort: {self._sort.key} {self._sort.direction.value}")

    def next_page(self) -> bool:
        return next_page(self._pagination, self.total_rows)

    def prev_page(self) -> bool:
        return previous_page(self._pagination)

    def set_rows_per_page(self, rows_per_page: int):
        """Fix the page size; returns to page 1 when it changes."""
        if rows_per_page < 1:
            raise ValidationError(f"rows_per_page must be at least 1, got {rows_per_page}")
        if rows_per_page != self._pagination.rows_per_page:
            self._pagination.rows_per_page = rows_per_page
            self._pagination.current_page = 1

    def set_active_tab(self, tab: Union[ViewTab, str]):
        self._active_tab = ViewTab(tab)

    def update_viewport(self, container_height: Optional[int], viewport_height: int) -> bool:
        """
        Re-derive the page size from the display geometry.

        Args:
            container_height: Table container height, None before layout is known
            viewport_height: Window height

        Returns:
            True when rows_per_page changed (the page is then reset to 1)
        """
        self._layout = (container_height, viewport_height)
        return self._resize(container_height, viewport_height)

    def _resize(self, container_height: Optional[int], viewport_height: int) -> bool:
        if self._dataset.is_empty:
            return False
        return apply_adaptive_size(
            self._pagination,
            container_height,
            viewport_height,
            self._dataset.row_count,
            self._metrics,
        )

    # ==================== Derived state ====================

    def _view_rows(self) -> List[Row]:
        cache_key = (self._generation, self._search_term, self._sort.key, self._sort.direction)
        rows = self._view_cache.get(cache_key)
        if rows is None:
            filtered = filter_rows(self._dataset.rows, self._dataset.headers, self._search_term)
            rows = sort_rows(filtered, self._sort, self.settings.collation_locale)
            self._view_cache[cache_key] = rows
        return rows

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def file_meta(self) -> Optional[FileMeta]:
        return self._file_meta

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def headers(self) -> List[str]:
        return list(self._dataset.headers)

    @property
    def rows(self) -> List[Row]:
        """All loaded rows in file order, ignoring search and sort."""
        return list(self._dataset.rows)

    @property
    def stats(self) -> Dict[str, ColumnStats]:
        return dict(self._stats)

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort_config(self) -> SortConfig:
        return self._sort

    @property
    def active_tab(self) -> ViewTab:
        return self._active_tab

    @property
    def rows_per_page(self) -> int:
        return self._pagination.rows_per_page

    @property
    def current_page(self) -> int:
        return self._pagination.current_page

    @property
    def view_rows(self) -> List[Row]:
        """All filtered and sorted rows."""
        return list(self._view_rows())

    @property
    def page_rows(self) -> List[Row]:
        return page_slice(self._view_rows(), self.current_page, self.rows_per_page)

    @property
    def total_rows(self) -> int:
        return len(self._view_rows())

    @property
    def total_pages(self) -> int:
        return display_total_pages(self.total_rows, self.rows_per_page)

    @property
    def start_row(self) -> int:
        return display_range(self.total_rows, self.current_page, self.rows_per_page)[0]

    @property
    def end_row(self) -> int:
        return display_range(self.total_rows, self.current_page, self.rows_per_page)[1]

    @property
    def has_next_page(self) -> bool:
        return self.current_page < total_pages(self.total_rows, self.rows_per_page)

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    def row_number(self, page_index: int) -> int:
        """Absolute 1-based row number of a row on the current page."""
        return (self.current_page - 1) * self.rows_per_page + page_index + 1

    def summary(self) -> DatasetSummary:
        return summarize(self._dataset, self._stats, self.rows_per_page)

    def export_csv(self, delimiter: str = ',') -> str:
        """Serialize the full dataset (ignores search, sort and paging)."""
        return export_csv(self._dataset, delimiter)

    # ==================== Lifecycle ====================

    def add_teardown(self, callback: Callable[[], None]):
        """Register a release callback (e.g. unsubscribing a resize observer)."""
        self._teardowns.append(callback)

    def close(self):
        """Run teardown callbacks once, most recent first."""
        if self._closed:
            return
        self._closed = True
        while self._teardowns:
            callback = self._teardowns.pop()
            try:
                callback()
            except Exception as e:
                logger.error(f"Teardown callback failed: {e}")

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "ViewSession":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
