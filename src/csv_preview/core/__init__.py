"""
Core module - In-memory engine behind the CSV preview.

Architecture:
    raw text
       ↓
    parser.py → Dataset (headers + rows of Cells)
       ↓                       ↘
    filtering.py → sorting.py    column_stats.py
       ↓
    pagination.py → page of rows
       ↓
    session.py orchestrates all of the above
"""

from .cells import Cell, CellKind, coerce_field
from .dataset import Dataset, Row, cell_at
from .errors import CsvPreviewError, ParseError, ReadError, ValidationError
from .parser import ParseOptions, ParseResult, ParseIssue, parse
from .column_stats import ColumnStats, DataType, DatasetSummary, compute_column_stats, median
from .filtering import filter_rows
from .sorting import SortConfig, SortDirection, sort_rows
from .pagination import LayoutMetrics, PaginationState, page_slice, total_pages
from .exporter import export_csv, save_csv
from .session import ViewSession, SessionState, ViewTab, FileMeta

__all__ = [
    # Values
    'Cell',
    'CellKind',
    'coerce_field',
    'Dataset',
    'Row',
    'cell_at',
    # Errors
    'CsvPreviewError',
    'ParseError',
    'ReadError',
    'ValidationError',
    # Parsing / export
    'ParseOptions',
    'ParseResult',
    'ParseIssue',
    'parse',
    'export_csv',
    'save_csv',
    # Engine
    'ColumnStats',
    'DataType',
    'DatasetSummary',
    'compute_column_stats',
    'median',
    'filter_rows',
    'SortConfig',
    'SortDirection',
    'sort_rows',
    'LayoutMetrics',
    'PaginationState',
    'page_slice',
    'total_pages',
    # Session
    'ViewSession',
    'SessionState',
    'ViewTab',
    'FileMeta',
]
