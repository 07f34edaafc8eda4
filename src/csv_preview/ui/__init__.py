"""
PySide6 adapters that connect a ViewSession to Qt views and events.
"""

from .column_stats_model import ColumnStatsModel
from .load_worker import CsvLoadWorker, start_file_load
from .page_table_model import PageTableModel
from .viewport_watcher import ViewportWatcher

__all__ = [
    "ColumnStatsModel",
    "CsvLoadWorker",
    "PageTableModel",
    "ViewportWatcher",
    "start_file_load",
]
