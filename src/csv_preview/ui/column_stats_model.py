"""
Column Stats Model - Qt model for the columns overview and analysis tables.

One row per dataset column, transposed from the session's ColumnStats map.
"""
from typing import Any, List, Optional

from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex

from ..constants import SAMPLE_VALUES_DISPLAYED
from ..core.cells import format_number
from ..core.column_stats import ColumnStats
from ..core.session import ViewSession

STATS_COLUMNS = [
    "Column",
    "Type",
    "Non-Empty",
    "Unique Values",
    "Sample Values",
    "Min",
    "Max",
    "Mean",
    "Median",
]


def format_stat(value: Optional[float]) -> str:
    """Thousands separators, at most two decimals, '-' when absent."""
    if value is None:
        return "-"
    text = f"{value:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_sample_values(values: List[Any]) -> str:
    shown = [format_number(v) if isinstance(v, (int, float)) else str(v)
             for v in values[:SAMPLE_VALUES_DISPLAYED]]
    text = ", ".join(shown)
    if len(values) > SAMPLE_VALUES_DISPLAYED:
        text += "..."
    return text


class ColumnStatsModel(QAbstractTableModel):
    """Read-only model listing per-column statistics."""

    def __init__(self, session: ViewSession, parent=None):
        super().__init__(parent)
        self._session = session
        self._headers: List[str] = session.headers
        self._stats = session.stats
        self._total_rows = session.dataset.row_count

    def refresh(self) -> None:
        self.beginResetModel()
        self._headers = self._session.headers
        self._stats = self._session.stats
        self._total_rows = self._session.dataset.row_count
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._headers)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(STATS_COLUMNS)

    def _cell_text(self, header: str, stats: ColumnStats, col: int) -> str:
        name = STATS_COLUMNS[col]
        if name == "Column":
            return header
        if name == "Type":
            return "Numeric" if stats.is_numeric else "Categorical"
        if name == "Non-Empty":
            return f"{stats.count}/{self._total_rows} ({stats.completeness(self._total_rows):.1f}%)"
        if name == "Unique Values":
            uniqueness = stats.uniqueness
            if uniqueness is None:
                return str(stats.unique)
            return f"{stats.unique} ({uniqueness:.1f}%)"
        if name == "Sample Values":
            return format_sample_values(stats.top_values)
        if name == "Min":
            return format_stat(stats.min)
        if name == "Max":
            return format_stat(stats.max)
        if name == "Mean":
            return format_stat(stats.avg)
        return format_stat(stats.median)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or role != Qt.ItemDataRole.DisplayRole:
            return None

        row = index.row()
        col = index.column()
        if row >= len(self._headers) or col >= len(STATS_COLUMNS):
            return None

        header = self._headers[row]
        stats = self._stats.get(header)
        if stats is None:
            return None
        return self._cell_text(header, stats, col)

    def headerData(
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole
    ) -> Any:
        if role == Qt.ItemDataRole.DisplayRole and orientation == Qt.Orientation.Horizontal:
            if 0 <= section < len(STATS_COLUMNS):
                return STATS_COLUMNS[section]
        return None
