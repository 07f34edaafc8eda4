"""
Page Table Model - Qt model over the current page of a ViewSession.

Only the rows of the current page are exposed; paging, searching and sorting
go through the session and are followed by refresh().
"""
from typing import Any, List, Optional

from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex

from ..constants import TOOLTIP_MIN_LENGTH
from ..core.dataset import Row, cell_at
from ..core.session import ViewSession


class PageTableModel(QAbstractTableModel):
    """
    Read-only QAbstractTableModel for one page of rows.

    Features:
    - Display text from each cell's text form (empty for nulls)
    - Numbers right-aligned, text left-aligned
    - Tooltip with the full value for long text
    - Sort indicator (↑/↓) in the active column header
    - Absolute 1-based row numbers in the vertical header
    """

    def __init__(self, session: ViewSession, parent=None):
        super().__init__(parent)
        self._session = session
        self._headers: List[str] = []
        self._rows: List[Row] = []
        self._snapshot()

    def _snapshot(self):
        self._headers = self._session.headers
        self._rows = self._session.page_rows

    def refresh(self) -> None:
        """Re-read headers and the current page from the session."""
        self.beginResetModel()
        self._snapshot()
        self.endResetModel()

    @property
    def session(self) -> ViewSession:
        return self._session

    # -------------------------------------------------------------------------
    # QAbstractTableModel interface
    # -------------------------------------------------------------------------

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._headers)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None

        row = index.row()
        col = index.column()
        if row < 0 or row >= len(self._rows) or col < 0 or col >= len(self._headers):
            return None

        cell = cell_at(self._rows[row], self._headers[col])

        if role == Qt.ItemDataRole.DisplayRole:
            return cell.as_text()

        elif role == Qt.ItemDataRole.TextAlignmentRole:
            if cell.is_number:
                return Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            return Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter

        elif role == Qt.ItemDataRole.ToolTipRole:
            text = cell.as_text()
            if len(text) > TOOLTIP_MIN_LENGTH:
                return text
            return None

        return None

    def headerData(
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole
    ) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None

        if orientation == Qt.Orientation.Horizontal:
            if 0 <= section < len(self._headers):
                header = self._headers[section]
                sort = self._session.sort_config
                if sort.key == header:
                    return f"{header} {sort.indicator}"
                return header
            return None

        if 0 <= section < len(self._rows):
            return str(self._session.row_number(section))
        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable

    # -------------------------------------------------------------------------
    # Session actions
    # -------------------------------------------------------------------------

    def header_for_column(self, section: int) -> Optional[str]:
        if 0 <= section < len(self._headers):
            return self._headers[section]
        return None

    def request_sort_column(self, section: int) -> None:
        """Header click: toggle sorting on a column and show the new page."""
        header = self.header_for_column(section)
        if header is None:
            return
        self._session.request_sort(header)
        self.refresh()
