"""
Dataset - Headers plus rows of Cells, the in-memory snapshot the engine works on.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Any

from .cells import Cell, cell_from_value

Row = Dict[str, Cell]


def cell_at(row: Mapping[str, Cell], header: str) -> Cell:
    """Return the cell for a header, null when the row has no value for it."""
    cell = row.get(header)
    return cell if cell is not None else Cell.null()


@dataclass
class Dataset:
    """
    Ordered rows plus ordered, unique column names.

    Rows are never mutated by the engine; replacing the dataset is the only
    way to change what a session shows.
    """
    headers: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)

    def __post_init__(self):
        if len(set(self.headers)) != len(self.headers):
            raise ValueError(f"Duplicate column names: {self.headers}")

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def column(self, header: str) -> List[Cell]:
        """Return every cell of a column in row order."""
        return [cell_at(row, header) for row in self.rows]

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        headers: Optional[List[str]] = None
    ) -> "Dataset":
        """
        Build a dataset from plain dictionaries (None, numbers or strings).

        Args:
            records: One mapping per row
            headers: Column order. Defaults to the keys of the first record.

        Returns:
            Dataset with every value wrapped in a Cell
        """
        records = list(records)
        if headers is None:
            headers = list(records[0].keys()) if records else []

        rows = [
            {header: cell_from_value(record.get(header)) for header in headers}
            for record in records
        ]
        return cls(headers=list(headers), rows=rows)
