"""
Column Statistics - Per-column descriptive summary of a Dataset.

Stats are recomputed wholesale whenever the dataset changes and are never
updated incrementally. Computation is a pure function of the dataset.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from ..constants import TOP_VALUES_LIMIT
from .cells import Number
from .dataset import Dataset, cell_at

logger = logging.getLogger(__name__)


class DataType(Enum):
    """Inferred column type."""
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass
class ColumnStats:
    """
    Summary of one column.

    Attributes:
        count: Non-null cells
        empty: Null cells (row count - count)
        unique: Distinct non-null values (compared by value)
        data_type: NUMERIC iff every non-null value is a number
        top_values: Up to TOP_VALUES_LIMIT distinct values in first-seen order
        min, max, sum, avg, median: Only set for NUMERIC columns
    """
    count: int = 0
    empty: int = 0
    unique: int = 0
    data_type: DataType = DataType.CATEGORICAL
    top_values: List[Any] = field(default_factory=list)
    min: Optional[Number] = None
    max: Optional[Number] = None
    sum: Optional[Number] = None
    avg: Optional[float] = None
    median: Optional[Number] = None

    @property
    def is_numeric(self) -> bool:
        return self.data_type is DataType.NUMERIC

    def completeness(self, total_rows: int) -> float:
        """Percentage of non-null cells (0.0 for an empty dataset)."""
        if total_rows <= 0:
            return 0.0
        return self.count / total_rows * 100

    @property
    def uniqueness(self) -> Optional[float]:
        """Distinct values as a percentage of non-null cells."""
        if self.count == 0:
            return None
        return self.unique / self.count * 100


@dataclass
class DatasetSummary:
    """Dataset-wide figures for the detailed information view."""
    total_rows: int = 0
    total_columns: int = 0
    numeric_columns: int = 0
    categorical_columns: int = 0
    rows_per_page: int = 0

    @property
    def total_data_points(self) -> int:
        return self.total_rows * self.total_columns


def median(values: Sequence[Number]) -> Optional[Number]:
    """
    Median of numeric values.

    Odd count returns the middle element, even count the mean of the two
    middle elements, empty input returns None.
    """
    if not values:
        return None

    sorted_values = sorted(values)
    mid = len(sorted_values) // 2
    if len(sorted_values) % 2 == 1:
        return sorted_values[mid]
    return (sorted_values[mid - 1] + sorted_values[mid]) / 2


def _column_stats(dataset: Dataset, header: str, top_limit: int) -> ColumnStats:
    values = []
    numeric_values = []
    for row in dataset.rows:
        cell = cell_at(row, header)
        if cell.is_null:
            continue
        values.append(cell.value)
        if cell.is_number:
            numeric_values.append(cell.value)

    # dict keeps first-seen order; numbers and text never compare equal
    distinct = list(dict.fromkeys(_distinct_key(v) for v in values))

    stats = ColumnStats(
        count=len(values),
        empty=dataset.row_count - len(values),
        unique=len(distinct),
        top_values=[key[1] for key in distinct[:top_limit]],
    )

    if values and len(numeric_values) == len(values):
        stats.data_type = DataType.NUMERIC

        low = high = numeric_values[0]
        total = 0
        for value in numeric_values:
            if value < low:
                low = value
            if value > high:
                high = value
            total += value

        stats.min = low
        stats.max = high
        stats.sum = total
        stats.avg = total / len(numeric_values)
        stats.median = median(numeric_values)

    return stats


def _distinct_key(value):
    # Tag by kind so that the text "1" and the number 1 stay distinct
    return (isinstance(value, str), value)


def compute_column_stats(
    dataset: Dataset,
    top_values_limit: int = TOP_VALUES_LIMIT
) -> Dict[str, ColumnStats]:
    """
    Compute ColumnStats for every header.

    Args:
        dataset: Source dataset
        top_values_limit: Maximum number of sample values per column

    Returns:
        Mapping header -> ColumnStats, in header order
    """
    stats = {
        header: _column_stats(dataset, header, top_values_limit)
        for header in dataset.headers
    }
    logger.debug(f"Computed stats for {len(stats)} columns over {dataset.row_count} rows")
    return stats


def summarize(
    dataset: Dataset,
    stats: Dict[str, ColumnStats],
    rows_per_page: int
) -> DatasetSummary:
    """Build the dataset-wide summary from already computed column stats."""
    numeric = sum(1 for s in stats.values() if s.is_numeric)
    return DatasetSummary(
        total_rows=dataset.row_count,
        total_columns=dataset.column_count,
        numeric_columns=numeric,
        categorical_columns=len(stats) - numeric,
        rows_per_page=rows_per_page,
    )
