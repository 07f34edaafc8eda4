"""
CSV Exporter - Serializes the full dataset back to delimited text with pandas.

The output is a header row plus one line per record; nulls become empty
fields and numbers keep their source form, so the text parses back into the
same dataset.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from .dataset import Dataset, cell_at

logger = logging.getLogger(__name__)


def dataset_to_dataframe(dataset: Dataset) -> pd.DataFrame:
    """
    Convert a dataset to an object-dtype DataFrame of display strings.

    Null cells become None so that to_csv writes an empty field.
    """
    records = []
    for row in dataset.rows:
        record = {}
        for header in dataset.headers:
            cell = cell_at(row, header)
            record[header] = None if cell.is_null else cell.as_text()
        records.append(record)
    return pd.DataFrame(records, columns=dataset.headers, dtype=object)


def export_csv(dataset: Dataset, delimiter: str = ',') -> str:
    """
    Serialize a dataset to CSV text.

    Args:
        dataset: Full, unfiltered dataset
        delimiter: Field separator

    Returns:
        CSV text with a header row
    """
    df = dataset_to_dataframe(dataset)
    return df.to_csv(index=False, sep=delimiter, na_rep='', lineterminator='\n')


def save_csv(dataset: Dataset, path: Union[str, Path], delimiter: str = ',') -> Path:
    """Write a dataset to a UTF-8 CSV file and return the path."""
    path = Path(path)
    path.write_text(export_csv(dataset, delimiter), encoding='utf-8')
    logger.info(f"Exported CSV: {path.name} ({dataset.row_count} rows, {dataset.column_count} cols)")
    return path
