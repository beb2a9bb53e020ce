"""Dataset ingestion, column statistics and normalization."""

from glyphgrid.data.dataset import COLUMNS, Dataset, load_dataset, parse_csv
from glyphgrid.data.normalizer import normalize_dataset, normalize_row
from glyphgrid.data.statistics import ColumnExtents, compute_column_extents

__all__ = [
    "COLUMNS",
    "Dataset",
    "load_dataset",
    "parse_csv",
    "ColumnExtents",
    "compute_column_extents",
    "normalize_row",
    "normalize_dataset",
]
