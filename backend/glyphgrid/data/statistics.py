"""Per-column extents, computed once from the full dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from glyphgrid.data.dataset import COLUMNS, Dataset
from glyphgrid.errors import InvalidDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnExtents:
    """Immutable (min, max) per column, in COLUMNS order."""

    mins: tuple[float, ...]
    maxs: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.mins)

    def __getitem__(self, i: int) -> tuple[float, float]:
        return self.mins[i], self.maxs[i]

    def is_constant(self, i: int) -> bool:
        return self.maxs[i] == self.mins[i]


def compute_column_extents(dataset: Dataset) -> ColumnExtents:
    values = dataset.values
    if values.ndim != 2 or values.shape[0] == 0:
        raise InvalidDataError("cannot compute column extents of an empty dataset")
    if values.shape[1] != len(COLUMNS):
        raise InvalidDataError(
            f"expected {len(COLUMNS)} columns, dataset has {values.shape[1]}"
        )
    if not np.all(np.isfinite(values)):
        raise InvalidDataError("dataset contains non-finite values")

    mins = tuple(float(v) for v in values.min(axis=0))
    maxs = tuple(float(v) for v in values.max(axis=0))
    extents = ColumnExtents(mins=mins, maxs=maxs)

    for name, lo, hi in zip(COLUMNS, mins, maxs):
        logger.debug("Extent %s: [%g, %g]%s", name, lo, hi, " (constant)" if lo == hi else "")
    return extents
