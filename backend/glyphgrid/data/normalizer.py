"""Raw row → normalized vector in [0, 1] against the column extents."""

from __future__ import annotations

from collections.abc import Sequence

from glyphgrid.data.dataset import Dataset
from glyphgrid.data.statistics import ColumnExtents

# Constant column → defined midpoint instead of 0/0.
CONSTANT_COLUMN_VALUE = 0.5


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def normalize_row(values: Sequence[float], extents: ColumnExtents) -> tuple[float, ...]:
    if len(values) != len(extents):
        raise ValueError(f"row has {len(values)} values, extents cover {len(extents)}")
    out: list[float] = []
    for i, v in enumerate(values):
        mn, mx = extents[i]
        if mx == mn:
            out.append(CONSTANT_COLUMN_VALUE)
        else:
            out.append(clamp((v - mn) / (mx - mn), 0.0, 1.0))
    return tuple(out)


def normalize_dataset(dataset: Dataset, extents: ColumnExtents) -> list[tuple[float, ...]]:
    return [normalize_row(dataset.raw_row(i), extents) for i in range(len(dataset))]
