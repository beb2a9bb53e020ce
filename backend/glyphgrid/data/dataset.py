"""CSV dataset loading (header + rows of five numeric columns).

Cells keep their original text for display; the parsed float matrix is what
every downstream computation reads.
"""

from __future__ import annotations

import csv
import io
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from glyphgrid.errors import InvalidDataError

logger = logging.getLogger(__name__)

COLUMNS: tuple[str, ...] = ("column0", "column1", "column2", "column3", "column4")


@dataclass
class Dataset:
    """Ordered rows of the five fixed columns."""

    # Header order as it appeared in the file
    header: tuple[str, ...] = COLUMNS
    # Raw cell text per row, keyed by column name
    records: list[dict[str, str]] = field(default_factory=list)
    # Parsed values: N×5 in COLUMNS order
    values: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, len(COLUMNS))))

    def __len__(self) -> int:
        return len(self.records)

    def raw_row(self, index: int) -> tuple[float, ...]:
        return tuple(float(v) for v in self.values[index])

    def record(self, index: int) -> list[tuple[str, str]]:
        """(column, text) pairs in header order, as shown in tooltips."""
        rec = self.records[index]
        return [(name, rec[name]) for name in self.header]


def _parse_cell(text: str, column: str, line_no: int) -> float:
    try:
        value = float(text)
    except ValueError:
        raise InvalidDataError(
            f"line {line_no}: {column}={text!r} is not a number"
        ) from None
    if not math.isfinite(value):
        raise InvalidDataError(f"line {line_no}: {column}={text!r} is not finite")
    return value


def parse_csv(text: str, delimiter: str = ",") -> Dataset:
    """Parse CSV text. Fails fast on a bad header or any unparseable cell."""
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    try:
        header = tuple(h.strip() for h in next(reader))
    except StopIteration:
        raise InvalidDataError("dataset is empty (no header)") from None

    missing = [c for c in COLUMNS if c not in header]
    extra = [h for h in header if h not in COLUMNS]
    if missing or extra or len(header) != len(COLUMNS):
        raise InvalidDataError(
            f"header must name exactly {', '.join(COLUMNS)}; "
            f"missing={missing} unexpected={extra}"
        )

    records: list[dict[str, str]] = []
    rows: list[list[float]] = []
    for line_no, cells in enumerate(reader, start=2):
        if not cells or all(not c.strip() for c in cells):
            continue
        if len(cells) != len(header):
            raise InvalidDataError(
                f"line {line_no}: expected {len(header)} cells, got {len(cells)}"
            )
        rec = {name: cell.strip() for name, cell in zip(header, cells)}
        rows.append([_parse_cell(rec[c], c, line_no) for c in COLUMNS])
        records.append(rec)

    if not records:
        raise InvalidDataError("dataset has a header but no rows")

    values = np.asarray(rows, dtype=np.float64)
    logger.info("Parsed dataset: %d rows × %d columns", len(records), len(COLUMNS))
    return Dataset(header=header, records=records, values=values)


def load_dataset(path: str | Path) -> Dataset:
    """Read and parse a CSV file from disk."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidDataError(f"cannot read dataset {p}: {e}") from e
    logger.info("Loading dataset from %s", p)
    return parse_csv(text)
