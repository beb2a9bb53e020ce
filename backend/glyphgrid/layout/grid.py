"""Grid layout — item count + viewport → columns, rows, canvas size, centers.

The same LayoutGeometry value feeds rendering and hit-testing; never keep a
second copy of the constants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from glyphgrid.errors import LayoutConstraintError

MIN_COLUMNS = 4


@dataclass(frozen=True)
class LayoutConfig:
    outer_margin: float = 30.0
    padding: float = 18.0
    item_size: float = 110.0

    @property
    def pitch(self) -> float:
        """Distance between neighbouring item origins."""
        return self.item_size + self.padding


@dataclass(frozen=True)
class LayoutGeometry:
    outer_margin: float
    padding: float
    item_size: float
    column_count: int
    row_count: int
    canvas_width: float
    canvas_height: float
    item_count: int

    @property
    def pitch(self) -> float:
        return self.item_size + self.padding

    def center_of(self, index: int) -> tuple[float, float]:
        if not 0 <= index < self.item_count:
            raise IndexError(f"item {index} outside 0..{self.item_count - 1}")
        col = index % self.column_count
        row = index // self.column_count
        half = self.item_size / 2
        return (
            self.outer_margin + col * self.pitch + half,
            self.outer_margin + row * self.pitch + half,
        )

    def centers(self) -> list[tuple[float, float]]:
        return [self.center_of(i) for i in range(self.item_count)]


def column_count_for(viewport_width: float, config: LayoutConfig) -> int:
    if config.pitch <= 0:
        raise LayoutConstraintError(
            f"item_size + padding must be positive, got {config.item_size} + {config.padding}"
        )
    return max(MIN_COLUMNS, math.floor((viewport_width - 2 * config.outer_margin) / config.pitch))


def compute_layout(
    item_count: int,
    viewport_width: float,
    viewport_height: float,
    config: LayoutConfig | None = None,
) -> LayoutGeometry:
    config = config if config is not None else LayoutConfig()
    if item_count < 0:
        raise ValueError(f"item_count must be non-negative, got {item_count}")
    if not (math.isfinite(viewport_width) and math.isfinite(viewport_height)):
        raise ValueError(f"viewport must be finite, got {viewport_width}×{viewport_height}")

    columns = column_count_for(viewport_width, config)
    rows = math.ceil(item_count / columns)
    content_h = 2 * config.outer_margin + rows * config.item_size + (rows - 1) * config.padding

    return LayoutGeometry(
        outer_margin=config.outer_margin,
        padding=config.padding,
        item_size=config.item_size,
        column_count=columns,
        row_count=rows,
        canvas_width=viewport_width,
        canvas_height=max(viewport_height, content_h),
        item_count=item_count,
    )
