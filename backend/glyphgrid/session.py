"""The loaded dataset plus the layout snapshot of the last render.

Dataset, extents and normalized rows are computed once. Every render stores
the LayoutGeometry it drew with; hit-testing reads that same snapshot, so a
click always resolves against what is on screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from glyphgrid.config import Settings
from glyphgrid.data.dataset import Dataset, load_dataset
from glyphgrid.data.normalizer import normalize_dataset
from glyphgrid.data.statistics import ColumnExtents, compute_column_extents
from glyphgrid.engine.canvas import RecordingCanvas
from glyphgrid.engine.color import Color
from glyphgrid.engine.composer import GlyphTraits, compose_glyph
from glyphgrid.engine.noise import NoiseSource, PerlinNoise
from glyphgrid.engine.palette import BASE_PALETTES, Palette, select_palette
from glyphgrid.layout.grid import LayoutConfig, LayoutGeometry, compute_layout
from glyphgrid.layout.hit_test import hit_test
from glyphgrid.render.scene import RenderSummary, render_grid
from glyphgrid.svg.canvas import SvgCanvas
from glyphgrid.tooltips import Tooltip, TooltipBoard

logger = logging.getLogger(__name__)


@dataclass
class InspectResult:
    index: int | None
    record: list[tuple[str, str]] | None = None
    tooltip: Tooltip | None = None

    @property
    def hit(self) -> bool:
        return self.index is not None


class GridSession:
    def __init__(
        self,
        dataset: Dataset,
        *,
        layout: LayoutConfig | None = None,
        noise: NoiseSource | None = None,
        glyph_scale: float = 0.9,
        background: Color | None = None,
        draw_overlay: bool = True,
        catalog: tuple[Palette, ...] = BASE_PALETTES,
        tooltips: TooltipBoard | None = None,
    ) -> None:
        self.dataset = dataset
        self.extents: ColumnExtents = compute_column_extents(dataset)
        self.normalized = normalize_dataset(dataset, self.extents)
        self.raw = [dataset.raw_row(i) for i in range(len(dataset))]
        self.layout = layout if layout is not None else LayoutConfig()
        self.noise = noise if noise is not None else PerlinNoise()
        self.glyph_scale = glyph_scale
        self.background = background
        self.draw_overlay = draw_overlay
        self.catalog = catalog
        self.tooltips = tooltips if tooltips is not None else TooltipBoard()

        self._geometry: LayoutGeometry | None = None
        self._svg: str = ""
        self.last_summary: RenderSummary | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> GridSession:
        dataset = load_dataset(settings.dataset_path)
        session = cls(
            dataset,
            layout=LayoutConfig(
                outer_margin=settings.outer_margin,
                padding=settings.padding,
                item_size=settings.item_size,
            ),
            noise=PerlinNoise(seed=settings.noise_seed),
            glyph_scale=settings.glyph_scale,
            background=Color.from_hex(settings.background),
            draw_overlay=settings.draw_overlay,
            tooltips=TooltipBoard(lifetime=settings.tooltip_seconds, offset=settings.tooltip_offset),
        )
        session.render(settings.viewport_width, settings.viewport_height)
        return session

    def __len__(self) -> int:
        return len(self.dataset)

    @property
    def geometry(self) -> LayoutGeometry:
        if self._geometry is None:
            raise RuntimeError("session has not been rendered yet")
        return self._geometry

    @property
    def svg(self) -> str:
        if not self._svg:
            raise RuntimeError("session has not been rendered yet")
        return self._svg

    @property
    def glyph_size(self) -> float:
        return self.layout.item_size * self.glyph_scale

    def render(self, viewport_width: float, viewport_height: float) -> LayoutGeometry:
        """Lay out and draw the full grid, then snapshot the geometry used."""
        geometry = compute_layout(len(self.dataset), viewport_width, viewport_height, self.layout)
        canvas = SvgCanvas()
        summary = render_grid(
            canvas,
            geometry,
            self.normalized,
            self.raw,
            self.noise,
            glyph_scale=self.glyph_scale,
            background=self.background,
            catalog=self.catalog,
            draw_overlay=self.draw_overlay,
        )
        self._svg = canvas.to_svg(
            geometry.canvas_width,
            geometry.canvas_height,
            title="Glyph grid",
            description=f"{summary.glyphs} records",
        )
        self._geometry = geometry
        self.last_summary = summary
        return geometry

    def record(self, index: int) -> list[tuple[str, str]]:
        if not 0 <= index < len(self.dataset):
            raise IndexError(f"row {index} outside 0..{len(self.dataset) - 1}")
        return self.dataset.record(index)

    def glyph(self, index: int) -> tuple[RecordingCanvas, GlyphTraits]:
        """Re-derive one glyph's draw ops around the origin."""
        if not 0 <= index < len(self.dataset):
            raise IndexError(f"row {index} outside 0..{len(self.dataset) - 1}")
        canvas = RecordingCanvas()
        traits = compose_glyph(
            canvas,
            self.normalized[index],
            self.raw[index],
            self.glyph_size,
            index,
            select_palette(index, self.catalog),
            self.noise,
        )
        return canvas, traits

    def locate(self, px: float, py: float) -> int | None:
        return hit_test(self.geometry, px, py)

    def inspect(self, px: float, py: float) -> InspectResult:
        """Resolve a pointer-down to a row and show its record as a tooltip."""
        index = self.locate(px, py)
        if index is None:
            logger.debug("No glyph at (%.1f, %.1f)", px, py)
            return InspectResult(index=None)

        record = self.record(index)
        lines = [f"{name}: {value}" for name, value in record]
        tip = self.tooltips.show(index, lines, px, py)
        logger.info("Row %d %s", index + 1, dict(record))
        return InspectResult(index=index, record=record, tooltip=tip)
