"""Scene orchestrator. Draws the background, one glyph per row, then the overlay."""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from glyphgrid.engine.canvas import Canvas, Style
from glyphgrid.engine.color import Color
from glyphgrid.engine.composer import compose_glyph
from glyphgrid.engine.noise import NoiseSource
from glyphgrid.engine.overlay import compose_overlay
from glyphgrid.engine.palette import BASE_PALETTES, Palette, select_palette
from glyphgrid.layout.grid import LayoutGeometry

logger = logging.getLogger(__name__)


@dataclass
class RenderSummary:
    glyphs: int = 0
    overlay_lines: int = 0
    eye_styles: Counter = field(default_factory=Counter)
    mouth_styles: Counter = field(default_factory=Counter)
    odd_parity: int = 0
    elapsed_ms: float = 0.0


def render_grid(
    canvas: Canvas,
    geometry: LayoutGeometry,
    normalized: Sequence[Sequence[float]],
    raw: Sequence[Sequence[float]],
    noise: NoiseSource,
    *,
    glyph_scale: float = 0.9,
    background: Color | None = None,
    catalog: tuple[Palette, ...] = BASE_PALETTES,
    draw_overlay: bool = True,
) -> RenderSummary:
    """Draw every row at its grid position. Rows are drawn in index order."""
    if len(normalized) != len(raw):
        raise ValueError(f"{len(normalized)} normalized rows vs {len(raw)} raw rows")
    if len(normalized) != geometry.item_count:
        raise ValueError(
            f"layout holds {geometry.item_count} items, got {len(normalized)} rows"
        )

    start = time.perf_counter()
    summary = RenderSummary()
    size = geometry.item_size * glyph_scale

    if background is not None:
        canvas.rect(
            geometry.canvas_width / 2,
            geometry.canvas_height / 2,
            geometry.canvas_width,
            geometry.canvas_height,
            0,
            Style(fill=background),
        )

    for index, (norm, values) in enumerate(zip(normalized, raw)):
        cx, cy = geometry.center_of(index)
        canvas.push()
        canvas.translate(cx, cy)
        traits = compose_glyph(canvas, norm, values, size, index, select_palette(index, catalog), noise)
        canvas.pop()

        summary.glyphs += 1
        summary.eye_styles[traits.eye_style.name] += 1
        summary.mouth_styles[traits.mouth_style.value] += 1
        summary.odd_parity += traits.parity

    if draw_overlay:
        summary.overlay_lines = compose_overlay(canvas, geometry.canvas_width, geometry.canvas_height)

    summary.elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Rendered %d glyphs on %d×%d grid (%.0f×%.0f) in %.0fms",
        summary.glyphs,
        geometry.column_count,
        geometry.row_count,
        geometry.canvas_width,
        geometry.canvas_height,
        summary.elapsed_ms,
    )
    return summary
