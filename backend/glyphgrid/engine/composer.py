"""Glyph composition: one dataset row → an ordered set of canvas calls.

Layers, back to front:
  head + fringe → fragments → eyes → mouth → marks → rings → collar

Everything is drawn inside one frame (rotate by noise, scale by column0)
that is pushed before the head and popped after the collar. The output is a
pure function of (normalized, raw, size, row_index, palette, noise).
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from glyphgrid.engine.canvas import Canvas, Style
from glyphgrid.engine.color import Color, WHITE
from glyphgrid.engine.noise import NoiseSource
from glyphgrid.engine.palette import Palette

logger = logging.getLogger(__name__)

VECTOR_LENGTH = 5

# Stroke used for every odd-parity glyph
LIGHT_STROKE = Color(255, 245, 235)
RING_STROKE = Color(WHITE.r, WHITE.g, WHITE.b, 120)

# Ring outline sampling step, degrees
RING_STEP_DEG = 14
# Ring ripple: amplitude and angular frequency
RING_RIPPLE = 0.06
RING_RIPPLE_FREQ = 3

# Half-length of a LINES eye, canvas units
EYE_LINE_HALF = 6.0


class EyeStyle(enum.IntEnum):
    DOTS = 0
    LINES = 1
    BARS = 2


class MouthStyle(enum.Enum):
    ARC = "arc"
    ZIGZAG = "zigzag"


# ── Numeric helpers ──


def remap(value: float, lo: float, hi: float, out_lo: float, out_hi: float) -> float:
    """Unclamped linear map of value from [lo, hi] to [out_lo, out_hi]."""
    return out_lo + (value - lo) / (hi - lo) * (out_hi - out_lo)


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves toward +inf (2.5 → 3, -2.5 → -2)."""
    return math.floor(value + 0.5)


def fract(value: float) -> float:
    return abs(value - math.floor(value))


def compute_parity(raw: Sequence[float]) -> int:
    """0 = even, 1 = odd, from the sum of the rounded raw values."""
    return abs(sum(round_half_up(v) for v in raw)) % 2


def decimal_flags(normalized: Sequence[float]) -> tuple[bool, ...]:
    """Per column: is the fractional part of n*10 above one half?"""
    return tuple(fract(v * 10) > 0.5 for v in normalized)


def eye_style_for(normalized: Sequence[float]) -> EyeStyle:
    return EyeStyle((round_half_up(normalized[0] * 10) + round_half_up(normalized[1] * 10)) % 3)


def mouth_style_for(raw: Sequence[float]) -> MouthStyle:
    return MouthStyle.ARC if round_half_up(raw[3]) % 2 == 0 else MouthStyle.ZIGZAG


@dataclass(frozen=True)
class GlyphColors:
    """Color roles after the parity rule has been applied."""

    background: Color
    accent: Color
    accent2: Color
    stroke: Color


def resolve_colors(palette: Palette, parity: int) -> GlyphColors:
    if parity == 0:
        return GlyphColors(palette.background, palette.accent, palette.accent2, palette.stroke)
    return GlyphColors(
        background=palette.accent.lerp(palette.accent2, 0.4),
        accent=palette.accent2,
        accent2=palette.background,
        stroke=LIGHT_STROKE,
    )


@dataclass(frozen=True)
class GlyphTraits:
    """The discrete choices made for one glyph."""

    parity: int
    flags: tuple[bool, ...]
    eye_style: EyeStyle
    mouth_style: MouthStyle
    fragment_count: int
    ring_count: int
    colors: GlyphColors

    @property
    def mark_count(self) -> int:
        return sum(self.flags)


def glyph_traits(
    normalized: Sequence[float], raw: Sequence[float], palette: Palette,
) -> GlyphTraits:
    parity = compute_parity(raw)
    return GlyphTraits(
        parity=parity,
        flags=decimal_flags(normalized),
        eye_style=eye_style_for(normalized),
        mouth_style=mouth_style_for(raw),
        fragment_count=int(remap(normalized[3], 0, 1, 2, 6)),
        ring_count=int(remap(normalized[1], 0, 1, 1, 4)),
        colors=resolve_colors(palette, parity),
    )


# ── Composition ──


def compose_glyph(
    canvas: Canvas,
    normalized: Sequence[float],
    raw: Sequence[float],
    size: float,
    row_index: int,
    palette: Palette,
    noise: NoiseSource,
) -> GlyphTraits:
    """Draw one glyph centered on the canvas origin of the caller's frame."""
    if len(normalized) != VECTOR_LENGTH or len(raw) != VECTOR_LENGTH:
        raise ValueError(
            f"expected {VECTOR_LENGTH} values, got normalized={len(normalized)} raw={len(raw)}"
        )
    if size <= 0:
        raise ValueError(f"glyph size must be positive, got {size}")

    n = tuple(normalized)
    traits = glyph_traits(n, raw, palette)
    colors = traits.colors

    canvas.push()
    canvas.rotate(remap(noise(row_index * 0.1), 0, 1, -8, 8))
    canvas.scale(remap(n[0], 0, 1, 0.85, 1.25))

    _draw_head(canvas, n, size, colors)
    _draw_fragments(canvas, n, size, row_index, colors, traits.fragment_count, noise)
    _draw_eyes(canvas, n, size, colors, traits.eye_style)
    _draw_mouth(canvas, n, size, colors, traits.mouth_style)
    _draw_marks(canvas, n, size, colors, traits.flags)
    _draw_rings(canvas, n, raw, size, row_index, traits.ring_count)
    _draw_collar(canvas, n, size, colors)

    canvas.pop()

    logger.debug(
        "Glyph %d: parity=%d eyes=%s mouth=%s fragments=%d rings=%d marks=%d",
        row_index,
        traits.parity,
        traits.eye_style.name,
        traits.mouth_style.value,
        traits.fragment_count,
        traits.ring_count,
        traits.mark_count,
    )
    return traits


def _draw_head(canvas: Canvas, n: Sequence[float], size: float, colors: GlyphColors) -> None:
    canvas.push()
    canvas.ellipse(0, 0, size * 0.9, size * remap(n[1], 0.7, 1.2, 0.7, 1.3), Style(fill=colors.background))
    canvas.rotate(remap(n[2], 0, 1, -25, 25))
    canvas.rect(0, -size * 0.06, size * 0.6, size * 0.18, 18, Style(fill=colors.accent))
    canvas.pop()


def _draw_fragments(
    canvas: Canvas,
    n: Sequence[float],
    size: float,
    row_index: int,
    colors: GlyphColors,
    count: int,
    noise: NoiseSource,
) -> None:
    half = size * 0.12
    canvas.push()
    for p in range(count):
        canvas.push()
        canvas.rotate(p * (360 / count) + n[4] * 90)
        # Radial offset is -0.12..0.38 of size, applied once (never size squared)
        canvas.translate(remap(noise(row_index + p * 0.3), 0, 1, -0.12, 0.38) * size, 0)
        style = Style(fill=colors.accent.lerp(colors.accent2, p / count))
        if p % 2 == 0:
            canvas.rect(0, 0, size * 0.18, size * 0.28, 8, style)
        else:
            canvas.triangle((-half, half), (half, half), (0, -half), style)
        canvas.pop()
    canvas.pop()


def _draw_eyes(
    canvas: Canvas, n: Sequence[float], size: float, colors: GlyphColors, eye_style: EyeStyle,
) -> None:
    dx = size * remap(n[0], 0, 1, 0.18, 0.32)
    y = -size * remap(n[2], 0, 1, 0.08, 0.18)

    canvas.push()
    match eye_style:
        case EyeStyle.DOTS:
            style = Style(fill=colors.stroke)
            canvas.ellipse(-dx, y, size * 0.08, size * 0.08, style)
            canvas.ellipse(dx, y, size * 0.08, size * 0.08, style)
        case EyeStyle.LINES:
            style = Style(stroke=colors.stroke, stroke_width=remap(n[3], 0, 1, 2, 6))
            canvas.line(-dx - EYE_LINE_HALF, y, -dx + EYE_LINE_HALF, y, style)
            canvas.line(dx - EYE_LINE_HALF, y, dx + EYE_LINE_HALF, y, style)
        case EyeStyle.BARS:
            style = Style(fill=colors.accent2)
            canvas.rect(-dx, y, size * 0.12, size * 0.06, 6, style)
            canvas.rect(dx, y, size * 0.12, size * 0.06, 6, style)
    canvas.pop()


def _draw_mouth(
    canvas: Canvas, n: Sequence[float], size: float, colors: GlyphColors, mouth_style: MouthStyle,
) -> None:
    base_y = size * 0.25
    width = size * remap(n[3], 0, 1, 0.18, 0.56)
    style = Style(stroke=colors.stroke, stroke_width=remap(n[2], 0, 1, 2, 6))

    canvas.push()
    match mouth_style:
        case MouthStyle.ARC:
            curv = remap(n[4], 0, 1, -1.2, 1.2)
            if curv >= 0:
                canvas.arc(0, base_y, width, width * 0.4, 0, 180 * curv, style)
            else:
                canvas.arc(0, base_y, width, width * 0.4, 180, 180 + 180 * curv, style)
        case MouthStyle.ZIGZAG:
            zig = int(remap(n[4], 0, 1, 3, 7))
            step = width / (zig - 1)
            amplitude = remap(n[2], 0, 1, 2, 10)
            points = [
                (-width / 2 + z * step, base_y + (-amplitude if z % 2 == 0 else amplitude))
                for z in range(zig)
            ]
            canvas.polyline(points, style)
    canvas.pop()


def _draw_marks(
    canvas: Canvas, n: Sequence[float], size: float, colors: GlyphColors, flags: Sequence[bool],
) -> None:
    style = Style(fill=colors.accent.lerp(colors.stroke, 0.5))
    last = len(flags) - 1
    for k, flagged in enumerate(flags):
        if not flagged:
            continue
        canvas.push()
        canvas.rotate(k * 28 + n[k] * 80)
        canvas.translate(remap(k, 0, last, -0.45, 0.45) * size, -size * 0.48)
        if k % 2 == 0:
            canvas.ellipse(0, 0, size * 0.06, size * 0.06, style)
        else:
            canvas.rect(0, 0, size * 0.08, size * 0.04, 6, style)
        canvas.pop()


def ring_outline(radius: float, raw0: float, row_index: int) -> list[tuple[float, float]]:
    """Closed ring samples every RING_STEP_DEG degrees with a small ripple."""
    points = []
    for a in range(0, 360, RING_STEP_DEG):
        ripple = math.sin(math.radians(a * RING_RIPPLE_FREQ + raw0 * 7 + row_index))
        rad = radius * (1 + RING_RIPPLE * ripple)
        theta = math.radians(a)
        points.append((math.cos(theta) * rad, math.sin(theta) * rad))
    return points


def _draw_rings(
    canvas: Canvas,
    n: Sequence[float],
    raw: Sequence[float],
    size: float,
    row_index: int,
    count: int,
) -> None:
    style = Style(stroke=RING_STROKE, stroke_width=remap(n[0], 0, 1, 0.6, 3))
    canvas.push()
    for i in range(count):
        radius = size * remap(i, 0, count, 0.6, 1.6)
        canvas.polyline(ring_outline(radius, raw[0], row_index), style, closed=True, smooth=True)
    canvas.pop()


def _draw_collar(canvas: Canvas, n: Sequence[float], size: float, colors: GlyphColors) -> None:
    canvas.push()
    canvas.rotate(8 * (n[2] - 0.5))
    canvas.rect(0, size * 0.52, size * 0.28, size * 0.12, 10, Style(fill=colors.accent.lerp(colors.accent2, 0.3)))
    canvas.pop()
