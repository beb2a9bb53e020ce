"""Translucent wave texture laid over the finished grid."""

from __future__ import annotations

import math

from glyphgrid.engine.canvas import Canvas, Style
from glyphgrid.engine.color import Color

ROW_STEP = 18
SAMPLE_STEP = 12
WAVE_AMPLITUDE = 8
OVERLAY_ALPHA = 12
OVERLAY_WEIGHT = 1.2


def _sin_deg(deg: float) -> float:
    return math.sin(math.radians(deg))


def _cos_deg(deg: float) -> float:
    return math.cos(math.radians(deg))


def wave_color(y: float) -> Color:
    return Color(
        _sin_deg(y * 0.02) * 80 + 180,
        _cos_deg(y * 0.015) * 60 + 150,
        _sin_deg(y * 0.03) * 90 + 140,
        OVERLAY_ALPHA,
    )


def compose_overlay(canvas: Canvas, width: float, height: float) -> int:
    """Draw one wavy line every ROW_STEP units. Returns the number of lines."""
    lines = 0
    canvas.push()
    y = 0
    while y < height:
        points = []
        x = 0
        while x <= width:
            points.append((float(x), y + WAVE_AMPLITUDE * _sin_deg((x + y) * 0.02)))
            x += SAMPLE_STEP
        canvas.polyline(points, Style(stroke=wave_color(y), stroke_width=OVERLAY_WEIGHT), smooth=True)
        lines += 1
        y += ROW_STEP
    canvas.pop()
    return lines
