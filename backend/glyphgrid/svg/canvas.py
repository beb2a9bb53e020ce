"""Canvas implementation that builds an SVG element tree.

push() opens a <g>. Each translate/rotate/scale opens a nested <g> carrying
that transform, so it only affects shapes drawn after it; pop() closes
everything back to the matching push().
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from glyphgrid.engine.canvas import Point, Style
from glyphgrid.svg.serializer import serialize_svg

# Catmull-Rom → cubic Bézier control point factor (uniform, tension 0)
_CATMULL_ROM_K = 1.0 / 6.0


def fmt(value: float) -> str:
    """Two-decimal number without a trailing '-0.00'."""
    text = f"{value:.2f}"
    return "0.00" if text == "-0.00" else text


def style_attrs(style: Style) -> dict[str, str]:
    attrs: dict[str, str] = {}
    if style.fill is None:
        attrs["fill"] = "none"
    else:
        attrs["fill"] = style.fill.hex
        if style.fill.opacity < 1:
            attrs["fill-opacity"] = f"{style.fill.opacity:g}"
    if style.stroke is None:
        attrs["stroke"] = "none"
    else:
        attrs["stroke"] = style.stroke.hex
        if style.stroke.opacity < 1:
            attrs["stroke-opacity"] = f"{style.stroke.opacity:g}"
        attrs["stroke-width"] = fmt(style.stroke_width)
        attrs["stroke-linecap"] = "round"
        attrs["stroke-linejoin"] = "round"
    return attrs


def arc_sweep(start: float, stop: float) -> float:
    """Clockwise sweep in degrees from start to stop, in [0, 360].

    Stops before the start wrap forward by a full turn; a span of a full
    turn or more draws the whole ellipse.
    """
    span = stop - start
    if abs(span) >= 360:
        return 360.0
    return span % 360


def arc_path(cx: float, cy: float, w: float, h: float, start: float, stop: float) -> str | None:
    sweep = arc_sweep(start, stop)
    if sweep == 0:
        return None
    rx, ry = abs(w) / 2, abs(h) / 2

    def at(deg: float) -> tuple[float, float]:
        t = math.radians(deg)
        return cx + rx * math.cos(t), cy + ry * math.sin(t)

    x0, y0 = at(start)
    if sweep >= 360:
        # Two half arcs; a single arc cannot end where it starts
        xm, ym = at(start + 180)
        return (
            f"M {fmt(x0)} {fmt(y0)} "
            f"A {fmt(rx)} {fmt(ry)} 0 1 1 {fmt(xm)} {fmt(ym)} "
            f"A {fmt(rx)} {fmt(ry)} 0 1 1 {fmt(x0)} {fmt(y0)}"
        )
    x1, y1 = at(start + sweep)
    large = 1 if sweep > 180 else 0
    return f"M {fmt(x0)} {fmt(y0)} A {fmt(rx)} {fmt(ry)} 0 {large} 1 {fmt(x1)} {fmt(y1)}"


def smooth_path(points: Sequence[Point], closed: bool) -> str:
    """Catmull-Rom spline through every point, as cubic Bézier segments."""
    pts = list(points)
    n = len(pts)
    if n < 3:
        return polyline_path(pts, closed)

    def get(i: int) -> Point:
        if closed:
            return pts[i % n]
        return pts[max(0, min(n - 1, i))]

    parts = [f"M {fmt(pts[0][0])} {fmt(pts[0][1])}"]
    segments = n if closed else n - 1
    for i in range(segments):
        p0, p1, p2, p3 = get(i - 1), get(i), get(i + 1), get(i + 2)
        c1 = (p1[0] + (p2[0] - p0[0]) * _CATMULL_ROM_K, p1[1] + (p2[1] - p0[1]) * _CATMULL_ROM_K)
        c2 = (p2[0] - (p3[0] - p1[0]) * _CATMULL_ROM_K, p2[1] - (p3[1] - p1[1]) * _CATMULL_ROM_K)
        parts.append(
            f"C {fmt(c1[0])} {fmt(c1[1])} {fmt(c2[0])} {fmt(c2[1])} {fmt(p2[0])} {fmt(p2[1])}"
        )
    if closed:
        parts.append("Z")
    return " ".join(parts)


def polyline_path(points: Sequence[Point], closed: bool) -> str:
    if not points:
        return ""
    parts = [f"M {fmt(points[0][0])} {fmt(points[0][1])}"]
    parts.extend(f"L {fmt(x)} {fmt(y)}" for x, y in points[1:])
    if closed:
        parts.append("Z")
    return " ".join(parts)


class SvgCanvas:
    """Canvas that accumulates an SVG element tree."""

    def __init__(self) -> None:
        self._root: dict[str, Any] = {"tag": "g", "children": []}
        # (group, opened_by_push)
        self._stack: list[tuple[dict[str, Any], bool]] = [(self._root, True)]
        self.shape_count = 0

    @property
    def elements(self) -> list[dict[str, Any]]:
        return self._root["children"]

    def _open(self, transform: str | None, explicit: bool) -> None:
        group: dict[str, Any] = {"tag": "g"}
        if transform:
            group["transform"] = transform
        group["children"] = []
        self._stack[-1][0]["children"].append(group)
        self._stack.append((group, explicit))

    def _add(self, elem: dict[str, Any]) -> None:
        self._stack[-1][0]["children"].append(elem)
        self.shape_count += 1

    # ── Frame ──

    def push(self) -> None:
        self._open(None, explicit=True)

    def pop(self) -> None:
        while len(self._stack) > 1:
            _, explicit = self._stack.pop()
            if explicit:
                return
        raise RuntimeError("pop() without matching push()")

    def translate(self, x: float, y: float) -> None:
        self._open(f"translate({fmt(x)} {fmt(y)})", explicit=False)

    def rotate(self, degrees: float) -> None:
        self._open(f"rotate({fmt(degrees)})", explicit=False)

    def scale(self, factor: float) -> None:
        self._open(f"scale({factor:.4f})", explicit=False)

    # ── Shapes ──

    def rect(self, cx: float, cy: float, w: float, h: float, radius: float, style: Style) -> None:
        r = max(0.0, min(radius, abs(w) / 2, abs(h) / 2))
        elem = {
            "tag": "rect",
            "x": fmt(cx - w / 2),
            "y": fmt(cy - h / 2),
            "width": fmt(abs(w)),
            "height": fmt(abs(h)),
        }
        if r > 0:
            elem["rx"] = fmt(r)
            elem["ry"] = fmt(r)
        elem.update(style_attrs(style))
        self._add(elem)

    def ellipse(self, cx: float, cy: float, w: float, h: float, style: Style) -> None:
        self._add({
            "tag": "ellipse",
            "cx": fmt(cx),
            "cy": fmt(cy),
            "rx": fmt(abs(w) / 2),
            "ry": fmt(abs(h) / 2),
            **style_attrs(style),
        })

    def triangle(self, a: Point, b: Point, c: Point, style: Style) -> None:
        self._add({
            "tag": "polygon",
            "points": " ".join(f"{fmt(x)},{fmt(y)}" for x, y in (a, b, c)),
            **style_attrs(style),
        })

    def line(self, x1: float, y1: float, x2: float, y2: float, style: Style) -> None:
        self._add({
            "tag": "line",
            "x1": fmt(x1),
            "y1": fmt(y1),
            "x2": fmt(x2),
            "y2": fmt(y2),
            **style_attrs(style),
        })

    def arc(
        self, cx: float, cy: float, w: float, h: float, start: float, stop: float, style: Style,
    ) -> None:
        d = arc_path(cx, cy, w, h, start, stop)
        if d is None:
            return
        self._add({"tag": "path", "d": d, **style_attrs(style)})

    def polyline(
        self, points: Sequence[Point], style: Style, *, closed: bool = False, smooth: bool = False,
    ) -> None:
        if len(points) < 2:
            return
        d = smooth_path(points, closed) if smooth else polyline_path(points, closed)
        self._add({"tag": "path", "d": d, **style_attrs(style)})

    def to_svg(self, width: float, height: float, title: str = "", description: str = "") -> str:
        return serialize_svg(self.elements, width, height, title=title, description=description)
