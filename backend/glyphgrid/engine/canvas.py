"""Drawing surface protocol + a recording implementation.

Geometry is expressed in the caller's current frame; push/pop save and
restore the frame (translate/rotate/scale). Rectangles and ellipses are
center-anchored, angles are in degrees.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from glyphgrid.engine.color import Color

Point = tuple[float, float]

# Draw-op kinds that only change the frame
TRANSFORM_KINDS = frozenset({"push", "pop", "translate", "rotate", "scale"})


@dataclass(frozen=True)
class Style:
    fill: Color | None = None
    stroke: Color | None = None
    stroke_width: float = 1.0


@dataclass(frozen=True)
class DrawOp:
    """One recorded canvas call."""

    kind: str
    args: tuple[Any, ...] = ()
    style: Style | None = None
    closed: bool = False
    smooth: bool = False

    @property
    def is_shape(self) -> bool:
        return self.kind not in TRANSFORM_KINDS


class Canvas(Protocol):
    def push(self) -> None: ...
    def pop(self) -> None: ...
    def translate(self, x: float, y: float) -> None: ...
    def rotate(self, degrees: float) -> None: ...
    def scale(self, factor: float) -> None: ...

    def rect(self, cx: float, cy: float, w: float, h: float, radius: float, style: Style) -> None: ...
    def ellipse(self, cx: float, cy: float, w: float, h: float, style: Style) -> None: ...
    def triangle(self, a: Point, b: Point, c: Point, style: Style) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float, style: Style) -> None: ...
    def arc(
        self, cx: float, cy: float, w: float, h: float, start: float, stop: float, style: Style,
    ) -> None: ...
    def polyline(
        self, points: Sequence[Point], style: Style, *, closed: bool = False, smooth: bool = False,
    ) -> None: ...


class RecordingCanvas:
    """Canvas that stores every call as a DrawOp, in order."""

    def __init__(self) -> None:
        self.ops: list[DrawOp] = []
        self._depth = 0

    @property
    def depth(self) -> int:
        return self._depth

    def shapes(self) -> list[DrawOp]:
        return [op for op in self.ops if op.is_shape]

    def kinds(self) -> list[str]:
        return [op.kind for op in self.ops]

    def push(self) -> None:
        self._depth += 1
        self.ops.append(DrawOp("push"))

    def pop(self) -> None:
        if self._depth == 0:
            raise RuntimeError("pop() without matching push()")
        self._depth -= 1
        self.ops.append(DrawOp("pop"))

    def translate(self, x: float, y: float) -> None:
        self.ops.append(DrawOp("translate", (x, y)))

    def rotate(self, degrees: float) -> None:
        self.ops.append(DrawOp("rotate", (degrees,)))

    def scale(self, factor: float) -> None:
        self.ops.append(DrawOp("scale", (factor,)))

    def rect(self, cx: float, cy: float, w: float, h: float, radius: float, style: Style) -> None:
        self.ops.append(DrawOp("rect", (cx, cy, w, h, radius), style))

    def ellipse(self, cx: float, cy: float, w: float, h: float, style: Style) -> None:
        self.ops.append(DrawOp("ellipse", (cx, cy, w, h), style))

    def triangle(self, a: Point, b: Point, c: Point, style: Style) -> None:
        self.ops.append(DrawOp("triangle", (a, b, c), style))

    def line(self, x1: float, y1: float, x2: float, y2: float, style: Style) -> None:
        self.ops.append(DrawOp("line", (x1, y1, x2, y2), style))

    def arc(
        self, cx: float, cy: float, w: float, h: float, start: float, stop: float, style: Style,
    ) -> None:
        self.ops.append(DrawOp("arc", (cx, cy, w, h, start, stop), style))

    def polyline(
        self, points: Sequence[Point], style: Style, *, closed: bool = False, smooth: bool = False,
    ) -> None:
        self.ops.append(DrawOp("polyline", (tuple(points),), style, closed=closed, smooth=smooth))
