"""RGBA color value with hex parsing and linear blending."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class Color:
    """Channels in 0..255 (floats, so blends stay exact until serialized)."""

    r: float
    g: float
    b: float
    a: float = 255.0

    @classmethod
    def from_hex(cls, text: str) -> Color:
        m = _HEX_RE.match(text.strip())
        if not m:
            raise ValueError(f"Not a hex color: {text!r}")
        rgb = m.group(1)
        alpha = int(m.group(2), 16) if m.group(2) else 255
        return cls(int(rgb[0:2], 16), int(rgb[2:4], 16), int(rgb[4:6], 16), alpha)

    def lerp(self, other: Color, t: float) -> Color:
        """Channel-wise blend; t=0 → self, t=1 → other."""
        t = max(0.0, min(1.0, t))
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t,
        )

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*(_channel(c) for c in (self.r, self.g, self.b)))

    @property
    def opacity(self) -> float:
        return round(_channel(self.a) / 255.0, 3)


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return a.lerp(b, t)


WHITE = Color(255, 255, 255)
