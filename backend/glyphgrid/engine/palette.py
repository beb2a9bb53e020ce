"""Fixed palette catalog and row-index palette selection."""

from __future__ import annotations

from dataclasses import dataclass

from glyphgrid.engine.color import Color


@dataclass(frozen=True)
class Palette:
    background: Color
    accent: Color
    accent2: Color
    stroke: Color

    @classmethod
    def from_hex(cls, colors: tuple[str, str, str, str]) -> Palette:
        bg, accent, accent2, stroke = (Color.from_hex(c) for c in colors)
        return cls(bg, accent, accent2, stroke)

    def __iter__(self):
        return iter((self.background, self.accent, self.accent2, self.stroke))


BASE_PALETTES: tuple[Palette, ...] = tuple(
    Palette.from_hex(p)
    for p in (
        ("#FF6B6B", "#FFE66D", "#4ECDC4", "#1A535C"),
        ("#ff9f1c", "#2ec4b6", "#e71d36", "#f9c74f"),
        ("#ff6f91", "#845ec2", "#ffc75f", "#2b2d42"),
        ("#00bcd4", "#ff5722", "#ffd700", "#8e44ad"),
    )
)


def select_palette(row_index: int, catalog: tuple[Palette, ...] = BASE_PALETTES) -> Palette:
    """Palette for a row: catalog[row_index mod len(catalog)]."""
    if row_index < 0:
        raise ValueError(f"row_index must be non-negative, got {row_index}")
    if not catalog:
        raise ValueError("palette catalog is empty")
    return catalog[row_index % len(catalog)]
