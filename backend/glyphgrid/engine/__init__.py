"""Glyph engine — palettes, noise, canvas protocol and the composer."""

from glyphgrid.engine.canvas import Canvas, DrawOp, RecordingCanvas, Style
from glyphgrid.engine.composer import EyeStyle, GlyphTraits, MouthStyle, compose_glyph
from glyphgrid.engine.noise import NoiseSource, PerlinNoise
from glyphgrid.engine.palette import BASE_PALETTES, Palette, select_palette

__all__ = [
    "Canvas",
    "DrawOp",
    "RecordingCanvas",
    "Style",
    "EyeStyle",
    "MouthStyle",
    "GlyphTraits",
    "compose_glyph",
    "NoiseSource",
    "PerlinNoise",
    "BASE_PALETTES",
    "Palette",
    "select_palette",
]
