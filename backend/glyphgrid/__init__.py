"""GlyphGrid — data-driven face glyphs on a clickable grid."""

__version__ = "0.1.0"
