"""Error taxonomy. Everything raised on purpose derives from GlyphGridError."""

from __future__ import annotations


class GlyphGridError(Exception):
    """Base class for precondition violations."""


class InvalidDataError(GlyphGridError):
    """Dataset is empty, misses a column, or holds a cell that is not a number."""


class LayoutConstraintError(GlyphGridError):
    """Layout constants cannot produce a grid (item_size + padding <= 0)."""
