"""Grid layout and its inverse."""

from glyphgrid.layout.grid import LayoutConfig, LayoutGeometry, compute_layout
from glyphgrid.layout.hit_test import hit_test

__all__ = ["LayoutConfig", "LayoutGeometry", "compute_layout", "hit_test"]
