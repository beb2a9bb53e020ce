"""Scene rendering."""

from glyphgrid.render.scene import RenderSummary, render_grid

__all__ = ["RenderSummary", "render_grid"]
