"""SVG → PNG / pixel array via CairoSVG."""

from __future__ import annotations

import io
import logging

import cairosvg
import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)


def render_png(svg: str, width: int, height: int) -> bytes:
    """Render SVG string to PNG bytes at the given pixel size."""
    if width <= 0 or height <= 0:
        raise ValueError(f"output size must be positive, got {width}×{height}")
    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def rasterize_svg(svg: str, width: int, height: int) -> NDArray[np.uint8]:
    """Rasterize SVG to an H×W×4 RGBA array."""
    png_data = render_png(svg, width, height)
    return np.array(Image.open(io.BytesIO(png_data)).convert("RGBA"))
