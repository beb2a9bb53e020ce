"""
Render a dataset CSV to a glyph grid, offline.

Usage:
  python render_grid.py samples/dataset.csv                      # writes grid.svg
  python render_grid.py samples/dataset.csv -o out.svg -w 900    # custom viewport width
  python render_grid.py samples/dataset.csv -o out.png --scale 2 # PNG via CairoSVG
"""

import argparse
import os
import sys

from glyphgrid.config import settings
from glyphgrid.data.dataset import load_dataset
from glyphgrid.engine.color import Color
from glyphgrid.engine.noise import PerlinNoise
from glyphgrid.errors import GlyphGridError
from glyphgrid.layout.grid import LayoutConfig
from glyphgrid.session import GridSession


def main():
    parser = argparse.ArgumentParser(description="Glyph grid renderer")
    parser.add_argument("input", help="CSV file with columns column0..column4")
    parser.add_argument("-o", "--output", default="grid.svg", help="Output .svg or .png")
    parser.add_argument("-w", "--width", type=int, default=settings.viewport_width, help="Viewport width")
    parser.add_argument("--height", type=int, default=settings.viewport_height, help="Viewport height")
    parser.add_argument("--seed", type=int, default=settings.noise_seed, help="Noise seed")
    parser.add_argument("--scale", type=float, default=1.0, help="PNG scale factor")
    parser.add_argument("--no-overlay", action="store_true", help="Skip the wave texture")
    args = parser.parse_args()

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        sys.exit(1)

    try:
        dataset = load_dataset(args.input)
        session = GridSession(
            dataset,
            layout=LayoutConfig(settings.outer_margin, settings.padding, settings.item_size),
            noise=PerlinNoise(seed=args.seed),
            glyph_scale=settings.glyph_scale,
            background=Color.from_hex(settings.background),
            draw_overlay=not args.no_overlay,
        )
        geo = session.render(args.width, args.height)
    except GlyphGridError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.output.lower().endswith(".png"):
        from glyphgrid.svg.rasterizer import render_png

        png = render_png(
            session.svg,
            max(1, round(geo.canvas_width * args.scale)),
            max(1, round(geo.canvas_height * args.scale)),
        )
        with open(args.output, "wb") as f:
            f.write(png)
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(session.svg)

    summary = session.last_summary
    print(f"{len(dataset)} rows → {geo.column_count}×{geo.row_count} grid "
          f"({geo.canvas_width:g}×{geo.canvas_height:g})")
    print(f"  eyes:   {dict(summary.eye_styles)}")
    print(f"  mouths: {dict(summary.mouth_styles)}")
    print(f"  odd parity: {summary.odd_parity}")
    print(f"Saved → {args.output}")


if __name__ == "__main__":
    main()
