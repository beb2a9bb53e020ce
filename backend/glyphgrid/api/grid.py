"""Grid rendering endpoints — layout, SVG/PNG output, per-row data."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from glyphgrid.dependencies import get_session
from glyphgrid.engine.canvas import DrawOp
from glyphgrid.layout.grid import LayoutGeometry
from glyphgrid.models.requests import RenderRequest
from glyphgrid.models.responses import DrawOpModel, GlyphResponse, LayoutResponse, RecordResponse
from glyphgrid.session import GridSession

router = APIRouter()

# PNG output is capped so a large scale cannot allocate an unbounded surface.
_MAX_PNG_SIDE = 8192


def _layout_response(geometry: LayoutGeometry) -> LayoutResponse:
    return LayoutResponse(
        outer_margin=geometry.outer_margin,
        padding=geometry.padding,
        item_size=geometry.item_size,
        column_count=geometry.column_count,
        row_count=geometry.row_count,
        canvas_width=geometry.canvas_width,
        canvas_height=geometry.canvas_height,
        item_count=geometry.item_count,
    )


def _op_model(op: DrawOp) -> DrawOpModel:
    style = op.style
    return DrawOpModel(
        kind=op.kind,
        args=list(op.args),
        fill=style.fill.hex if style and style.fill else None,
        stroke=style.stroke.hex if style and style.stroke else None,
        stroke_width=style.stroke_width if style and style.stroke else None,
        closed=op.closed,
        smooth=op.smooth,
    )


def _check_index(session: GridSession, index: int) -> None:
    if not 0 <= index < len(session):
        raise HTTPException(status_code=404, detail=f"Row {index} not found")


@router.get("/layout", response_model=LayoutResponse)
async def layout(session: GridSession = Depends(get_session)) -> LayoutResponse:
    return _layout_response(session.geometry)


@router.post("/render", response_model=LayoutResponse)
async def render(req: RenderRequest, session: GridSession = Depends(get_session)) -> LayoutResponse:
    """Re-render for a new viewport; later clicks resolve against this layout."""
    geometry = session.render(req.viewport_width, req.viewport_height)
    return _layout_response(geometry)


@router.get("/grid.svg")
async def grid_svg(session: GridSession = Depends(get_session)) -> Response:
    return Response(content=session.svg, media_type="image/svg+xml")


@router.get("/grid.png")
async def grid_png(
    scale: float = Query(default=1.0, gt=0, le=4),
    session: GridSession = Depends(get_session),
) -> Response:
    from glyphgrid.svg.rasterizer import render_png

    geometry = session.geometry
    width = min(_MAX_PNG_SIDE, max(1, round(geometry.canvas_width * scale)))
    height = min(_MAX_PNG_SIDE, max(1, round(geometry.canvas_height * scale)))
    return Response(content=render_png(session.svg, width, height), media_type="image/png")


@router.get("/rows/{index}", response_model=RecordResponse)
async def row(index: int, session: GridSession = Depends(get_session)) -> RecordResponse:
    _check_index(session, index)
    return RecordResponse(index=index, values=dict(session.record(index)))


@router.get("/glyphs/{index}", response_model=GlyphResponse)
async def glyph(index: int, session: GridSession = Depends(get_session)) -> GlyphResponse:
    _check_index(session, index)
    canvas, traits = session.glyph(index)
    return GlyphResponse(
        index=index,
        parity="odd" if traits.parity else "even",
        eye_style=traits.eye_style.name.lower(),
        mouth_style=traits.mouth_style.value,
        fragment_count=traits.fragment_count,
        ring_count=traits.ring_count,
        mark_count=traits.mark_count,
        normalized=list(session.normalized[index]),
        ops=[_op_model(op) for op in canvas.ops],
    )
