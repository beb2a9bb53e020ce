"""POST /api/inspect — pointer-down → record tooltip."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from glyphgrid.dependencies import get_session
from glyphgrid.models.requests import InspectRequest
from glyphgrid.models.responses import InspectResponse, TooltipModel
from glyphgrid.session import GridSession
from glyphgrid.tooltips import Tooltip

router = APIRouter()


def tooltip_model(tip: Tooltip) -> TooltipModel:
    return TooltipModel(
        id=tip.id,
        index=tip.index,
        lines=tip.lines,
        x=tip.x,
        y=tip.y,
        expires_in=round(tip.remaining(), 3),
    )


@router.post("/inspect", response_model=InspectResponse)
async def inspect(req: InspectRequest, session: GridSession = Depends(get_session)) -> InspectResponse:
    result = session.inspect(req.x, req.y)
    if not result.hit:
        return InspectResponse(hit=False)
    return InspectResponse(
        hit=True,
        index=result.index,
        record=dict(result.record or []),
        tooltip=tooltip_model(result.tooltip) if result.tooltip else None,
    )
