"""Live tooltip listing and early dismissal."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from glyphgrid.api.inspect import tooltip_model
from glyphgrid.dependencies import get_session
from glyphgrid.models.responses import TooltipModel
from glyphgrid.session import GridSession

router = APIRouter(prefix="/tooltips")


@router.get("", response_model=list[TooltipModel])
async def list_tooltips(session: GridSession = Depends(get_session)) -> list[TooltipModel]:
    return [tooltip_model(t) for t in session.tooltips.active()]


@router.delete("/{tooltip_id}", status_code=204)
async def dismiss_tooltip(tooltip_id: str, session: GridSession = Depends(get_session)) -> None:
    if not session.tooltips.dismiss(tooltip_id):
        raise HTTPException(status_code=404, detail=f"Tooltip {tooltip_id} not found")
