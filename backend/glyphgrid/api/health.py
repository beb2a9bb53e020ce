"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from glyphgrid import __version__
from glyphgrid.dependencies import get_session
from glyphgrid.models.responses import HealthResponse
from glyphgrid.session import GridSession

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(session: GridSession = Depends(get_session)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, rows=len(session))
