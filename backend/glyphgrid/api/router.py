"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from glyphgrid.api import grid, health, inspect, tooltips

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(grid.router)
api_router.include_router(inspect.router)
api_router.include_router(tooltips.router)
