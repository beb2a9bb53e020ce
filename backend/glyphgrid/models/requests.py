"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class InspectRequest(BaseModel):
    x: float = Field(..., allow_inf_nan=False, description="Pointer x in canvas coordinates")
    y: float = Field(..., allow_inf_nan=False, description="Pointer y in canvas coordinates")


class RenderRequest(BaseModel):
    viewport_width: float = Field(..., gt=0, allow_inf_nan=False, description="Viewport width in pixels")
    viewport_height: float = Field(..., gt=0, allow_inf_nan=False, description="Viewport height in pixels")
