"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    rows: int = 0


class LayoutResponse(BaseModel):
    outer_margin: float
    padding: float
    item_size: float
    column_count: int
    row_count: int
    canvas_width: float
    canvas_height: float
    item_count: int


class RecordResponse(BaseModel):
    index: int
    values: dict[str, str] = Field(default_factory=dict)


class DrawOpModel(BaseModel):
    kind: str
    args: list[Any] = Field(default_factory=list)
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    closed: bool = False
    smooth: bool = False


class GlyphResponse(BaseModel):
    index: int
    parity: str
    eye_style: str
    mouth_style: str
    fragment_count: int
    ring_count: int
    mark_count: int
    normalized: list[float] = Field(default_factory=list)
    ops: list[DrawOpModel] = Field(default_factory=list)


class TooltipModel(BaseModel):
    id: str
    index: int
    lines: list[str] = Field(default_factory=list)
    x: float
    y: float
    expires_in: float = 0.0


class InspectResponse(BaseModel):
    hit: bool = False
    index: int | None = None
    record: dict[str, str] | None = None
    tooltip: TooltipModel | None = None
