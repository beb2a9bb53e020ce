"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from glyphgrid.session import GridSession


def get_session(request: Request) -> GridSession:
    return request.app.state.session
