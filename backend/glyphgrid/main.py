"""FastAPI app factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from glyphgrid import __version__
from glyphgrid.config import settings
from glyphgrid.errors import InvalidDataError, LayoutConstraintError
from glyphgrid.session import GridSession

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.glyphgrid_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting GlyphGrid %s (%s)", __version__, settings.glyphgrid_env)
    # Dataset, extents and the first render all happen before serving.
    if getattr(app.state, "session", None) is None:
        app.state.session = GridSession.from_settings(settings)
        logger.info("Loaded %d rows from %s", len(app.state.session), settings.dataset_path)
    yield
    app.state.session.tooltips.clear()


async def _invalid_data(request: Request, exc: InvalidDataError) -> JSONResponse:
    logger.warning("Invalid data: %s", exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _layout_constraint(request: Request, exc: LayoutConstraintError) -> JSONResponse:
    logger.error("Layout misconfiguration: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(session: GridSession | None = None) -> FastAPI:
    app = FastAPI(
        title="GlyphGrid",
        description="Tabular records rendered as deterministic face glyphs, with click-to-inspect",
        version=__version__,
        lifespan=_lifespan,
    )
    app.state.session = session

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidDataError, _invalid_data)
    app.add_exception_handler(LayoutConstraintError, _layout_constraint)

    from glyphgrid.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
