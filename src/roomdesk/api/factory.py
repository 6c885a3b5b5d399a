"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response

from roomdesk.infra.config import Settings
from roomdesk.infra.db import Database
from roomdesk.observability.correlation import CORRELATION_ID_HEADER, correlation_scope
from roomdesk.observability.logging import get_logger

from .routers import public

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """Create the FastAPI app.

    Args:
        settings: Explicit settings. If None, read from the environment.
        database: Already-open database handle. If None, a pool is opened
                  from settings at startup and closed at shutdown. Without
                  DATABASE_URL no pool is opened: /health still answers and
                  resource routes return 503.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_db = app.state.db is None and bool(settings.database_url)
        if owns_db:
            app.state.db = Database.from_settings(settings)
        elif app.state.db is None:
            logger.warning("DATABASE_URL not set; serving without a database")
        try:
            yield
        finally:
            if owns_db:
                app.state.db.close()
                app.state.db = None

    app = FastAPI(
        title=settings.app_title,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = database

    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)) as cid:
            response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = cid
        return response

    app.include_router(public.router)

    return app
