"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application, sets up logging and
includes the v1 routes.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app`` so it can
be served directly::

    uvicorn social_media_api.app.main:app --reload

The application title and version come from ``Settings`` in
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import close_connection, init_db


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file if needed and brings the schema up to date.
        init_db()
        yield
        close_connection()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Clients expect a bare 400 for bodies or path parameters that
    # cannot be parsed, not FastAPI's 422 with an error document.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
        logging.getLogger(__name__).warning(
            "Unparseable request %s %s: %s", request.method, request.url.path, exc.errors()
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    # The published routes have no version prefix.
    app.include_router(v1_router)

    return app


app = create_app()
