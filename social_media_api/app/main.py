"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn social_media_api.app.main:app --reload

Rejections carry no response body: clients distinguish outcomes by
status code alone.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import AuthenticationFailed, StoreError, ValidationFailed
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Create the database file if needed and bring the schema up to date.
    init_db()
    yield


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationFailed)
    async def validation_failed(request: Request, exc: ValidationFailed) -> Response:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError) -> Response:
        logger.info("%s %s malformed: %s", request.method, request.url.path, exc.errors())
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(AuthenticationFailed)
    async def authentication_failed(request: Request, exc: AuthenticationFailed) -> Response:
        logger.info("%s %s unauthorized: %s", request.method, request.url.path, exc)
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    @app.exception_handler(StoreError)
    async def store_error(request: Request, exc: StoreError) -> Response:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging first so that everything below can log, then
    wires the error handlers and the v1 router.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    _register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
