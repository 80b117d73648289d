"""
Main entrypoint for the MotoDash API.

This module assembles the FastAPI application: it builds the store
adapter and the resource services, registers the exception handlers
that translate service errors into HTTP responses and includes the
versioned router.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``.  Run it
with uvicorn, e.g.::

    uvicorn moto_dash_api.app.main:app --reload

Nothing touches the database or the logging tree until the application
starts; the lifespan handler configures logging from the settings and
applies the schema.
"""

import logging
import sqlite3
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path
from .core.errors import EmptyUpdateError, RequestValidationFailed, ResourceNotFound
from .core.logging_config import setup_logging
from .services.resources import build_services
from .services.store import ResourceStore, SQLiteStore

logger = logging.getLogger(__name__)


def _body_errors(exc: RequestValidationError) -> list:
    errors = []
    for error in exc.errors():
        # Drop the "body" prefix FastAPI adds to request body locations.
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(loc) or "payload", "message": error.get("msg", "")})
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Map service and storage errors to JSON responses."""

    @app.exception_handler(RequestValidationFailed)
    async def validation_failed_handler(request: Request, exc: RequestValidationFailed) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation failed", "errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation failed", "errors": _body_errors(exc)},
        )

    @app.exception_handler(EmptyUpdateError)
    async def empty_update_handler(request: Request, exc: EmptyUpdateError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": str(exc)},
        )

    @app.exception_handler(ResourceNotFound)
    async def not_found_handler(request: Request, exc: ResourceNotFound) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": str(exc)},
        )

    @app.exception_handler(sqlite3.Error)
    async def storage_error_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
        logger.exception("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal storage error"},
        )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ResourceStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[ResourceStore]
        Store adapter shared by all services.  Defaults to a
        ``SQLiteStore`` on ``settings.database_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    if store is None:
        store = SQLiteStore(get_database_path(settings.database_path))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_file or None)
        store.initialise()
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.services = build_services(store)

    origins = [origin.strip() for origin in settings.cors_origin.split(",") if origin.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    register_exception_handlers(app)
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
