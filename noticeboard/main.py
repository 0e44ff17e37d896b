"""
Notice Board — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       holding an explicit Database handle on app.state.
Who:   uvicorn (`uvicorn noticeboard.main:app`, or `python -m noticeboard
       serve`) and the test suite (create_app with an in-memory database).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:      {prefix}  GET / POST                  │
    │               {prefix}/{id}  GET / PUT / DELETE     │
    │               /health                               │
    │                                                     │
    │  Exception Handlers:                                │
    │    ValidationError → 400 │ NotFound → 404 │ DB → 500 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging → connect to the store (exit if unreachable)
    Shutdown: dispose the engine
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from noticeboard import __version__
from noticeboard.config import Settings, settings as default_settings
from noticeboard.database import Database
from noticeboard.exceptions import (
    DatabaseError,
    NoticeBoardError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from noticeboard.logging_config import setup_logging
from noticeboard.middleware.logging import RequestLoggingMiddleware
from noticeboard.middleware.request_id import RequestIDMiddleware, request_id_var
from noticeboard.routes import health, notices

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup sequence:
        1. Setup logging
        2. Connect the Database handle (unless the caller already did)
           StoreUnavailableError propagates: uvicorn aborts startup and the
           process exits with a non-zero status.

    Shutdown sequence:
        1. Dispose the database engine
    """
    cfg: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(cfg.log_level)
    logger.info("Notice Board API starting up...")

    if not database.is_connected:
        try:
            await database.connect()
        except StoreUnavailableError as e:
            logger.critical("Cannot reach the notice store: %s", e.error)
            logger.critical("Exiting.")
            raise

    logger.info("Notices mounted at %s", cfg.api_prefix)
    logger.info("Server ready on %s:%d", cfg.backend_host, cfg.backend_port)

    yield

    logger.info("Notice Board API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(message: str, error: str) -> dict:
    return {"message": message, "error": error, "request_id": request_id_var.get("")}


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP status codes and `{message, error}` bodies.

    Handler hierarchy:
        ValidationError / RequestValidationError → 400
        NotFoundError                            → 404
        StarletteHTTPException                   → its own status (405, unknown routes)
        DatabaseError / NoticeBoardError         → 500
        Exception (fallback)                     → 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.error)
        return JSONResponse(status_code=400, content=_error_body(exc.message, exc.error))

    # Schema failures (missing, blank or mistyped fields, bad JSON) get the
    # same 400 body as ValidationError
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return await handle_validation_error(
            request, ValidationError(error=_describe_validation_errors(exc))
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body(exc.message, exc.error))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        detail = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(detail, detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.error, exc.context,
        )
        return JSONResponse(status_code=500, content=_error_body(exc.message, exc.error))

    @app.exception_handler(NoticeBoardError)
    async def handle_app_error(request: Request, exc: NoticeBoardError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.error)
        return JSONResponse(status_code=500, content=_error_body("Internal Server Error", exc.error))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal Server Error", type(exc).__name__),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the process-wide settings.
        database: An existing Database handle. When omitted one is built from
                  settings and connected during startup. Tests pass a handle
                  they have already connected.
    """
    cfg = settings or default_settings

    app = FastAPI(
        title="Notice Board API",
        description="Create, read, update and delete short text notices.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.database = database or Database.from_settings(cfg)

    # Middleware executes in reverse order of addition:
    # Request ID → Logging → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notices.build_router(cfg.api_prefix))
    app.include_router(health.router)

    return app


# uvicorn expects `noticeboard.main:app` to be importable
app = create_app()
