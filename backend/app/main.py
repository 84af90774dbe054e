"""
Portfolio Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and the
       resource routers, and optionally mounts the static front-end.
Who:   uvicorn (uvicorn app.main:app) and the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                     FastAPI App                      │
    │                                                      │
    │  Middleware:  Req ID → Logging → GZip → CORS         │
    │                                                      │
    │  Routes (prefix /api, dispatched by ?action=):       │
    │    /profile  /skills  /projects  /education          │
    │    /hobbies  /contacts              + GET /health    │
    │                                                      │
    │  Exception Handlers:                                 │
    │    PortfolioError → its status_code (400/404/405/500)│
    │    RequestValidationError → 400                      │
    │    Exception → 500                                   │
    └──────────────────────────────────────────────────────┘

Every error leaves the app as the failure envelope:
    {"success": false, "message": ..., "error": <code>, "request_id": ...}
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import DatabaseError, MethodNotAllowedError, PortfolioError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import contacts, education, health, hobbies, profile, projects, skills
from app.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """Configure the root logger once, writing to stdout."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.log_level == "DEBUG" else logging.WARNING
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup logging; engine disposal on shutdown."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("Portfolio Backend %s starting up...", __version__)
    logger.info("Database: %s", settings.database_url.split("://", 1)[0])
    logger.info("API prefix: %s", settings.api_prefix or "/")
    if settings.frontend_dir:
        logger.info("Serving front-end from %s", settings.frontend_dir)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Portfolio Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # The Exception handler runs outside RequestIDMiddleware, after the
    # ContextVar has been reset; request.state still carries the id.
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _failure(status_code: int, error: str, message: str, rid: str = "") -> JSONResponse:
    rid = rid or request_id_var.get("")
    body = ErrorResponse(message=message, error=error, request_id=rid)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort 500 handler, installed on the outermost middleware.

    Besides genuine bugs this sees SQLAlchemy errors raised by the commit
    in get_db_session, which runs after the service has returned; those
    are reported as a database error.
    """
    rid = _request_id(request)
    if isinstance(exc, SQLAlchemyError):
        logger.error("[%s] Database error on commit: %s", rid, str(exc), exc_info=True)
        response = _failure(500, DatabaseError.error_code, "Error saving changes", rid)
    else:
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        response = _failure(500, "internal_server_error", "An unexpected error occurred", rid)
    if rid:
        response.headers["X-Request-ID"] = rid
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the failure envelope.

    Handler hierarchy:
        DatabaseError           → 500, context logged server-side only
        PortfolioError (base)   → exc.status_code (400 / 404 / 405)
        RequestValidationError  → 400 (e.g. ?id=abc)
        Exception (fallback)    → 500 (SQLAlchemyError from commit → database_error)
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _failure(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(PortfolioError)
    async def handle_portfolio_error(request: Request, exc: PortfolioError):
        rid = request_id_var.get("")
        logger.warning(
            "[%s] %s on %s %s: %s",
            rid, exc.error_code, request.method, request.url.path, exc.message,
        )
        response = _failure(exc.status_code, exc.error_code, exc.message)
        if isinstance(exc, MethodNotAllowedError):
            response.headers["Allow"] = ", ".join(exc.allowed)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        message = "Invalid value for: " + ", ".join(fields) if fields else "Invalid request"
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), fields)
        return _failure(400, "validation_error", message)

    app.add_exception_handler(Exception, handle_unexpected_error)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, handlers and routers into a FastAPI instance."""
    app = FastAPI(
        title="Portfolio API",
        description=(
            "Content backend for a personal portfolio site: profile, skills, "
            "projects, education, hobbies/tools and contact messages."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in reverse order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(profile.router)
    app.include_router(skills.router)
    app.include_router(projects.router)
    app.include_router(education.router)
    app.include_router(hobbies.router)
    app.include_router(contacts.router)
    app.include_router(health.router)

    # Mounted last so the API routes take precedence over "/"
    if settings.frontend_dir:
        app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")

    return app


app = create_app()
