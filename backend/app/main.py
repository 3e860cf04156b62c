"""
Flavorbase Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers.
Who:   uvicorn (uvicorn app.main:app) and the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware:   Request ID → Logging → GZip → CORS    │
    │                                                      │
    │  Routes:       {api_prefix}/flavor ...               │
    │                {api_prefix}/ingredient(s) ...        │
    │                {api_prefix}/ingredientCategories ... │
    │                {api_prefix}/preparations             │
    │                /health                               │
    │                                                      │
    │  Exceptions:   validation → 400   auth → 401         │
    │                unexpected → 500 text                 │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, report unsafe settings, log the listen address
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import AuthenticationError, RequestValidationFailed
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import api_router, health
from app.validation import DEFAULT_MESSAGE, Location

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Resource handlers log under the resource name ("flavor", "ingredients",
    ...), the access log under "flavorbase.access".
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Flavorbase Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Development setups run with these warnings; the server still starts
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d%s", settings.backend_host,
                settings.backend_port, settings.api_prefix)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Flavorbase Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

_LOCATIONS = {
    "path": Location.PATH.value,
    "query": Location.QUERY.value,
    "body": Location.BODY.value,
    "header": "headers",
}


def framework_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """FastAPI's own parameter errors in the same descriptor shape as ours."""
    errors = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        source = _LOCATIONS.get(loc[0], str(loc[0])) if loc else "body"
        descriptor: Dict[str, Any] = {
            "location": source,
            "field": ".".join(str(part) for part in loc[1:]),
            "message": DEFAULT_MESSAGE,
        }
        if "input" in error and error["input"] is not None:
            descriptor["value"] = error["input"]
        errors.append(descriptor)
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """
    Handler hierarchy:
        RequestValidationFailed  → 400 {"errors": [...]}
        RequestValidationError   → 400 {"errors": [...]} (FastAPI's own checks)
        AuthenticationError      → 401 JSON, WWW-Authenticate: Bearer
        Exception (fallback)     → 500 text/plain, stack trace logged only
    """

    @app.exception_handler(RequestValidationFailed)
    async def handle_validation_failed(request: Request, exc: RequestValidationFailed):
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return JSONResponse(status_code=400, content={"errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"errors": framework_errors(exc)})

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Authentication failed for %s: %s", rid, request.url.path, exc.message)
        return JSONResponse(
            status_code=401,
            content={
                "error": "unauthorized",
                "message": exc.message,
                "request_id": rid,
            },
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return PlainTextResponse(str(exc) or "Internal Server Error", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Flavorbase API",
        description=(
            "Flavor, ingredient and preparation catalogue. Lookups answer 204 "
            "when nothing matches; invalid parameters answer 400 with field errors."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in reverse order of addition: RequestID runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()
