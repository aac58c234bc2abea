"""
Quotes API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers.
Who:   uvicorn (`uvicorn quotes_api.main:app`) and the test client.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Req ID → Logging → GZip → CORS        │
    │                                                     │
    │  Routes:      /quotes   /quotes/{id}   /health      │
    │                                                     │
    │  Exception Handlers:                                │
    │    QuoteNotFoundError → 404                         │
    │    QuoteLookupError / QuoteCreateError → 500        │
    │    Exception (fallback) → 500                       │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from quotes_api import __version__
from quotes_api.config import settings
from quotes_api.database import dispose_engine
from quotes_api.exceptions import QuotesApiError, QuoteNotFoundError
from quotes_api.middleware.logging import RequestLoggingMiddleware
from quotes_api.middleware.request_id import RequestIDMiddleware, request_id_var
from quotes_api.routes import health, quotes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Our access middleware replaces uvicorn's; SQL echo only in DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if settings.log_level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Quotes API %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Quotes API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to `{"message": ...}` JSON responses.

    Handler hierarchy:
        QuoteNotFoundError  → 404 "no quote matches that ID"
        QuotesApiError      → exc.status_code with exc.message
        Exception           → 500 (unexpected errors)

    The context dict and stack traces are logged, never returned.
    """

    @app.exception_handler(QuoteNotFoundError)
    async def handle_not_found(request: Request, exc: QuoteNotFoundError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    @app.exception_handler(QuotesApiError)
    async def handle_quotes_api_error(request: Request, exc: QuotesApiError):
        rid = request_id_var.get("")
        logger.error(
            "[%s] %s: %s | Context: %s",
            rid,
            type(exc).__name__,
            exc.message,
            exc.context,
            exc_info=exc if exc.__cause__ is not None else None,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": QuotesApiError.default_message},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Middleware executes in reverse order of addition, so the request ID is
    assigned before the access logger runs.
    """
    app = FastAPI(
        title="Quotes API",
        description="List, fetch and create quotations.",
        version=__version__,
        lifespan=lifespan,
    )

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

    app.include_router(quotes.router)
    app.include_router(health.router)

    return app


app = create_app()
