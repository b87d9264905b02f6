"""
Roster — Local Store Application Factory
=========================================

What:  Builds the FastAPI app that emulates the hosted employee store in
       memory, plus the logging setup shared by every roster entry point.
How:   create_app() wires middleware, exception handlers and routes around
       a fresh EmployeeStore kept on app.state.
Who:   `roster-store` console script (uvicorn), and tests through
       httpx.ASGITransport.

Application Layout:
    Middleware:  [Request ID] → [Logging]
    Routes:      {collection} CRUD, GET /health
    Handlers:    ValidationError→400 │ NotFoundError→404 │ RosterError→500
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Iterable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from roster import __version__
from roster.config import settings
from roster.exceptions import NotFoundError, RosterError, ValidationError
from roster.middleware.logging import RequestLoggingMiddleware
from roster.middleware.request_id import RequestIDMiddleware, request_id_var
from roster.routes import employees, health
from roster.store import EmployeeStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger for roster processes.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Level:  `level` if given, else settings.log_level
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # roster.http already logs every exchange
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info(
        "Roster store ready at http://%s:%d%s (%d records)",
        settings.store_host,
        settings.store_port,
        app.state.collection_path,
        len(app.state.store),
    )

    yield

    logger.info("Roster store shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map roster exceptions to ErrorResponse bodies.

        ValidationError → 400
        NotFoundError   → 404
        RosterError     → 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RosterError)
    async def handle_roster_error(request: Request, exc: RosterError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    seed: Optional[Iterable[Dict[str, Any]]] = None,
    collection_path: Optional[str] = None,
) -> FastAPI:
    """
    Create the local store application.

    Args:
        seed: Records to preload; they receive ids 1..n in order.
        collection_path: Mount point of the collection; defaults to
                         settings.store_collection_path.
    """
    app = FastAPI(
        title="Roster Store",
        description="In-memory stand-in for the hosted employee collection.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = EmployeeStore(seed)
    app.state.collection_path = collection_path or settings.store_collection_path

    # Last added runs first: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(employees.router, prefix=app.state.collection_path)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve a fresh store with uvicorn."""
    import uvicorn

    uvicorn.run(
        create_app(),
        host=settings.store_host,
        port=settings.store_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
