"""
Task Board API Server

Entry point for the FastAPI application.
"""

import structlog
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import PASSWORD_HEADER
from app.core.config import get_settings
from app.core.database import get_session, init_db
from app.core.errors import (
    BoardError,
    StoreUnavailableError,
    board_error_handler,
    request_validation_handler,
)
from app.core.logging_setup import configure_logging
from app.core.middleware import SecurityHeadersMiddleware
from app.api.v1 import router as api_v1_router

settings = get_settings()
log = structlog.get_logger()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.board_title,
        description="Kanban task board backend.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Middleware (order matters — outermost first)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", PASSWORD_HEADER],
    )

    app.add_exception_handler(BoardError, board_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # API routes
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint for liveness probes."""
        return {"status": "ok"}

    @app.get("/ready", tags=["System"])
    async def readiness_check(session: AsyncSession = Depends(get_session)):
        """Readiness check endpoint for startup probes."""
        try:
            await session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            log.exception("Task store not reachable")
            raise StoreUnavailableError("Task store is not reachable.")
        return {"status": "ready"}

    @app.on_event("startup")
    async def on_startup():
        await init_db()
        log.info("Task board starting", board=settings.board_title)

    @app.on_event("shutdown")
    async def on_shutdown():
        log.info("Task board shutting down")

    return app


app = create_app()
