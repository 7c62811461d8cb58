"""Expense Tracker API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings are attached to app.state at construction; the DB manager in the lifespan
    - Global error handlers render every failure as {"error": "<message>"}
    - CORS configured from settings (not hardcoded)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import expenses, health
from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        ssl=settings.database_ssl,
    )
    logger.info("Expense Tracker API started")
    yield
    logger.info("Expense Tracker API shutting down")
    await app.state.db_manager.dispose()
    app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around an explicit Settings instance."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Expense Tracker API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(expenses.router)

    register_error_handlers(app)
    return app


def run() -> None:
    """Console entry point: serve on settings.host:settings.port."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
