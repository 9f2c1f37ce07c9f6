"""imgmod API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers registered from api/error_handlers.py
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from imgmod.api.error_handlers import register_error_handlers
from imgmod.api.routes import admin, health, users
from imgmod.config import get_settings
from imgmod.infrastructure.database import init_db
from imgmod.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("imgmod API started")
    yield
    await manager.dispose()
    logger.info("imgmod API shutting down")


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, routes and error handlers."""
    settings = get_settings()
    app = FastAPI(title="imgmod API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(admin.router)

    register_error_handlers(app)
    return app


app = create_app()
