"""Task Manager API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.base_url (no auto-discovery)
    - Global error handlers map TaskManagerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_manager.api.error_handlers import register_error_handlers
from task_manager.api.routes import health, tasks
from task_manager.infrastructure.database import close_db, init_db
from task_manager.infrastructure.observability import setup_logging
from task_manager.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Task Manager API started")
    yield
    await close_db()
    logger.info("Task Manager API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Task Manager API", version="1.0.0", lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router, prefix=settings.base_url)
    app.include_router(tasks.router, prefix=settings.base_url)

    register_error_handlers(app)
    return app


app = create_app()
