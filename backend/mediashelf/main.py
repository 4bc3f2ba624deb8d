"""MediaShelf API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MediaShelfError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager; provider clients and
      the engine are released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers live in api.error_handlers
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediashelf.api.dependencies import close_provider_clients
from mediashelf.api.error_handlers import register_error_handlers
from mediashelf.api.routes import (
    curated_lists, folders, health, movies, photos, search_history, users,
)
from mediashelf.config import get_settings
from mediashelf.infrastructure import database
from mediashelf.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("MediaShelf API started")
    yield
    logger.info("MediaShelf API shutting down")
    await close_provider_clients()
    manager = database.get_db_manager()
    if manager:
        await manager.dispose()


app = FastAPI(title="MediaShelf API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(users.router)
app.include_router(photos.router)
app.include_router(search_history.router)
app.include_router(movies.router)
app.include_router(curated_lists.router)
app.include_router(folders.router)

register_error_handlers(app)
