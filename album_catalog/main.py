"""Album Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → {"message": ...} JSON responses
    - Database pool created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Settings read inside the lifespan, not at import: tests import the app
      without a configured environment
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from album_catalog import __version__
from album_catalog.api.error_handlers import register_error_handlers
from album_catalog.api.routes import albums, health
from album_catalog.config import get_settings
from album_catalog.infrastructure.database import close_db, init_db
from album_catalog.infrastructure.observability import setup_logging

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
    logger.info("Album Catalog API started")
    yield
    await close_db()
    logger.info("Album Catalog API shut down")


app = FastAPI(
    title="Album Catalog",
    description="RESTful API server that CRUDs music albums.",
    version=__version__,
    lifespan=lifespan,
)

# Routes
app.include_router(health.router)
app.include_router(albums.router)

register_error_handlers(app)
