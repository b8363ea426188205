"""Process Entry Point — configuration, optional migration, HTTP listener.

Invariants:
    - SIGINT/SIGTERM stop new connections; in-flight requests get
      shutdown_timeout_seconds before forced termination
    - Migrations (MIGRATE_DB=true) complete before the listener opens

Design Decisions:
    - uvicorn.Server over `uvicorn.run`: explicit Config keeps every knob in Settings
    - log_config=None: uvicorn loggers propagate to the root JSON handler
"""

import logging

import uvicorn

from album_catalog.config import get_settings
from album_catalog.db.migrations import run_migrations
from album_catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_server_config() -> uvicorn.Config:
    settings = get_settings()
    return uvicorn.Config(
        "album_catalog.main:app",
        host=settings.server_host,
        port=settings.server_port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )


def run() -> None:
    """Start serving until interrupted."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.migrate_db:
        run_migrations(settings.database_url, settings.alembic_config)
    config = build_server_config()
    logger.info(f"listening on {config.host}:{config.port}")
    uvicorn.Server(config).run()
