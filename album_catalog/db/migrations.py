"""Schema Migrations — programmatic alembic upgrade used at start-up.

Invariants:
    - Upgrades to head; already-applied revisions are a no-op
    - The URL passed here wins over the one in alembic.ini

Design Decisions:
    - configure_logger=False: env.py must not replace the application's logging
    - Called before uvicorn starts, so env.py's asyncio.run() owns the loop
"""

import logging

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)


def run_migrations(database_url: str, config_path: str = "alembic.ini") -> None:
    """Apply every pending migration to the database at database_url."""
    config = Config(config_path)
    # ConfigParser interpolation: a literal % must be doubled
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    config.attributes["configure_logger"] = False
    logger.info("Migrating database", extra={"operation": "upgrade head"})
    command.upgrade(config, "head")
