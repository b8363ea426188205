"""Database Session Manager — connection pool, per-request sessions, readiness.

Invariants:
    - A session that exits with an exception is rolled back, then closed
    - SQLAlchemy failures leave a session as DatabaseError, logged once here
    - Catalog errors (not-found, internal) pass through untouched
    - health_check never raises; a failure is logged exactly once

Design Decisions:
    - Module-level db_manager is created by the FastAPI lifespan, not on import
    - pool_pre_ping so a restarted database does not fail the first request
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from album_catalog.core.errors import DatabaseError
from album_catalog.db.session import create_session_factory

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the album database engine and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )
        self._session_factory = create_session_factory(self.engine)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; roll back on any exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(
                "database operation failed",
                extra={"error": str(e), "operation": type(e).__name__},
            )
            raise DatabaseError(str(e), type(e).__name__) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Run SELECT 1; False when the database cannot answer."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except DatabaseError:
            return False
        except Exception as e:
            logger.error("database health check failed", extra={"error": str(e)})
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped session."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
