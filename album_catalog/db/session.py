"""Async Session Factory — provides async DB sessions outside FastAPI.

Invariants:
    - Sessions never expire attributes on commit

Design Decisions:
    - Separate from infrastructure/database.py: scripts and test fixtures need a raw
      factory without the request-scoped error mapping
    - In-memory SQLite gets a StaticPool so every session sees the same database
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool


def create_engine_for_url(database_url: str) -> AsyncEngine:
    """Create an async engine; in-memory SQLite shares one connection."""
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url, echo=False, poolclass=StaticPool,
        )
    return create_async_engine(database_url, echo=False)


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
