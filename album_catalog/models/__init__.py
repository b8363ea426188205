"""ORM Models — SQLAlchemy declarative models for persisted entities.

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from album_catalog.models.album import AlbumRecord  # noqa: F401
