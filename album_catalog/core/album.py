"""Album Entity — the sole domain record, independent of persistence.

Invariants:
    - title and artist non-empty, price > 0 (enforced by validate_album before
      an Album is built from user input)
    - created_at/updated_at are timezone-aware UTC datetimes

Design Decisions:
    - Frozen dataclass: updates produce a new value via with_changes()
    - Separate from the ORM model so routes and tests never touch SQLAlchemy
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from album_catalog.core.domain_types import AlbumId


def utc_now() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normalize to UTC. Naive values are taken as already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Album:
    """Data about a music album."""
    id: AlbumId
    title: str
    artist: str
    price: int
    created_at: datetime
    updated_at: datetime

    def with_changes(
        self, *, title: str, artist: str, price: int, updated_at: datetime,
    ) -> "Album":
        return replace(
            self, title=title, artist=artist, price=price, updated_at=updated_at,
        )
