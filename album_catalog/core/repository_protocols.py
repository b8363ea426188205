"""Boundary Protocols — contract between the HTTP shell and album persistence.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Every "no rows matched" outcome is signalled with AlbumNotFoundError
    - Any other failure propagates unchanged to the caller

Design Decisions:
    - Protocol over ABC: structural subtyping, test spies need no inheritance
    - Async methods: implementations do IO
"""

from typing import Protocol

from album_catalog.core.album import Album
from album_catalog.core.domain_types import AlbumId


class AlbumStorage(Protocol):
    """Contract for album persistence — implemented by infrastructure."""

    async def insert(self, album: Album) -> None:
        """Insert an album."""
        ...

    async def find_all(self, offset: int, limit: int) -> list[Album]:
        """Albums ordered by title (case-insensitive) within offset/limit.

        Raises AlbumNotFoundError when the window holds no album.
        """
        ...

    async def find_one(self, album_id: AlbumId) -> Album:
        """Album whose id equals album_id, else AlbumNotFoundError."""
        ...

    async def update(self, album: Album) -> None:
        """Overwrite the stored album with album.id, else AlbumNotFoundError."""
        ...

    async def remove(self, album_id: AlbumId) -> None:
        """Delete the album with album_id, else AlbumNotFoundError."""
        ...
