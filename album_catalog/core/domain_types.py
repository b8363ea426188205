"""Domain Types — identity type and pagination window for the album catalog.

Invariants:
    - AlbumId wraps a UUID — never use a bare UUID in domain signatures
    - page_size is bounded 1..MAX_ALBUMS_PAGE_SIZE, page_number >= 1
    - Page.offset == page_size * (page_number - 1), Page.limit == page_size
    - Parsed integers and the offset fit a signed 64-bit column

Design Decisions:
    - NewType over dataclass wrapper: zero runtime cost, full type-checker support
    - Query parameters parsed here (not by FastAPI) so every failure keeps its
      own message, checked in a fixed order
"""

import re
from dataclasses import dataclass
from typing import NewType
from uuid import UUID

from album_catalog.core.errors import MalformedRequestError


# ─── Identity Types ──────────────────────────────────────────────

AlbumId = NewType("AlbumId", UUID)


def parse_album_id(raw: str) -> AlbumId:
    """Parse a path segment into an AlbumId or raise MalformedRequestError."""
    try:
        return AlbumId(UUID(raw))
    except (ValueError, TypeError):
        raise MalformedRequestError("malformed album id") from None


# ─── Pagination ──────────────────────────────────────────────────

MAX_ALBUMS_PAGE_SIZE = 50

_INTEGER = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class Page:
    """Offset/limit window handed to the storage."""
    offset: int
    limit: int

    @classmethod
    def from_size_and_number(cls, page_size: int, page_number: int) -> "Page":
        return cls(offset=page_size * (page_number - 1), limit=page_size)


def _parse_int(raw: str) -> int | None:
    if not _INTEGER.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_page(page_size_raw: str | None, page_number_raw: str | None) -> Page:
    """Turn raw page_size/page_number query values into a Page.

    Raises MalformedRequestError with the first failing check's message.
    """
    if page_size_raw is None:
        raise MalformedRequestError("query parameter page_size is missing")
    page_size = _parse_int(page_size_raw)
    if page_size is None:
        raise MalformedRequestError("page size is not a valid number")
    if page_number_raw is None:
        raise MalformedRequestError("query parameter page_number is missing")
    page_number = _parse_int(page_number_raw)
    if page_number is None:
        raise MalformedRequestError("page number is not a valid number")

    if page_size < 1:
        raise MalformedRequestError("page size is less than 1")
    if page_size > MAX_ALBUMS_PAGE_SIZE:
        raise MalformedRequestError(
            f"page size is greater than {MAX_ALBUMS_PAGE_SIZE}",
        )
    if page_number < 1:
        raise MalformedRequestError("page number is less than 1")

    page = Page.from_size_and_number(page_size, page_number)
    if page.offset > INT64_MAX:
        raise MalformedRequestError("page number is too large")
    return page
