"""Album Schemas — Pydantic models for album request and response bodies.

Invariants:
    - AlbumRequest fields default to zero values; the validator reports them
    - A JSON null is read as a missing field
    - AlbumRequest is strict: a wrong JSON type is a malformed body, not coerced
    - price must fit the signed 64-bit column, otherwise the body is malformed
    - AlbumResponse mirrors the Album entity field for field

Design Decisions:
    - Field checks live in core/validate.py (injectable), not in Pydantic
      validators, so problems come back keyed by field with fixed wording
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

PRICE_MIN = -(2 ** 63)
PRICE_MAX = 2 ** 63 - 1


class AlbumRequest(BaseModel):
    """Create/update payload."""
    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "example": {
                "title": "Babylon By Gus Vol.1 - O Ano do Macaco",
                "artist": "Black Alien",
                "price": 12345,
            },
        },
    )

    title: str = ""
    artist: str = ""
    price: int = Field(default=0, ge=PRICE_MIN, le=PRICE_MAX)

    @field_validator("title", "artist", "price", mode="before")
    @classmethod
    def null_as_missing(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class AlbumResponse(BaseModel):
    """Public album representation."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    artist: str
    price: int
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    """Error body carrying a single message."""
    message: str = Field(examples=["album not found"])


class ProblemsResponse(MessageResponse):
    """Error body for a request that failed field validation."""
    problems: dict[str, str] = Field(
        examples=[{"title": "is empty", "price": "is not greater than zero"}],
    )
