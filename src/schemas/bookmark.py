"""Bookmark schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from src.schemas.base import APIModel


class BookmarkCreate(APIModel):
    """Create a new bookmark."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10000)
    link: str = Field(..., min_length=1, max_length=2048)


class BookmarkUpdate(APIModel):
    """Update a bookmark. Only fields present in the request are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10000)
    link: str | None = Field(None, min_length=1, max_length=2048)


class BookmarkResponse(APIModel):
    """Bookmark response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
