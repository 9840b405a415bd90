"""User profile schemas."""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field

from src.schemas.base import APIModel


class UserUpdate(APIModel):
    """Partial update of the current user's profile."""

    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)


class UserResponse(APIModel):
    """User information response. The password hash is never part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
