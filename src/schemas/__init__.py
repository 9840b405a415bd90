"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthRequest, Token
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.schemas.user import UserResponse, UserUpdate

__all__ = [
    "AuthRequest",
    "Token",
    "UserUpdate",
    "UserResponse",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
]
