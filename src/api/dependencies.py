"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.auth import AuthContext, decode_access_token
from src.services.bookmark_service import BookmarkService
from src.services.exceptions import Unauthorized
from src.services.user_service import UserService

# Missing or non-Bearer headers are reported by get_auth_context, not HTTPBearer
security = HTTPBearer(auto_error=False)


def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> AuthContext:
    """Get the authenticated identity from the JWT bearer token."""
    if credentials is None:
        raise Unauthorized()

    return decode_access_token(credentials.credentials)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_bookmark_service(
    db: Annotated[Session, Depends(get_db)],
) -> BookmarkService:
    """Get bookmark service with dependencies."""
    return BookmarkService(db)
