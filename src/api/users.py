"""User profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_auth_context, get_user_service
from src.schemas.user import UserResponse, UserUpdate
from src.services.auth import AuthContext
from src.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    return service.get_profile(ctx)


@router.patch("", response_model=UserResponse)
def edit_user(
    user_data: UserUpdate,
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's name or email."""
    return service.update_profile(ctx, user_data)
