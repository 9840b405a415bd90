"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_context, get_bookmark_service
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.services.auth import AuthContext
from src.services.bookmark_service import BookmarkService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.post("/bookmark", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
def create_bookmark(
    bookmark_data: BookmarkCreate,
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Create a new bookmark owned by the current user."""
    return service.create_bookmark(ctx, bookmark_data)


@router.get("", response_model=list[BookmarkResponse])
def get_bookmarks(
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get all bookmarks of the current user."""
    return service.list_bookmarks(ctx)


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
def get_bookmark(
    bookmark_id: int,
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get a single bookmark."""
    return service.get_bookmark(ctx, bookmark_id)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
def update_bookmark(
    bookmark_id: int,
    bookmark_data: BookmarkUpdate,
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Update a bookmark."""
    return service.update_bookmark(ctx, bookmark_id, bookmark_data)


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmark(
    bookmark_id: int,
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Permanently delete a bookmark."""
    service.delete_bookmark(ctx, bookmark_id)
