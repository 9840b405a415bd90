"""Bookmark service: owner-scoped CRUD."""

import logging

from sqlalchemy.orm import Session

from src.models.bookmark import Bookmark
from src.schemas.bookmark import BookmarkCreate, BookmarkUpdate
from src.services.auth import AuthContext
from src.services.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)

# Fields that must stay non-null once a bookmark exists
REQUIRED_FIELDS = ("title", "link")

# Largest value the Integer primary key column can hold
MAX_BOOKMARK_ID = 2**31 - 1


class BookmarkService:
    """
    Service for bookmark operations.

    Every query filters on the caller's user id, so a bookmark owned by someone
    else behaves exactly like one that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def _get_owned(self, ctx: AuthContext, bookmark_id: int) -> Bookmark:
        # Ids outside the column's range would fail in the driver
        if not 0 < bookmark_id <= MAX_BOOKMARK_ID:
            raise NotFound("Bookmark")

        bookmark = (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.user_id == ctx.user_id)
            .first()
        )
        if bookmark is None:
            raise NotFound("Bookmark")
        return bookmark

    def create_bookmark(self, ctx: AuthContext, data: BookmarkCreate) -> Bookmark:
        bookmark = Bookmark(
            user_id=ctx.user_id,
            title=data.title,
            description=data.description,
            link=data.link,
        )
        self.db.add(bookmark)
        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def list_bookmarks(self, ctx: AuthContext) -> list[Bookmark]:
        """Get all bookmarks owned by the caller, oldest first."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.user_id == ctx.user_id)
            .order_by(Bookmark.id)
            .all()
        )

    def get_bookmark(self, ctx: AuthContext, bookmark_id: int) -> Bookmark:
        return self._get_owned(ctx, bookmark_id)

    def update_bookmark(
        self, ctx: AuthContext, bookmark_id: int, data: BookmarkUpdate
    ) -> Bookmark:
        """Merge the fields present in ``data`` into the bookmark."""
        bookmark = self._get_owned(ctx, bookmark_id)
        changes = data.model_dump(exclude_unset=True)

        for field in REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationError(f"{field} cannot be null")

        for field, value in changes.items():
            setattr(bookmark, field, value)

        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def delete_bookmark(self, ctx: AuthContext, bookmark_id: int) -> None:
        bookmark = self._get_owned(ctx, bookmark_id)
        self.db.delete(bookmark)
        self.db.commit()
        logger.info(f"Deleted bookmark {bookmark_id} of user {ctx.user_id}")
