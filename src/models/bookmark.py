"""Bookmark model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from src.database import Base
from src.models.mixins import TimestampMixin


class Bookmark(Base, TimestampMixin):
    """A saved link owned by exactly one user.

    Ownership is the ``user_id`` column. It is set when the bookmark is created
    and every query against this table filters on it.
    """

    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    link = Column(String(2048), nullable=False)
