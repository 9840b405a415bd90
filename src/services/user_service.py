"""User profile service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User
from src.schemas.user import UserUpdate
from src.services.auth import AuthContext
from src.services.exceptions import EmailTaken, Unauthorized, ValidationError

logger = logging.getLogger(__name__)


class UserService:
    """Reads and edits the authenticated user's own profile."""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, ctx: AuthContext) -> User:
        user = self.db.query(User).filter(User.id == ctx.user_id).first()
        if user is None:
            # Token outlived its user
            raise Unauthorized("User not found")
        return user

    def update_profile(self, ctx: AuthContext, data: UserUpdate) -> User:
        """
        Apply a partial update to the caller's profile.

        Only fields present in the request are touched. Names may be cleared
        with an explicit null; email may not.
        """
        user = self.get_profile(ctx)
        changes = data.model_dump(exclude_unset=True)

        if "email" in changes:
            email = changes["email"]
            if email is None:
                raise ValidationError("email cannot be null")
            if email != user.email:
                taken = (
                    self.db.query(User.id).filter(User.email == email, User.id != user.id).first()
                )
                if taken:
                    raise EmailTaken(email)

        for field, value in changes.items():
            setattr(user, field, value)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise EmailTaken(changes.get("email", user.email)) from e
        self.db.refresh(user)

        logger.info(f"Updated profile of user {user.id}: {sorted(changes)}")
        return user
