"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.user import User
from src.services.exceptions import EmailTaken, InvalidCredentials, InvalidToken

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class AuthContext:
    """Identity of the authenticated caller, passed explicitly into services."""

    user_id: int
    email: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
    now = datetime.now(UTC)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> AuthContext:
    """Decode and validate a JWT token.

    Raises InvalidToken for a bad signature, an expired token or a payload
    without an integer ``sub`` claim.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidToken() from e

    subject = payload.get("sub")
    email = payload.get("email")
    if subject is None or not isinstance(email, str):
        raise InvalidToken()
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as e:
        raise InvalidToken() from e

    return AuthContext(user_id=user_id, email=email)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def signup(db: Session, email: str, password: str) -> str:
    """Register a new user and return an access token for them."""
    if get_user_by_email(db, email):
        raise EmailTaken(email)

    user = User(email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent signup for the same address
        db.rollback()
        raise EmailTaken(email) from e
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return create_access_token(user.id, user.email)


def signin(db: Session, email: str, password: str) -> str:
    """Authenticate a user by email and password and return an access token."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed signin attempt")
        raise InvalidCredentials()

    return create_access_token(user.id, user.email)
