"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.schemas.auth import AuthRequest, Token
from src.services.auth import signin, signup

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(
    credentials: AuthRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    return Token(access_token=signup(db, credentials.email, credentials.password))


@router.post("/signin", response_model=Token)
def login(
    credentials: AuthRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    return Token(access_token=signin(db, credentials.email, credentials.password))
