"""Authentication schemas."""

from pydantic import EmailStr, Field, field_validator

from src.schemas.base import APIModel

# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class AuthRequest(APIModel):
    """Signup and signin request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class Token(APIModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
