"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import AuthenticatedUser, CamelModel

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72
MIN_PASSWORD_LENGTH = 6


class User(BaseModel):
    """
    A user record as held by the credential store.

    Carries the password hash, so it must never be returned from an
    endpoint directly. Use to_response() instead.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="bcrypt digest")
    created_at: datetime = Field(..., description="Account creation time")

    def to_response(self) -> "UserResponse":
        """Public view of the user, without the password hash."""
        return UserResponse(id=self.id, email=self.email, created_at=self.created_at)


class UserResponse(CamelModel):
    """User as returned by the API."""

    id: str
    email: str
    created_at: datetime


class TokenClaims(BaseModel):
    """Decoded identity token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")

    def to_user(self) -> AuthenticatedUser:
        return AuthenticatedUser(id=self.sub, email=self.email)


class SignupRequest(BaseModel):
    """Request to create an account."""

    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class SigninRequest(BaseModel):
    """Request to sign in with email and password."""

    email: EmailStr
    password: str


class AuthResponse(CamelModel):
    """Token plus public user info, returned by signup and signin."""

    message: str
    token: str
    user: UserResponse
