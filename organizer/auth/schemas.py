"""
Organizer API - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

from pydantic import BaseModel, Field, field_validator

from organizer.config import settings
from organizer.state.schemas import UserState

# bcrypt only accepts passwords up to this many bytes
BCRYPT_MAX_PASSWORD_BYTES = 72


class AuthenticateRequest(BaseModel):
    """Request schema for POST /authenticate."""

    username: str
    password: str


class UserCreateRequest(BaseModel):
    """Request schema for POST /user/create."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=settings.MIN_PASSWORD_LENGTH, max_length=BCRYPT_MAX_PASSWORD_BYTES)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("username must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return value


class AuthenticateResponse(BaseModel):
    """Response schema for successful authentication."""

    token: str
    state: UserState


class UserCreateResponse(BaseModel):
    """Response schema for a newly created account."""

    id: str
    name: str
    token: str
    state: UserState
