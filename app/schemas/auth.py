"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.core.security import (
    BCRYPT_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    password_too_long,
)
from app.schemas.user import UserSafe


class SignupRequest(BaseModel):
    """New account details. Unknown fields are rejected; the password is kept verbatim."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Username (at least 3 characters)",
    )
    email: EmailStr = Field(..., description="Email used to log in")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password (at least 8 characters)",
    )

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, v: str) -> str:
        if password_too_long(v):
            raise ValueError(
                f"Password must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded"
            )
        return v


class LoginRequest(BaseModel):
    """Credentials for login. A password past the bcrypt byte limit fails verification like any other."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr = Field(..., description="Email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class LoginData(BaseModel):
    """Session token (also set as the 'token' cookie) and the logged-in user."""

    token: str = Field(..., description="JWT session token")
    user: UserSafe
