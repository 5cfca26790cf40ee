"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from videobelajar.schemas.common import (
    normalize_email,
    validate_gender,
    validate_min_length,
    validate_password,
    validate_phone,
)

NAME_MIN_LEN = 2


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Password (at least 6 characters)")

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)


class RegisterRequest(BaseModel):
    """Self-service sign-up; the account always gets the student role."""

    name: str
    email: str
    password: str
    phone: str | None = None
    gender: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_min_length(v, NAME_MIN_LEN, "Name must be at least 2 characters long")

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return validate_phone(v)

    @field_validator("gender")
    @classmethod
    def check_gender(cls, v: str | None) -> str | None:
        return validate_gender(v)


class AuthUser(BaseModel):
    """Public view of the logged-in account; hardcoded accounts use string ids."""

    id: int | str
    name: str
    email: str
    phone: str | None = None
    gender: str | None = None
    role: str
    avatar: str | None = None

    model_config = ConfigDict(from_attributes=True)


class LoginData(BaseModel):
    """Payload of a successful login."""

    user: AuthUser
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
