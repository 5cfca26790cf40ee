"""Request/response schemas for user management."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from videobelajar.schemas.common import (
    normalize_email,
    validate_gender,
    validate_min_length,
    validate_password,
    validate_phone,
)

ROLE_MESSAGE = "Role must be admin, user, or student"


def _validate_role(value: str | None) -> str | None:
    if value is None:
        return None
    if value not in ("admin", "user", "student"):
        raise ValueError(ROLE_MESSAGE)
    return value


def _validate_name(value: str) -> str:
    return validate_min_length(value, 2, "Name must be at least 2 characters long")


class UserOut(BaseModel):
    """User row without the password."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    gender: str | None = None
    role: str
    avatar: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreate(BaseModel):
    name: str
    email: str
    password: str
    phone: str | None = None
    gender: str | None = None
    role: str | None = None
    avatar: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return _validate_name(v)

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

    @field_validator("role")
    @classmethod
    def check_role(cls, v: str | None) -> str | None:
        return _validate_role(v)


class UserUpdate(BaseModel):
    """
    Partial update: only fields present in the request body are written.

    Use model_dump(exclude_unset=True) to get the changed columns.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    gender: str | None = None
    role: str | None = None
    avatar: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Name must be at least 2 characters long")
        return _validate_name(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Please provide a valid email")
        return normalize_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return validate_phone(v)

    @field_validator("gender")
    @classmethod
    def check_gender(cls, v: str | None) -> str | None:
        return validate_gender(v)

    @field_validator("role")
    @classmethod
    def check_role(cls, v: str | None) -> str:
        if v is None:
            raise ValueError(ROLE_MESSAGE)
        return _validate_role(v)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ResetPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_password: str = Field(..., alias="newPassword")

    @field_validator("new_password")
    @classmethod
    def check_new_password(cls, v: str) -> str:
        return validate_password(v, label="New password")
