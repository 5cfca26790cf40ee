"""Response envelope shared by every endpoint, plus field validators reused across schemas."""

import re
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")

# Loose RFC-5322-ish check: one @, no whitespace, a dot in the domain.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
# Indonesian mobile numbers: 08xx / 628xx / +628xx followed by 7-11 digits.
ID_MOBILE_PATTERN = re.compile(r"^(\+?62|0)8[1-9]\d{6,10}$")


class Pagination(BaseModel):
    total: int = Field(..., ge=0, description="Rows matching the filters.")
    count: int = Field(..., ge=0, description="Rows in this page.")
    limit: int | None = None
    offset: int | None = None


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Uniform response wrapper: {success, message, data?, errors?, pagination?, count?}.

    Routes serialize with exclude_unset so keys that were not provided are omitted.
    """

    success: bool
    message: str
    data: DataT | None = None
    errors: list[dict[str, Any]] | None = None
    pagination: Pagination | None = None
    count: int | None = None


def ok(message: str, **fields: Any) -> dict[str, Any]:
    """Build a success envelope; only the given keys end up in the response."""
    return {"success": True, "message": message, **fields}


def normalize_email(value: str) -> str:
    normalized = value.strip().lower()
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError("Please provide a valid email")
    return normalized


def validate_min_length(value: str, min_length: int, message: str) -> str:
    stripped = value.strip()
    if len(stripped) < min_length:
        raise ValueError(message)
    return stripped


def validate_phone(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    compact = re.sub(r"[\s-]", "", value)
    if not ID_MOBILE_PATTERN.match(compact):
        raise ValueError("Please provide a valid Indonesian phone number")
    return compact


def validate_link(value: str | None, message: str) -> str | None:
    """Accept http(s) URLs and site-absolute paths such as /images/cards/card1.png."""
    if value is None or not value.strip():
        return None
    v = value.strip()
    lowered = v.lower()
    if lowered.startswith(("http://", "https://")) and "." in lowered.split("//", 1)[1]:
        return v
    if v.startswith("/") and not v.startswith("//"):
        return v
    raise ValueError(message)


def validate_password(value: str, min_length: int = 6, label: str = "Password") -> str:
    if len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters long")
    return value


def validate_gender(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    if value not in ("Laki-laki", "Perempuan"):
        raise ValueError("Gender must be either Laki-laki or Perempuan")
    return value
