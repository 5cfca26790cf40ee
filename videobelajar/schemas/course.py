"""Request/response schemas for the course catalog."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from videobelajar.models.course import COURSE_CATEGORIES
from videobelajar.schemas.common import validate_link, validate_min_length

CourseCategory = Literal["Pemasaran", "Desain", "Pengembangan Diri", "Bisnis"]

CATEGORY_MESSAGE = "Category must be one of: " + ", ".join(COURSE_CATEGORIES)

# field -> (minimum length after trimming, message)
_TEXT_RULES: dict[str, tuple[int, str]] = {
    "title": (3, "Title must be at least 3 characters long"),
    "description": (10, "Description must be at least 10 characters long"),
    "mentor": (2, "Mentor name must be at least 2 characters long"),
    "rolementor": (2, "Mentor role must be at least 2 characters long"),
    "company": (2, "Company name must be at least 2 characters long"),
    "price": (1, "Price is required"),
}

_LINK_MESSAGES = {
    "photos": "Photos must be a valid URL",
    "avatar": "Avatar must be a valid URL",
}


def _check_text(field: str, value: str | None) -> str:
    min_length, message = _TEXT_RULES[field]
    if value is None:
        raise ValueError(message)
    return validate_min_length(value, min_length, message)


def _check_rating(value: float | None) -> float:
    if value is None or not 0 <= value <= 5:
        raise ValueError("Rating must be between 0 and 5")
    return value


def _check_review_count(value: int | None) -> int:
    if value is None or value < 0:
        raise ValueError("Review count must be a non-negative integer")
    return value


def _check_category(value: str | None) -> str:
    if value not in COURSE_CATEGORIES:
        raise ValueError(CATEGORY_MESSAGE)
    return value


class CourseOut(BaseModel):
    """Course row as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    photos: str | None = None
    mentor: str
    rolementor: str
    avatar: str | None = None
    company: str
    rating: float
    review_count: int
    price: str
    category: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CourseCreate(BaseModel):
    """New catalog entry; rating and review_count default to 0."""

    title: str
    description: str
    photos: str | None = None
    mentor: str
    rolementor: str
    avatar: str | None = None
    company: str
    rating: float = Field(default=0)
    review_count: int = Field(default=0)
    price: str
    category: str

    @field_validator("title", "description", "mentor", "rolementor", "company", "price")
    @classmethod
    def check_text(cls, v: str, info: ValidationInfo) -> str:
        return _check_text(info.field_name, v)

    @field_validator("photos", "avatar")
    @classmethod
    def check_link(cls, v: str | None, info: ValidationInfo) -> str | None:
        return validate_link(v, _LINK_MESSAGES[info.field_name])

    @field_validator("rating")
    @classmethod
    def check_rating(cls, v: float) -> float:
        return _check_rating(v)

    @field_validator("review_count")
    @classmethod
    def check_review_count(cls, v: int) -> int:
        return _check_review_count(v)

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str) -> str:
        return _check_category(v)


class CourseUpdate(BaseModel):
    """
    Partial update with every column optional.

    Only keys present in the request body are written (model_dump(exclude_unset=True));
    an explicit null is accepted for photos and avatar and rejected elsewhere.
    """

    title: str | None = None
    description: str | None = None
    photos: str | None = None
    mentor: str | None = None
    rolementor: str | None = None
    avatar: str | None = None
    company: str | None = None
    rating: float | None = None
    review_count: int | None = None
    price: str | None = None
    category: str | None = None

    @field_validator("title", "description", "mentor", "rolementor", "company", "price")
    @classmethod
    def check_text(cls, v: str | None, info: ValidationInfo) -> str:
        return _check_text(info.field_name, v)

    @field_validator("photos", "avatar")
    @classmethod
    def check_link(cls, v: str | None, info: ValidationInfo) -> str | None:
        return validate_link(v, _LINK_MESSAGES[info.field_name])

    @field_validator("rating")
    @classmethod
    def check_rating(cls, v: float | None) -> float:
        return _check_rating(v)

    @field_validator("review_count")
    @classmethod
    def check_review_count(cls, v: int | None) -> int:
        return _check_review_count(v)

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str | None) -> str:
        return _check_category(v)

    def changes(self) -> dict:
        """Columns supplied in the request, mapped to their new values."""
        return self.model_dump(exclude_unset=True)
