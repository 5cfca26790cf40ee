"""SQLAlchemy ORM models."""

from videobelajar.models.base import Base
from videobelajar.models.course import COURSE_CATEGORIES, Course
from videobelajar.models.user import GENDERS, USER_ROLES, User

__all__ = ["Base", "COURSE_CATEGORIES", "Course", "GENDERS", "USER_ROLES", "User"]
