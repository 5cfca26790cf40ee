"""Pydantic request/response schemas."""

from videobelajar.schemas.auth import (
    AuthUser,
    LoginData,
    LoginRequest,
    RegisterRequest,
)
from videobelajar.schemas.common import ApiResponse, Pagination, ok
from videobelajar.schemas.course import (
    CourseCategory,
    CourseCreate,
    CourseOut,
    CourseUpdate,
)
from videobelajar.schemas.health import HealthResponse
from videobelajar.schemas.upload import UploadedFile
from videobelajar.schemas.user import (
    ResetPasswordRequest,
    UserCreate,
    UserOut,
    UserUpdate,
)

__all__ = [
    "ApiResponse",
    "AuthUser",
    "CourseCategory",
    "CourseCreate",
    "CourseOut",
    "CourseUpdate",
    "HealthResponse",
    "LoginData",
    "LoginRequest",
    "Pagination",
    "RegisterRequest",
    "ResetPasswordRequest",
    "UploadedFile",
    "UserCreate",
    "UserOut",
    "UserUpdate",
    "ok",
]
