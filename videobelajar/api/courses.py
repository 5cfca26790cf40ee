"""Public course catalog endpoints: filtered listing, CRUD and reset to the default catalog."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from videobelajar.core.database import get_db
from videobelajar.core.errors import db_errors
from videobelajar.schemas import (
    ApiResponse,
    CourseCategory,
    CourseCreate,
    CourseOut,
    CourseUpdate,
    Pagination,
    ok,
)
from videobelajar.services import courses as course_service
from videobelajar.services.courses import CourseListParams

router = APIRouter()

LIST_ERROR = "Terjadi kesalahan saat mengambil data courses"


@router.get("", response_model=ApiResponse[list[CourseOut]], response_model_exclude_unset=True)
def list_courses(
    db: Annotated[Session, Depends(get_db)],
    category: CourseCategory | None = None,
    search: str | None = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort: str | None = None,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
    offset: Annotated[int | None, Query(ge=0)] = None,
) -> dict:
    """
    List courses with optional filters.

    - **category**: exact category match
    - **search**: substring match on title
    - **sortBy** / **sort**: created_at, title, price or rating; ASC or DESC.
      Any other sort means DESC; any other sortBy falls back to created_at DESC.
    - **limit** / **offset**: paging; offset is ignored without limit
    """
    params = CourseListParams(
        category=category,
        search=search,
        sort_by=sort_by,
        sort=sort,
        limit=limit,
        offset=offset,
    )
    with db_errors(db, LIST_ERROR):
        courses, total = course_service.list_courses(db, params)
    data = [CourseOut.model_validate(c) for c in courses]
    pagination = Pagination(total=total, count=len(data), limit=limit, offset=offset)
    return ok("Courses retrieved successfully", data=data, pagination=pagination)


@router.get(
    "/category/{category}",
    response_model=ApiResponse[list[CourseOut]],
    response_model_exclude_unset=True,
)
def list_by_category(category: CourseCategory, db: Annotated[Session, Depends(get_db)]) -> dict:
    with db_errors(db, LIST_ERROR):
        courses = course_service.list_by_category(db, category)
    data = [CourseOut.model_validate(c) for c in courses]
    return ok(
        f"Courses in category '{category}' retrieved successfully",
        data=data,
        count=len(data),
    )


@router.post(
    "/reset-default",
    response_model=ApiResponse[list[CourseOut]],
    response_model_exclude_unset=True,
)
def reset_default(db: Annotated[Session, Depends(get_db)]) -> dict:
    """Replace every course with the three default courses, numbered from id 1."""
    with db_errors(db, "Terjadi kesalahan saat mereset courses"):
        courses = course_service.reset_default_courses(db)
    data = [CourseOut.model_validate(c) for c in courses]
    return ok("Courses reset to default successfully", data=data, count=len(data))


@router.get("/{course_id}", response_model=ApiResponse[CourseOut], response_model_exclude_unset=True)
def get_course(course_id: int, db: Annotated[Session, Depends(get_db)]) -> dict:
    with db_errors(db, "Terjadi kesalahan saat mengambil data course"):
        course = course_service.get_course(db, course_id)
    return ok("Course retrieved successfully", data=CourseOut.model_validate(course))


@router.post(
    "",
    response_model=ApiResponse[CourseOut],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_course(body: CourseCreate, db: Annotated[Session, Depends(get_db)]) -> dict:
    with db_errors(db, "Terjadi kesalahan saat membuat course"):
        course = course_service.create_course(db, body)
    return ok("Course created successfully", data=CourseOut.model_validate(course))


@router.put("/{course_id}", response_model=ApiResponse[CourseOut], response_model_exclude_unset=True)
def update_course(
    course_id: int,
    body: CourseUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    """Partial update; 400 when the body carries no recognized field."""
    with db_errors(db, "Terjadi kesalahan saat mengupdate course"):
        course = course_service.update_course(db, course_id, body)
    return ok("Course updated successfully", data=CourseOut.model_validate(course))


@router.delete("/{course_id}", response_model=ApiResponse[None], response_model_exclude_unset=True)
def delete_course(course_id: int, db: Annotated[Session, Depends(get_db)]) -> dict:
    with db_errors(db, "Terjadi kesalahan saat menghapus course"):
        course_service.delete_course(db, course_id)
    return ok("Course deleted successfully")
