"""Course catalog: filtered listing, CRUD and reseeding the default catalog."""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from videobelajar.core.database import execute_query
from videobelajar.core.defaults import DEFAULT_COURSES
from videobelajar.models import Course
from videobelajar.schemas.course import CourseCreate, CourseUpdate
from videobelajar.services.errors import NoChangesError, NotFoundError

logger = logging.getLogger(__name__)

COURSE_NOT_FOUND = "Course tidak ditemukan"

# Columns clients may sort by; anything else falls back to the default ordering.
SORTABLE_COLUMNS = ("created_at", "title", "price", "rating")
DEFAULT_SORT_COLUMN = "created_at"
DEFAULT_SORT_ORDER = "DESC"


@dataclass(frozen=True)
class CourseListParams:
    """Query-string options for listing courses."""

    category: str | None = None
    search: str | None = None
    sort_by: str | None = None
    sort: str | None = None
    limit: int | None = None
    offset: int | None = None


def resolve_ordering(sort_by: str | None, sort: str | None) -> tuple[str, str]:
    """
    Return (column, direction) for ORDER BY.

    An unrecognized column resets the whole ordering to created_at DESC,
    whatever direction was requested.
    """
    if sort_by not in SORTABLE_COLUMNS:
        return DEFAULT_SORT_COLUMN, DEFAULT_SORT_ORDER
    direction = "ASC" if sort and sort.upper() == "ASC" else "DESC"
    return sort_by, direction


def _filtered(db: Session, params: CourseListParams) -> Query:
    query = db.query(Course)
    if params.category:
        query = query.filter(Course.category == params.category)
    if params.search:
        query = query.filter(Course.title.ilike(f"%{params.search}%"))
    return query


def list_courses(db: Session, params: CourseListParams) -> tuple[list[Course], int]:
    """Return one page of courses plus the total matching the same filters."""
    column_name, direction = resolve_ordering(params.sort_by, params.sort)
    column = getattr(Course, column_name)
    if direction == "ASC":
        order = (column.asc(), Course.id.asc())
    else:
        order = (column.desc(), Course.id.desc())

    query = _filtered(db, params).order_by(*order)
    # OFFSET is only honored together with LIMIT.
    if params.limit:
        query = query.limit(params.limit)
        if params.offset:
            query = query.offset(params.offset)
    courses = query.all()

    total = (
        _filtered(db, params)
        .with_entities(func.count(Course.id))
        .scalar()
    )
    return courses, total or 0


def get_course(db: Session, course_id: int) -> Course:
    course = db.get(Course, course_id)
    if course is None:
        raise NotFoundError(COURSE_NOT_FOUND)
    return course


def list_by_category(db: Session, category: str) -> list[Course]:
    return (
        db.query(Course)
        .filter(Course.category == category)
        .order_by(Course.created_at.desc(), Course.id.desc())
        .all()
    )


def _insert(db: Session, values: dict[str, Any]) -> Course:
    course = Course(**values)
    db.add(course)
    db.flush()
    return course


def create_course(db: Session, body: CourseCreate) -> Course:
    course = _insert(db, body.model_dump())
    db.commit()
    db.refresh(course)
    logger.info("Created course id=%s", course.id)
    return course


def update_course(db: Session, course_id: int, body: CourseUpdate) -> Course:
    """Write only the supplied columns; raises NoChangesError before any write when none are supplied."""
    course = get_course(db, course_id)
    changes = body.changes()
    if not changes:
        raise NoChangesError()
    for column, value in changes.items():
        setattr(course, column, value)
    db.commit()
    db.refresh(course)
    return course


def delete_course(db: Session, course_id: int) -> None:
    course = get_course(db, course_id)
    db.delete(course)
    db.commit()
    logger.info("Deleted course id=%s", course_id)


def _restart_id_sequence(db: Session) -> None:
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        execute_query(db, "ALTER SEQUENCE courses_id_seq RESTART WITH 1")
    elif dialect == "mysql":
        execute_query(db, "ALTER TABLE courses AUTO_INCREMENT = 1")
    elif dialect == "sqlite":
        # Only present when the table was created with AUTOINCREMENT.
        has_sequence = execute_query(
            db,
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'sqlite_sequence'",
        )
        if has_sequence:
            execute_query(db, "DELETE FROM sqlite_sequence WHERE name = :name", {"name": "courses"})


def reset_default_courses(db: Session) -> list[Course]:
    """Delete every course, restart ids at 1 and insert the three default courses."""
    execute_query(db, "DELETE FROM courses")
    # Rows removed with raw SQL must not linger in the identity map.
    db.expunge_all()
    _restart_id_sequence(db)
    created = [_insert(db, dict(values)) for values in DEFAULT_COURSES]
    db.commit()
    for course in created:
        db.refresh(course)
    logger.info("Courses reset to default: %s rows", len(created))
    return created
