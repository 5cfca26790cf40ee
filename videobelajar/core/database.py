"""Database connection pool, session management and a raw SQL helper."""

import logging
from collections.abc import Generator, Mapping
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from videobelajar.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    """Create an engine; pool bounds only apply to server databases."""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=settings.DEBUG,
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        echo=settings.DEBUG,
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def execute_query(
    db: Session,
    sql: str,
    params: Mapping[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """
    Execute parameterized SQL and return result rows as dicts.

    Statements that return no rows (DDL, DELETE) yield an empty list.
    Errors are logged and re-raised.
    """
    try:
        result = db.execute(text(sql), dict(params or {}))
    except SQLAlchemyError:
        logger.exception("Query execution error: %s", sql)
        raise
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings()]


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        execute_query(db, "SELECT 1")
        return True
    except SQLAlchemyError:
        return False
