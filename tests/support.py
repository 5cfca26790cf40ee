"""Shared fixtures: one in-memory SQLite database and a TestClient wired to it."""

from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from videobelajar.core.database import get_db
from videobelajar.core.security import create_access_token, hash_password
from videobelajar.main import app
from videobelajar.models import Base, Course, User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

COURSE_BODY = {
    "title": "Belajar Python Dasar",
    "description": "Kelas pengantar pemrograman Python untuk pemula.",
    "photos": "/images/cards/card4.png",
    "mentor": "Budi Santoso",
    "rolementor": "Software Engineer",
    "avatar": "https://example.com/avatar.png",
    "company": "Traveloka",
    "rating": 4.8,
    "review_count": 10,
    "price": "150K",
    "category": "Pengembangan Diri",
}


def reset_database() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def override_get_db() -> Generator[Session, None, None]:
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def make_client() -> TestClient:
    """TestClient on a fresh schema; server errors come back as 500 responses."""
    reset_database()
    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app, raise_server_exceptions=False)


def add_user(db: Session, email: str = "siti@example.com", password: str = "rahasia123", role: str = "student", name: str = "Siti Aminah") -> User:
    user = User(name=name, email=email, password=hash_password(password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def add_course(db: Session, **overrides: object) -> Course:
    course = Course(**{**COURSE_BODY, **overrides})
    db.add(course)
    db.commit()
    db.refresh(course)
    return course


def auth_header(sub: str | int = "admin", email: str = "admin@videobelajar.com", role: str = "admin") -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(sub=sub, email=email, role=role)}"}
