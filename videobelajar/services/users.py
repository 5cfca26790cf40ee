"""User management: CRUD over the users table with email uniqueness checks."""

import logging

from sqlalchemy.orm import Session

from videobelajar.core.security import hash_password, random_avatar_url
from videobelajar.models import User
from videobelajar.schemas.user import UserCreate, UserUpdate
from videobelajar.services.errors import (
    DuplicateEmailError,
    ForbiddenError,
    NoChangesError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User tidak ditemukan"
DEFAULT_ROLE = "student"


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def email_taken(db: Session, email: str, exclude_id: int | None = None) -> bool:
    """True if another row already holds this email (query-then-write uniqueness)."""
    query = db.query(User.id).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def insert_user(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    phone: str | None,
    gender: str | None,
    role: str,
    avatar: str,
) -> User:
    """Hash the password, insert and reselect so server defaults (id, timestamps) are loaded."""
    user = User(
        name=name,
        email=email,
        password=hash_password(password),
        phone=phone or None,
        gender=gender or None,
        role=role,
        avatar=avatar,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_user(db: Session, body: UserCreate) -> User:
    if email_taken(db, body.email):
        raise DuplicateEmailError("Email sudah terdaftar")
    user = insert_user(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        phone=body.phone,
        gender=body.gender,
        role=body.role or DEFAULT_ROLE,
        avatar=body.avatar or random_avatar_url(0, 99),
    )
    logger.info("Created user id=%s role=%s", user.id, user.role)
    return user


def update_user(db: Session, user_id: int, body: UserUpdate) -> User:
    """Apply only the fields present in the request; an empty update writes nothing."""
    user = get_user(db, user_id)
    changes = body.changes()

    new_email = changes.get("email")
    if new_email and new_email != user.email and email_taken(db, new_email, exclude_id=user_id):
        raise DuplicateEmailError("Email sudah digunakan oleh user lain")

    if not changes:
        raise NoChangesError()

    for column, value in changes.items():
        setattr(user, column, value)
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    if user.role == "admin":
        raise ForbiddenError("Admin user tidak dapat dihapus")
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s", user_id)


def reset_password(db: Session, user_id: int, new_password: str) -> User:
    user = get_user(db, user_id)
    user.password = hash_password(new_password)
    db.commit()
    db.refresh(user)
    return user
