"""User management endpoints. Every route requires a Bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from videobelajar.api.auth import get_token_payload
from videobelajar.core.database import get_db
from videobelajar.core.errors import db_errors
from videobelajar.schemas import (
    ApiResponse,
    ResetPasswordRequest,
    UserCreate,
    UserOut,
    UserUpdate,
    ok,
)
from videobelajar.services import users as user_service

router = APIRouter(dependencies=[Depends(get_token_payload)])


@router.get("", response_model=ApiResponse[list[UserOut]], response_model_exclude_unset=True)
def list_users(db: Annotated[Session, Depends(get_db)]) -> dict:
    """All users, newest first, without passwords."""
    with db_errors(db, "Terjadi kesalahan saat mengambil data users"):
        users = user_service.list_users(db)
    data = [UserOut.model_validate(u) for u in users]
    return ok("Users retrieved successfully", data=data, count=len(data))


@router.get("/{user_id}", response_model=ApiResponse[UserOut], response_model_exclude_unset=True)
def get_user(user_id: int, db: Annotated[Session, Depends(get_db)]) -> dict:
    with db_errors(db, "Terjadi kesalahan saat mengambil data user"):
        user = user_service.get_user(db, user_id)
    return ok("User retrieved successfully", data=UserOut.model_validate(user))


@router.post(
    "",
    response_model=ApiResponse[UserOut],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(body: UserCreate, db: Annotated[Session, Depends(get_db)]) -> dict:
    with db_errors(db, "Terjadi kesalahan saat membuat user"):
        user = user_service.create_user(db, body)
    return ok("User created successfully", data=UserOut.model_validate(user))


@router.put("/{user_id}", response_model=ApiResponse[UserOut], response_model_exclude_unset=True)
def update_user(
    user_id: int,
    body: UserUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    """Partial update; only fields present in the body are written."""
    with db_errors(db, "Terjadi kesalahan saat mengupdate user"):
        user = user_service.update_user(db, user_id, body)
    return ok("User updated successfully", data=UserOut.model_validate(user))


@router.delete("/{user_id}", response_model=ApiResponse[None], response_model_exclude_unset=True)
def delete_user(user_id: int, db: Annotated[Session, Depends(get_db)]) -> dict:
    """Delete a user. Admin accounts cannot be deleted (403)."""
    with db_errors(db, "Terjadi kesalahan saat menghapus user"):
        user_service.delete_user(db, user_id)
    return ok("User deleted successfully")


@router.patch(
    "/{user_id}/reset-password",
    response_model=ApiResponse[UserOut],
    response_model_exclude_unset=True,
)
def reset_password(
    user_id: int,
    body: ResetPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    with db_errors(db, "Terjadi kesalahan saat mereset password"):
        user = user_service.reset_password(db, user_id, body.new_password)
    return ok("Password reset successfully", data=UserOut.model_validate(user))
