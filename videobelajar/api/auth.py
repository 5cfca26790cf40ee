"""Login, registration, token verification and the bearer-token dependency for protected routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from videobelajar.core.config import Settings, get_settings
from videobelajar.core.database import get_db
from videobelajar.core.errors import db_errors
from videobelajar.schemas import (
    ApiResponse,
    AuthUser,
    LoginData,
    LoginRequest,
    RegisterRequest,
    UserOut,
    ok,
)
from videobelajar.services import auth as auth_service
from videobelajar.services.errors import AuthenticationError

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_token_payload(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict[str, Any]:
    """Dependency: require a signed Bearer token and return its claims. Does not touch the database."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(auth_service.TOKEN_MISSING)
    return auth_service.decode_token(credentials.credentials)


@router.post("/login", response_model=ApiResponse[LoginData], response_model_exclude_unset=True)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    """
    Authenticate with email and password; returns the user and a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    with db_errors(db, "Terjadi kesalahan saat login"):
        data = auth_service.login(db, body.email, body.password)
    return ok("Login successful", data=data)


@router.post(
    "/register",
    response_model=ApiResponse[UserOut],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict:
    """Create a student account. A verification email is sent when SMTP is configured."""
    with db_errors(db, "Terjadi kesalahan saat mendaftar. Silakan coba lagi."):
        user = auth_service.register(db, body, settings)
    return ok("Pendaftaran berhasil", data=UserOut.model_validate(user))


@router.get("/verify", response_model=ApiResponse[AuthUser], response_model_exclude_unset=True)
def verify(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    """Check a token and return the account it belongs to."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(auth_service.TOKEN_MISSING)
    user = auth_service.verify_token(db, credentials.credentials)
    return ok("Token valid", data=AuthUser.model_validate(user))


@router.get("/verifikasi-email", response_model=ApiResponse[UserOut], response_model_exclude_unset=True)
def verify_email(
    token: Annotated[str, Query(min_length=1)],
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    """Confirm the address from the link sent at registration."""
    with db_errors(db, "Terjadi kesalahan saat verifikasi email"):
        user = auth_service.verify_email(db, token)
    return ok("Email berhasil diverifikasi", data=UserOut.model_validate(user))
