"""Login, registration and token verification."""

import logging
import smtplib
from typing import TYPE_CHECKING

import jwt
from sqlalchemy.orm import Session

from videobelajar.core.defaults import match_hardcoded_account
from videobelajar.core.security import (
    create_access_token,
    create_email_verification_token,
    decode_access_token,
    decode_email_verification_token,
    random_avatar_url,
    verify_password,
)
from videobelajar.models import User
from videobelajar.schemas.auth import AuthUser, LoginData, RegisterRequest
from videobelajar.services import mailer
from videobelajar.services.errors import (
    AuthenticationError,
    DuplicateEmailError,
    NotFoundError,
    ServiceError,
)
from videobelajar.services.users import email_taken, find_by_email, insert_user

if TYPE_CHECKING:
    from videobelajar.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Email atau password salah"
TOKEN_MISSING = "Token tidak ditemukan"
TOKEN_INVALID = "Token tidak valid"
USER_NOT_FOUND = "User tidak ditemukan"


def login(db: Session, email: str, password: str) -> LoginData:
    """
    Authenticate and issue an access token.

    Hardcoded accounts are checked first; database users are verified with bcrypt,
    or by plain comparison for legacy rows whose password was never hashed.
    """
    account = match_hardcoded_account(email, password)
    if account is not None:
        token = create_access_token(sub=account.id, email=account.email, role=account.role)
        user = AuthUser(id=account.id, name=account.name, email=account.email, role=account.role)
        return LoginData(user=user, token=token)

    user = find_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        raise AuthenticationError(INVALID_CREDENTIALS)

    role = user.role or "user"
    token = create_access_token(sub=user.id, email=user.email, role=role)
    auth_user = AuthUser.model_validate(user).model_copy(update={"role": role})
    return LoginData(user=auth_user, token=token)


def register(db: Session, body: RegisterRequest, settings: "Settings") -> User:
    """Create a student account and send the verification email when SMTP is configured."""
    if email_taken(db, body.email):
        raise DuplicateEmailError("Email sudah terdaftar. Silakan gunakan email lain.")

    user = insert_user(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        phone=body.phone,
        gender=body.gender,
        role="student",
        avatar=random_avatar_url(),
    )
    logger.info("Registered user id=%s", user.id)

    token = create_email_verification_token(user.id, user.email)
    try:
        mailer.send_verification_email(user.email, token, settings)
    except (smtplib.SMTPException, OSError):
        logger.exception("Failed to send verification email to %s", user.email)
    return user


def decode_token(token: str) -> dict:
    """Decode an access token; any decode failure is a 401."""
    try:
        return decode_access_token(token)
    except jwt.PyJWTError as exc:
        logger.info("Token verification error: %s", exc)
        raise AuthenticationError(TOKEN_INVALID) from exc


def verify_token(db: Session, token: str) -> User:
    """Decode the token and re-fetch its subject; fails closed with 401."""
    payload = decode_token(token)
    sub = payload.get("sub")
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        # Hardcoded accounts ("admin", "demo") have no database row.
        raise AuthenticationError(USER_NOT_FOUND)
    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationError(USER_NOT_FOUND)
    return user


def verify_email(db: Session, token: str) -> User:
    try:
        payload = decode_email_verification_token(token)
        user_id = int(payload["sub"])
    except (jwt.PyJWTError, KeyError, TypeError, ValueError) as exc:
        raise ServiceError("Token verifikasi tidak valid") from exc
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    if not user.email_verified:
        user.email_verified = True
        db.commit()
        db.refresh(user)
    return user
