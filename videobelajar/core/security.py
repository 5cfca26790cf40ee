"""Password hashing and JWT creation/verification for authentication."""

import random
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from videobelajar.core.config import settings

# Stored bcrypt hashes start with $2a$/$2b$/$2y$; anything else is a legacy plaintext password.
BCRYPT_PREFIX = "$2"

# Purpose claim for email verification tokens so they cannot be used as access tokens.
EMAIL_VERIFY_PURPOSE = "email-verify"

AVATAR_URL_TEMPLATE = (
    "https://cdn.jsdelivr.net/gh/faker-js/assets-person-portrait/male/512/{}.jpg"
)


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    cost = rounds or settings.BCRYPT_SALT_ROUNDS
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=cost)).decode("utf-8")


def is_hashed(stored: str) -> bool:
    return stored.startswith(BCRYPT_PREFIX)


def verify_password(plain_password: str, stored: str) -> bool:
    """
    Verify a plain password against a stored value.

    Hashed values go through bcrypt; legacy rows that still hold the plain
    password are compared directly.
    """
    if not stored:
        return False
    if not is_hashed(stored):
        return plain_password == stored
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, stored.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def random_avatar_url(low: int = 1, high: int = 100) -> str:
    """Random stock portrait assigned to new accounts."""
    return AVATAR_URL_TEMPLATE.format(random.randint(low, high))


def create_access_token(sub: str | int, email: str, role: str) -> str:
    """Create a JWT access token with sub (user id), email, role, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "email": email,
        "role": role,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, email, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    payload = jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
    if payload.get("purpose") == EMAIL_VERIFY_PURPOSE:
        raise jwt.InvalidTokenError("Email verification token used as access token")
    return payload


def create_email_verification_token(user_id: int, email: str) -> str:
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "purpose": EMAIL_VERIFY_PURPOSE,
        "exp": now + timedelta(minutes=settings.EMAIL_VERIFY_EXPIRE_MINUTES),
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def decode_email_verification_token(token: str) -> dict[str, Any]:
    """Decode a verification token. Raises jwt.PyJWTError when invalid, expired or of another purpose."""
    secret = settings.JWT_SECRET.get_secret_value()
    payload = jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
    if payload.get("purpose") != EMAIL_VERIFY_PURPOSE:
        raise jwt.InvalidTokenError("Not an email verification token")
    return payload
