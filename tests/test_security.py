"""Unit tests for videobelajar.core.security: bcrypt hashing, legacy passwords and JWTs."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from videobelajar.core.config import settings
from videobelajar.core.security import (
    create_access_token,
    create_email_verification_token,
    decode_access_token,
    decode_email_verification_token,
    hash_password,
    is_hashed,
    random_avatar_url,
    verify_password,
)


class TestPasswords(unittest.TestCase):
    def test_hash_then_verify(self) -> None:
        hashed = hash_password("rahasia123")
        self.assertTrue(is_hashed(hashed))
        self.assertNotEqual(hashed, "rahasia123")
        self.assertTrue(verify_password("rahasia123", hashed))
        self.assertFalse(verify_password("salah", hashed))

    def test_hash_uses_configured_cost(self) -> None:
        hashed = hash_password("rahasia123")
        self.assertEqual(hashed.split("$")[2], f"{settings.BCRYPT_SALT_ROUNDS:02d}")

    def test_legacy_plaintext_is_compared_directly(self) -> None:
        self.assertFalse(is_hashed("plainpass"))
        self.assertTrue(verify_password("plainpass", "plainpass"))
        self.assertFalse(verify_password("other", "plainpass"))

    def test_empty_stored_value_never_matches(self) -> None:
        self.assertFalse(verify_password("", ""))


class TestAvatar(unittest.TestCase):
    def test_avatar_url_in_range(self) -> None:
        url = random_avatar_url(5, 5)
        self.assertTrue(url.endswith("/male/512/5.jpg"))
        self.assertTrue(url.startswith("https://cdn.jsdelivr.net/gh/faker-js/"))


class TestAccessTokens(unittest.TestCase):
    def test_claims_round_trip(self) -> None:
        token = create_access_token(sub=7, email="siti@example.com", role="student")
        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["email"], "siti@example.com")
        self.assertEqual(payload["role"], "student")
        self.assertIn("exp", payload)
        self.assertIn("iat", payload)

    def test_expired_token_rejected(self) -> None:
        past = datetime.now(UTC) - timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "1", "exp": past},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_wrong_secret_rejected(self) -> None:
        token = jwt.encode({"sub": "1"}, "another-secret", algorithm="HS256")
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(token)

    def test_verification_token_is_not_an_access_token(self) -> None:
        token = create_email_verification_token(3, "siti@example.com")
        with self.assertRaises(jwt.InvalidTokenError):
            decode_access_token(token)
        self.assertEqual(decode_email_verification_token(token)["sub"], "3")

    def test_access_token_is_not_a_verification_token(self) -> None:
        token = create_access_token(sub=3, email="siti@example.com", role="student")
        with self.assertRaises(jwt.InvalidTokenError):
            decode_email_verification_token(token)
