"""Unit tests for videobelajar.services.auth: login paths, registration and token checks."""

import smtplib
import unittest
from unittest.mock import MagicMock, patch

from videobelajar.core.security import create_access_token, create_email_verification_token
from videobelajar.models import User
from videobelajar.schemas import RegisterRequest
from videobelajar.services import auth as auth_service
from videobelajar.services.errors import (
    AuthenticationError,
    DuplicateEmailError,
    NotFoundError,
    ServiceError,
)
from tests.support import TestingSessionLocal, add_user, reset_database


class AuthServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        reset_database()
        self.db = TestingSessionLocal()

    def tearDown(self) -> None:
        self.db.close()


class TestLogin(AuthServiceTestCase):
    def test_hardcoded_admin_bypasses_database(self) -> None:
        data = auth_service.login(self.db, "admin@videobelajar.com", "admin123")
        self.assertEqual(data.user.id, "admin")
        self.assertEqual(data.user.role, "admin")
        payload = auth_service.decode_token(data.token)
        self.assertEqual(payload["sub"], "admin")

    def test_hardcoded_demo_needs_exact_password(self) -> None:
        with self.assertRaises(AuthenticationError):
            auth_service.login(self.db, "user@example.com", "1234567")

    def test_database_user(self) -> None:
        user = add_user(self.db)
        data = auth_service.login(self.db, "siti@example.com", "rahasia123")
        self.assertEqual(data.user.id, user.id)
        self.assertEqual(data.user.email, "siti@example.com")
        self.assertEqual(auth_service.decode_token(data.token)["sub"], str(user.id))

    def test_legacy_plaintext_row(self) -> None:
        self.db.add(User(name="Lama", email="lama@example.com", password="plainpass", role="user"))
        self.db.commit()
        data = auth_service.login(self.db, "lama@example.com", "plainpass")
        self.assertEqual(data.user.name, "Lama")

    def test_wrong_password_and_unknown_email_share_message(self) -> None:
        add_user(self.db)
        for email, password in (("siti@example.com", "salah123"), ("nobody@example.com", "rahasia123")):
            with self.assertRaises(AuthenticationError) as ctx:
                auth_service.login(self.db, email, password)
            self.assertEqual(ctx.exception.message, "Email atau password salah")


class TestRegister(AuthServiceTestCase):
    def _body(self) -> RegisterRequest:
        return RegisterRequest(name="Siti", email="siti@example.com", password="rahasia123", gender="Perempuan")

    @patch("videobelajar.services.auth.mailer.send_verification_email")
    def test_creates_student_and_sends_mail(self, send: MagicMock) -> None:
        settings = MagicMock()
        user = auth_service.register(self.db, self._body(), settings)
        self.assertEqual(user.role, "student")
        self.assertEqual(user.gender, "Perempuan")
        send.assert_called_once()
        self.assertEqual(send.call_args.args[0], "siti@example.com")

    @patch("videobelajar.services.auth.mailer.send_verification_email")
    def test_mail_failure_does_not_fail_registration(self, send: MagicMock) -> None:
        send.side_effect = smtplib.SMTPException("down")
        user = auth_service.register(self.db, self._body(), MagicMock())
        self.assertIsNotNone(user.id)

    @patch("videobelajar.services.auth.mailer.send_verification_email")
    def test_duplicate_email(self, send: MagicMock) -> None:
        add_user(self.db)
        with self.assertRaises(DuplicateEmailError) as ctx:
            auth_service.register(self.db, self._body(), MagicMock())
        self.assertEqual(ctx.exception.message, "Email sudah terdaftar. Silakan gunakan email lain.")
        send.assert_not_called()


class TestVerifyToken(AuthServiceTestCase):
    def test_valid_token(self) -> None:
        user = add_user(self.db)
        token = create_access_token(sub=user.id, email=user.email, role=user.role)
        self.assertEqual(auth_service.verify_token(self.db, token).id, user.id)

    def test_garbage_token(self) -> None:
        with self.assertRaises(AuthenticationError) as ctx:
            auth_service.verify_token(self.db, "not-a-jwt")
        self.assertEqual(ctx.exception.message, "Token tidak valid")

    def test_hardcoded_subject_has_no_row(self) -> None:
        token = create_access_token(sub="admin", email="admin@videobelajar.com", role="admin")
        with self.assertRaises(AuthenticationError) as ctx:
            auth_service.verify_token(self.db, token)
        self.assertEqual(ctx.exception.message, "User tidak ditemukan")


class TestVerifyEmail(AuthServiceTestCase):
    def test_marks_user_verified(self) -> None:
        user = add_user(self.db)
        token = create_email_verification_token(user.id, user.email)
        self.assertTrue(auth_service.verify_email(self.db, token).email_verified)

    def test_access_token_is_rejected(self) -> None:
        user = add_user(self.db)
        token = create_access_token(sub=user.id, email=user.email, role=user.role)
        with self.assertRaises(ServiceError) as ctx:
            auth_service.verify_email(self.db, token)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Token verifikasi tidak valid")

    def test_unknown_user(self) -> None:
        token = create_email_verification_token(999, "ghost@example.com")
        with self.assertRaises(NotFoundError):
            auth_service.verify_email(self.db, token)
