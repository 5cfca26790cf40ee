"""Unit tests for videobelajar.services.mailer (SMTP is mocked)."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr

from videobelajar.services.mailer import (
    build_verification_message,
    build_verification_url,
    send_verification_email,
)


def _settings(host: str | None = "smtp.example.com") -> MagicMock:
    settings = MagicMock()
    settings.APP_URL = "http://localhost:5000"
    settings.API_PREFIX = "/api"
    settings.EMAIL_HOST = host
    settings.EMAIL_PORT = 587
    settings.EMAIL_USER = "noreply@videobelajar.com"
    settings.EMAIL_PASS = SecretStr("smtp-pass")
    settings.mail_enabled = bool(host)
    return settings


class TestVerificationMessage(unittest.TestCase):
    def test_url_points_at_verification_route(self) -> None:
        self.assertEqual(
            build_verification_url("abc", _settings()),
            "http://localhost:5000/api/auth/verifikasi-email?token=abc",
        )

    def test_message_headers_and_link(self) -> None:
        message = build_verification_message("siti@example.com", "abc", _settings())
        self.assertEqual(message["To"], "siti@example.com")
        self.assertEqual(message["From"], "noreply@videobelajar.com")
        self.assertEqual(message["Subject"], "Email Verification")
        self.assertIn("token=abc", message.get_body(("plain",)).get_content())
        self.assertIn('href="http://localhost:5000/api/auth/verifikasi-email?token=abc"', message.get_body(("html",)).get_content())


class TestSendVerificationEmail(unittest.TestCase):
    @patch("videobelajar.services.mailer.smtplib.SMTP")
    def test_skipped_without_host(self, smtp_cls: MagicMock) -> None:
        self.assertFalse(send_verification_email("siti@example.com", "abc", _settings(host=None)))
        smtp_cls.assert_not_called()

    @patch("videobelajar.services.mailer.smtplib.SMTP")
    def test_sends_with_starttls_and_login(self, smtp_cls: MagicMock) -> None:
        smtp = smtp_cls.return_value.__enter__.return_value
        smtp.has_extn.return_value = True
        self.assertTrue(send_verification_email("siti@example.com", "abc", _settings()))
        smtp_cls.assert_called_once_with("smtp.example.com", 587, timeout=30)
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("noreply@videobelajar.com", "smtp-pass")
        smtp.send_message.assert_called_once()

    @patch("videobelajar.services.mailer.smtplib.SMTP")
    def test_no_starttls_when_unsupported(self, smtp_cls: MagicMock) -> None:
        smtp = smtp_cls.return_value.__enter__.return_value
        smtp.has_extn.return_value = False
        send_verification_email("siti@example.com", "abc", _settings())
        smtp.starttls.assert_not_called()
