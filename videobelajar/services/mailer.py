"""Outgoing email (account verification) over SMTP."""

import logging
import smtplib
from email.message import EmailMessage
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from videobelajar.core.config import Settings

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Email Verification"


def build_verification_url(token: str, settings: "Settings") -> str:
    return f"{settings.APP_URL}{settings.API_PREFIX}/auth/verifikasi-email?token={token}"


def build_verification_message(to: str, token: str, settings: "Settings") -> EmailMessage:
    url = build_verification_url(token, settings)
    message = EmailMessage()
    message["Subject"] = VERIFICATION_SUBJECT
    message["From"] = settings.EMAIL_USER or f"no-reply@{settings.EMAIL_HOST}"
    message["To"] = to
    message.set_content(f"Please verify your email by opening this link: {url}")
    message.add_alternative(
        f'<p>Please verify your email by clicking <a href="{url}">this link</a>.</p>',
        subtype="html",
    )
    return message


def send_verification_email(to: str, token: str, settings: "Settings") -> bool:
    """
    Send the verification link to a newly registered address.

    Returns False without sending when SMTP is not configured. SMTP errors propagate.
    """
    if not settings.mail_enabled:
        logger.info("EMAIL_HOST not set; skipping verification email to %s", to)
        return False

    message = build_verification_message(to, token, settings)
    with smtplib.SMTP(settings.EMAIL_HOST, settings.EMAIL_PORT, timeout=30) as smtp:
        smtp.ehlo()
        if smtp.has_extn("starttls"):
            smtp.starttls()
            smtp.ehlo()
        if settings.EMAIL_USER and settings.EMAIL_PASS is not None:
            smtp.login(settings.EMAIL_USER, settings.EMAIL_PASS.get_secret_value())
        smtp.send_message(message)
    logger.info("Verification email sent to %s", to)
    return True
