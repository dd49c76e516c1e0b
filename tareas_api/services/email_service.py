"""Out-of-band delivery of password reset tokens over SMTP."""

import logging
import smtplib
from email.message import EmailMessage

from tareas_api.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _reset_link(settings: Settings, reset_token: str) -> str:
    return f"{settings.frontend_url.rstrip('/')}{settings.password_reset_link_path}?token={reset_token}"


def build_password_reset_message(settings: Settings, to_email: str, reset_token: str) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = "Reset your password"
    msg["From"] = settings.smtp_from
    msg["To"] = to_email
    msg.set_content(
        "A password reset was requested for this account.\n\n"
        f"Open {_reset_link(settings, reset_token)} to choose a new password.\n\n"
        f"The link is valid for {settings.password_reset_expire_hours} hours and works once.\n"
    )
    return msg


def send_password_reset_email(to_email: str, reset_token: str) -> bool:
    """Mail the reset link. Returns False without sending when SMTP_HOST is unset."""
    settings = get_settings()
    if not settings.smtp_host:
        return False
    msg = build_password_reset_message(settings, to_email, reset_token)
    with smtplib.SMTP(settings.smtp_host, settings.smtp_port) as smtp:
        if settings.smtp_use_tls:
            smtp.starttls()
        if settings.smtp_user and settings.smtp_password:
            smtp.login(settings.smtp_user, settings.smtp_password)
        smtp.send_message(msg)
    logger.info("Password reset email sent")
    return True
