"""Password reset tokens: random, single-use, valid for a fixed window.

Tokens are stored on the user document as-is (not hashed) and handed back to
the caller by the forgot-password endpoint. That is only acceptable outside
production; a hardened deployment would store a digest and deliver the raw
token by email only.
"""

import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Optional

from tareas_api.config import get_settings
from tareas_api.db.models.user import User

_ALPHABET = string.ascii_letters + string.digits


def generate_reset_token(length: Optional[int] = None) -> str:
    length = length or get_settings().reset_token_length
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def reset_token_expiry(now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(hours=get_settings().password_reset_expire_hours)


def is_reset_token_valid(user: User, submitted: str, now: Optional[datetime] = None) -> bool:
    if not user.reset_token or user.reset_token_expire is None:
        return False
    now = now or datetime.now(timezone.utc)
    if not secrets.compare_digest(user.reset_token.encode(), submitted.encode()):
        return False
    return now <= user.reset_token_expire
