"""Tests for password reset token generation and validity."""

from datetime import datetime, timedelta, timezone

from tareas_api.core.reset_tokens import (
    generate_reset_token,
    is_reset_token_valid,
    reset_token_expiry,
)
from tareas_api.db.models.user import User

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _user(token=None, expire=None) -> User:
    return User(
        name="Al",
        email="a@x.com",
        password_hash="x",
        reset_token=token,
        reset_token_expire=expire,
    )


def test_generated_token_is_32_alphanumeric():
    token = generate_reset_token()
    assert len(token) == 32
    assert token.isalnum()
    assert token.isascii()


def test_generated_tokens_differ():
    assert generate_reset_token() != generate_reset_token()


def test_expiry_is_24_hours_later():
    assert reset_token_expiry(NOW) == NOW + timedelta(hours=24)


def test_valid_until_expiry_inclusive():
    user = _user("abc", NOW + timedelta(hours=24))
    assert is_reset_token_valid(user, "abc", NOW)
    assert is_reset_token_valid(user, "abc", NOW + timedelta(hours=24))


def test_invalid_after_expiry():
    user = _user("abc", NOW)
    assert not is_reset_token_valid(user, "abc", NOW + timedelta(seconds=1))


def test_invalid_on_mismatch():
    user = _user("abc", NOW + timedelta(hours=1))
    assert not is_reset_token_valid(user, "abd", NOW)


def test_invalid_without_reset_fields():
    assert not is_reset_token_valid(_user(), "abc", NOW)
    assert not is_reset_token_valid(_user("abc", None), "abc", NOW)
