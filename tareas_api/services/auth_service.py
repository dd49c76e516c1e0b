"""Auth: register, login, forgot/reset password, bearer-token lookup."""

import logging
import smtplib
from datetime import datetime, timezone

from bson import ObjectId
from email_validator import EmailNotValidError, validate_email
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from tareas_api.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    NotFoundError,
    TokenError,
    ValidationError,
)
from tareas_api.core.reset_tokens import generate_reset_token, is_reset_token_valid, reset_token_expiry
from tareas_api.core.security import create_access_token, decode_token, hash_password, verify_password
from tareas_api.db.models.user import User
from tareas_api.db.mongo import get_users_collection
from tareas_api.services.email_service import send_password_reset_email

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    try:
        validate_email(email or "", check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError("Invalid email") from e
    return email.strip().lower()


def _check_password(password: str) -> None:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if "\x00" in password:
        raise ValidationError("Password must not contain NUL characters")


def register(db: Database, name: str, email: str, password: str) -> tuple[User, str]:
    """Create a user and return (user, access_token)."""
    name = name or ""
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(f"Name must be at least {MIN_NAME_LENGTH} characters")
    email = _normalize_email(email)
    _check_password(password)

    users = get_users_collection(db)
    if users.find_one({"email": email}):
        raise DuplicateEmailError()
    user = User(name=name, email=email, password_hash=hash_password(password))
    try:
        result = users.insert_one(user.to_document())
    except DuplicateKeyError as e:
        # Lost a race with a concurrent registration; the unique index caught it
        raise DuplicateEmailError() from e
    user.id = result.inserted_id
    logger.info("User %s registered", user.id)
    return user, create_access_token(str(user.id))


def login(db: Database, email: str, password: str) -> tuple[User, str]:
    """Authenticate; unknown email and wrong password fail the same way."""
    doc = get_users_collection(db).find_one({"email": (email or "").strip().lower()})
    if doc is None:
        logger.warning("Failed login: unknown email")
        raise InvalidCredentialsError()
    user = User.from_document(doc)
    if not verify_password(password, user.password_hash):
        logger.warning("Failed login for user %s", user.id)
        raise InvalidCredentialsError()
    return user, create_access_token(str(user.id))


def request_password_reset(db: Database, email: str) -> str:
    """Store a fresh reset token on the user and return it.

    Raises NotFoundError for unknown emails. When SMTP is configured the token
    is also mailed; delivery failures are logged and do not fail the request.
    """
    email = _normalize_email(email)
    users = get_users_collection(db)
    doc = users.find_one({"email": email})
    if doc is None:
        raise NotFoundError("Email not found")
    token = generate_reset_token()
    result = users.update_one(
        {"_id": doc["_id"]},
        {"$set": {"reset_token": token, "reset_token_expire": reset_token_expiry()}},
    )
    if result.matched_count == 0:
        raise NotFoundError("Email not found")
    logger.info("Password reset requested for user %s", doc["_id"])
    try:
        if not send_password_reset_email(email, token):
            logger.info("Reset token not emailed: SMTP not configured")
    except (smtplib.SMTPException, OSError):
        logger.warning("Could not send password reset email for user %s", doc["_id"], exc_info=True)
    return token


def reset_password(db: Database, token: str, new_password: str) -> None:
    """Consume a reset token: new hash and cleared reset fields in one update."""
    _check_password(new_password)
    if not token:
        raise NotFoundError("Invalid reset token")
    users = get_users_collection(db)
    doc = users.find_one({"reset_token": token})
    if doc is None:
        raise NotFoundError("Invalid reset token")
    user = User.from_document(doc)
    if user.reset_token_expire is None:
        raise InvalidTokenError()
    if not is_reset_token_valid(user, token, datetime.now(timezone.utc)):
        raise ExpiredTokenError()

    result = users.update_one(
        {"_id": user.id, "reset_token": token},
        {
            "$set": {"password_hash": hash_password(new_password)},
            "$unset": {"reset_token": "", "reset_token_expire": ""},
        },
    )
    if result.matched_count == 0:
        # Consumed by a concurrent request
        raise NotFoundError("Invalid reset token")
    logger.info("Password reset for user %s", user.id)


def get_user_by_token(db: Database, token: str) -> User:
    user_id = decode_token(token)
    if not ObjectId.is_valid(user_id):
        raise TokenError()
    doc = get_users_collection(db).find_one({"_id": ObjectId(user_id)})
    if doc is None:
        raise TokenError("User not found")
    return User.from_document(doc)
