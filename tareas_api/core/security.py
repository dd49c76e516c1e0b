"""JWT creation/verification and password hashing."""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from jose import JWTError, jwt
from jose.exceptions import JOSEError
from passlib.context import CryptContext
from passlib.exc import PasswordValueError

from tareas_api.config import get_settings
from tareas_api.core.exceptions import HashingError, InternalError, TokenError, ValidationError


@lru_cache
def _pwd_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str) -> str:
    try:
        return _pwd_context(get_settings().bcrypt_rounds).hash(password)
    except PasswordValueError as e:
        raise ValidationError("Password not accepted") from e
    except (ValueError, TypeError) as e:
        raise HashingError("Could not hash password") from e


def verify_password(plain: str, hashed: str) -> bool:
    """Return False on mismatch or a password bcrypt cannot take.

    Raises HashingError only when ``hashed`` itself is malformed.
    """
    try:
        return _pwd_context(get_settings().bcrypt_rounds).verify(plain, hashed)
    except PasswordValueError:
        # NUL byte or oversized secret: bcrypt never hashed it, so it cannot match
        return False
    except (ValueError, TypeError) as e:
        raise HashingError("Stored password hash is malformed") from e


def create_access_token(sub: str, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(days=settings.access_token_expire_days)
    expire = datetime.now(timezone.utc) + expires_delta
    try:
        return jwt.encode(
            {"sub": sub, "exp": expire},
            settings.secret_key,
            algorithm=settings.algorithm,
        )
    except JOSEError as e:
        raise InternalError("Could not sign access token") from e


def decode_token(token: str) -> str:
    """Verify signature and expiry; return the subject id."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise TokenError() from e
    sub = payload.get("sub")
    if not sub:
        raise TokenError()
    return sub
