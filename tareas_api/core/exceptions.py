"""Domain errors and their HTTP mapping."""

from typing import Optional

from fastapi import HTTPException, status


class AppError(Exception):
    """Client-facing error: carries the status code and a safe message."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    default_message = "Invalid data"


class DuplicateEmailError(AppError):
    default_message = "Email already registered"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidIdError(AppError):
    default_message = "Invalid id"


class EmptyUpdateError(AppError):
    default_message = "No fields to update"


class InvalidTokenError(AppError):
    default_message = "Invalid reset token"


class ExpiredTokenError(AppError):
    default_message = "Reset token has expired"


class TokenError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"


class InternalError(Exception):
    """Server-side failure. Logged, never detailed to the caller."""


class HashingError(InternalError):
    pass


def to_http_exception(err: AppError) -> HTTPException:
    headers = None
    if isinstance(err, TokenError):
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(status_code=err.status_code, detail=err.message, headers=headers)
