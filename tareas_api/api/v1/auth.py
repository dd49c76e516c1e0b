"""Auth endpoints: register, login, forgot/reset password, me."""

from fastapi import APIRouter, status

from tareas_api.core.exceptions import AppError, to_http_exception
from tareas_api.dependencies import CurrentUser, DbSession
from tareas_api.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    UserResponse,
)
from tareas_api.services.auth_service import (
    register as do_register,
    login as do_login,
    request_password_reset,
    reset_password as do_reset_password,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: DbSession,
):
    try:
        user, token = do_register(db, name=body.name, email=body.email, password=body.password)
    except AppError as e:
        raise to_http_exception(e)
    return AuthResponse(
        message="User registered",
        token=token,
        user=UserResponse.from_user(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: DbSession,
):
    try:
        user, token = do_login(db, email=body.email, password=body.password)
    except AppError as e:
        raise to_http_exception(e)
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.from_user(user),
    )


@router.post("/forgot-password", response_model=ForgotPasswordResponse)
def forgot_password(
    body: ForgotPasswordRequest,
    db: DbSession,
):
    """Issue a reset token. Returned inline for development; also emailed when SMTP is set."""
    try:
        token = request_password_reset(db, body.email)
    except AppError as e:
        raise to_http_exception(e)
    return ForgotPasswordResponse(reset_token=token)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password_route(
    body: ResetPasswordRequest,
    db: DbSession,
):
    """Set new password using reset token (single-use)."""
    try:
        do_reset_password(db, body.token, body.new_password)
    except AppError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Password updated")


@router.get("/me", response_model=UserResponse)
def me(user: CurrentUser):
    return UserResponse.from_user(user)
