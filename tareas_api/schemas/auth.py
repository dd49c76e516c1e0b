"""Auth request/response schemas."""

from typing import Optional

from pydantic import BaseModel, EmailStr

from tareas_api.db.models.user import User


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str
    new_password: str


class UserResponse(BaseModel):
    """Public view: never carries the hash or reset fields."""

    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=str(user.id), name=user.name, email=user.email)


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    token: str
    token_type: str = "bearer"
    user: UserResponse


class ForgotPasswordResponse(BaseModel):
    success: bool = True
    message: str = "Reset token generated"
    reset_token: str
    note: Optional[str] = "In production this token would only be sent by email"


class MessageResponse(BaseModel):
    success: bool = True
    message: str
