"""Pydantic schemas for user data validation."""

from pydantic import BaseModel, field_validator

from components.core.schemas import Message


class Credentials(BaseModel):
    """Email and password pair used for registration and login."""
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("Email is required")
        return value

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class UserCreate(Credentials):
    """Schema for self-registration."""
    pass


class User(BaseModel):
    """Schema for user response; never carries the password hash."""
    id: int
    email: str
    is_approved: bool

    class Config:
        from_attributes = True


class LoginResponse(Message):
    user: User
