"""Pydantic schemas for admin data validation."""

from pydantic import BaseModel

from components.core.schemas import Message
from components.user.schemas import Credentials


class AdminCreate(Credentials):
    """Schema for admin creation."""
    pass


class AdminPublic(BaseModel):
    """Admin as returned on creation and login."""
    id: int
    email: str

    class Config:
        from_attributes = True


class Admin(AdminPublic):
    """Admin listing entry; ``is_super_admin`` is derived, not stored."""
    is_super_admin: bool = False


class AdminLoginResponse(Message):
    admin: AdminPublic
