"""User model for the database."""

from sqlalchemy import Column, Integer, String, Boolean

from components.core.database import Base


class User(Base):
    """Clinic staff account; it can log in only once an admin approves it."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # Hashed password
    is_approved = Column(Boolean, nullable=False, default=False)
