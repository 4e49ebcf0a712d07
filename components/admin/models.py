"""Admin model for the database."""

from sqlalchemy import Column, Integer, String

from components.core.database import Base


class Admin(Base):
    """Administrator account. The one with the lowest id is the super admin."""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # Hashed password
