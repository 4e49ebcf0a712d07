"""Activity model for the database."""

from sqlalchemy import Column, Integer, String, DateTime, Text

from components.core.database import Base


class Activity(Base):
    """Scheduled clinic activity. Its status is derived, never stored."""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    start = Column(DateTime, nullable=False, index=True)
    end = Column(DateTime, nullable=False)
    description = Column(Text, nullable=True)
