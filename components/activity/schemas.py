"""Pydantic schemas for activity data validation."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator, model_validator

from components.core.timeutils import to_naive_utc
from components.report.filters import ActivityStatus


class ActivityBase(BaseModel):
    """Base activity schema."""
    title: str
    start: datetime
    end: datetime
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value

    @field_validator("start", "end")
    @classmethod
    def as_naive_utc(cls, value: datetime) -> datetime:
        return to_naive_utc(value)

    @model_validator(mode="after")
    def start_before_end(self):
        if self.start >= self.end:
            raise ValueError("Start must be before end")
        return self


class ActivityCreate(ActivityBase):
    """Schema for activity creation."""
    pass


class ActivityUpdate(ActivityBase):
    """Schema for activity update."""
    pass


class Activity(BaseModel):
    """Schema for activity response, with the status as of the request time."""
    id: int
    title: str
    start: datetime
    end: datetime
    description: Optional[str] = None
    status: ActivityStatus

    class Config:
        from_attributes = True
