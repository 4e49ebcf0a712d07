"""Pydantic schemas for reporting views."""

import enum
from datetime import date
from typing import List, Optional
from pydantic import BaseModel

from components.activity.schemas import Activity


class Timeframe(str, enum.Enum):
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


class DailyBucket(BaseModel):
    """One calendar day of revenue, expense and cumulative balance."""
    date: date
    revenue_total: float
    expense_total: float
    running_balance: float


class Summary(BaseModel):
    """Category totals by magnitude and the resulting net balance."""
    revenue_total: float = 0.0
    expense_total: float = 0.0
    net_balance: float = 0.0
    revenue_count: int = 0
    expense_count: int = 0


class TimeframeBucket(BaseModel):
    """Day bucket (weekly/monthly views) or month bucket (yearly view)."""
    key: str
    label: str
    revenue_sum: float
    expense_sum: float
    activity_count: int


class TimeframeMetrics(BaseModel):
    total_revenue: float = 0.0
    total_expense: float = 0.0
    net_balance: float = 0.0
    total_activities: int = 0


class ChartSeries(BaseModel):
    """Chart-ready columns; values line up with labels."""
    labels: List[str]
    revenue: List[float]
    expense: List[float]
    activities: List[int]


class TimeframeReport(BaseModel):
    timeframe: Timeframe
    buckets: List[TimeframeBucket]
    metrics: TimeframeMetrics
    chart: ChartSeries


class ActivityReport(BaseModel):
    period: str
    status: Optional[str] = None
    activities: List[Activity]
