"""Reporting endpoints: summaries, daily buckets, dashboard series and PDF export."""

from typing import List, Optional, Tuple
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from components.activity.repository import ActivityRepository, to_schema
from components.core.exceptions import ValidationError
from components.core.init_db import get_db
from components.core.timeutils import utc_now
from components.report import aggregator, filters, renderer
from components.report import schemas
from components.report.filters import ActivityStatus
from components.transaction.repository import TransactionRepository

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
)

YEAR_QUERY = Query("all", description='Year, or "all"')
MONTH_QUERY = Query("all", description='Month number 1-12, or "all"')


def parse_period(year: str, month: str) -> Tuple[Optional[int], Optional[int]]:
    """Validate year/month query values; None stands for "all"."""
    try:
        year_value = None if filters.is_all(year) else int(year)
        month_value = None if filters.is_all(month) else int(month)
    except ValueError:
        raise ValidationError('Year and month must be numbers or "all"')
    if month_value is not None and not 1 <= month_value <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return year_value, month_value


def period_label(year: Optional[int], month: Optional[int]) -> str:
    if year is None and month is None:
        return "All time"
    if month is None:
        return str(year)
    if year is None:
        return f"Month {month:02d}, all years"
    return f"{year}-{month:02d}"


async def _load_transactions(db: AsyncSession, year: Optional[int], month: Optional[int]) -> List:
    transactions = await TransactionRepository(db).get_all()
    return filters.by_month(transactions, year, month, date_field="date")


async def _load_activities(db: AsyncSession, year: Optional[int], month: Optional[int]) -> List:
    activities = await ActivityRepository(db).get_all()
    return filters.by_month(activities, year, month, date_field="start")


@router.get("/summary", response_model=schemas.Summary)
async def get_summary(
    year: str = YEAR_QUERY,
    month: str = MONTH_QUERY,
    db: AsyncSession = Depends(get_db)
):
    """Revenue, expense and net balance for the period."""
    year_value, month_value = parse_period(year, month)
    return aggregator.summarize(await _load_transactions(db, year_value, month_value))


@router.get("/daily", response_model=List[schemas.DailyBucket])
async def get_daily(
    year: str = YEAR_QUERY,
    month: str = MONTH_QUERY,
    db: AsyncSession = Depends(get_db)
):
    """Per-day revenue and expense with the running balance.

    Days on which only an activity starts are listed with zero totals.
    """
    year_value, month_value = parse_period(year, month)
    return aggregator.bucket_by_day(
        await _load_transactions(db, year_value, month_value),
        await _load_activities(db, year_value, month_value),
    )


@router.get("/timeframe", response_model=schemas.TimeframeReport)
async def get_timeframe(
    timeframe: schemas.Timeframe = Query(schemas.Timeframe.weekly),
    db: AsyncSession = Depends(get_db)
):
    """
    Dashboard series for the most recent buckets.

    - weekly: last 7 days with records
    - monthly: last 30 days with records
    - yearly: last 12 months with records
    """
    transactions = await TransactionRepository(db).get_all()
    activities = await ActivityRepository(db).get_all()
    buckets = aggregator.group_by_timeframe(transactions, activities, timeframe)
    return schemas.TimeframeReport(
        timeframe=timeframe,
        buckets=buckets,
        metrics=aggregator.timeframe_metrics(buckets),
        chart=renderer.render_chart_series(buckets),
    )


@router.get("/activities", response_model=schemas.ActivityReport)
async def get_activities(
    status: str = Query("all", description='"all", "upcoming", "ongoing" or "finished"'),
    year: str = YEAR_QUERY,
    month: str = MONTH_QUERY,
    db: AsyncSession = Depends(get_db)
):
    """Activities of the period, optionally restricted to one status."""
    year_value, month_value = parse_period(year, month)
    if not filters.is_all(status) and status not in {s.value for s in ActivityStatus}:
        raise ValidationError('Status must be "all", "upcoming", "ongoing" or "finished"')

    now = utc_now()
    activities = await ActivityRepository(db).get_all()
    selected = filters.apply_filters(
        activities,
        filters.month_predicate(year_value, month_value, "start"),
        filters.status_predicate(status, now),
    )
    return schemas.ActivityReport(
        period=period_label(year_value, month_value),
        status=None if filters.is_all(status) else status,
        activities=[to_schema(activity, now) for activity in selected],
    )


@router.get("/export.pdf")
async def export_pdf(
    year: str = YEAR_QUERY,
    month: str = MONTH_QUERY,
    db: AsyncSession = Depends(get_db)
):
    """Download the period report as a PDF document."""
    year_value, month_value = parse_period(year, month)
    label = period_label(year_value, month_value)
    transactions = await _load_transactions(db, year_value, month_value)
    now = utc_now()
    activities = [to_schema(a, now) for a in await _load_activities(db, year_value, month_value)]

    content = renderer.render_pdf(
        label,
        aggregator.summarize(transactions),
        aggregator.bucket_by_day(transactions),
        activities,
    )
    filename = f"report-{label.replace(' ', '_').replace(',', '')}.pdf"
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
