"""Reporting views derived from transaction and activity snapshots.

Amounts are always summed by magnitude inside their category and the sign
is rebuilt afterwards (revenue minus expense), so a stored negative expense
and a stored positive expense contribute the same way. Sums run on integer
cents, so totals, running balances and net balances agree to the cent. Non-numeric or
missing amounts count as 0; records without a usable timestamp are left out
of time bucketing but still count in ``summarize``.
"""

from datetime import date, datetime
from typing import Any, Callable, Iterable, List, Optional

import numpy as np
import pandas as pd

from components.report.records import get_field, parse_timestamp
from components.report.schemas import (
    DailyBucket,
    Summary,
    Timeframe,
    TimeframeBucket,
    TimeframeMetrics,
)
from components.transaction.models import Category

TIMEFRAME_LIMITS = {
    Timeframe.weekly: 7,
    Timeframe.monthly: 30,
    Timeframe.yearly: 12,
}

_COLUMNS = ["key", "revenue", "expense"]


def _category(value: Any) -> Optional[str]:
    try:
        return Category.parse(value).value
    except ValueError:
        return None


def _cents(values: List[Any]) -> pd.Series:
    """Magnitudes of the given amounts in whole cents, anything non-numeric as 0."""
    series = pd.to_numeric(pd.Series(values, dtype="object"), errors="coerce").astype("float64")
    series = series.where(np.isfinite(series), 0.0)
    return (series.abs() * 100).round().astype("int64")


def _to_amount(cents) -> float:
    return int(cents) / 100


def _day_key(timestamp) -> str:
    return timestamp.date().isoformat()


def _month_key(timestamp) -> str:
    return f"{timestamp.year:04d}-{timestamp.month:02d}"


def _transactions_frame(transactions: Iterable[Any], key: Callable = _day_key) -> pd.DataFrame:
    """One row per transaction: bucket key, revenue magnitude, expense magnitude."""
    records = list(transactions)
    categories = [_category(get_field(t, "category")) for t in records]
    cents = _cents([get_field(t, "amount") for t in records])
    timestamps = [parse_timestamp(get_field(t, "date")) for t in records]

    is_revenue = pd.Series([c == Category.revenue.value for c in categories], dtype="bool")
    is_expense = pd.Series([c == Category.expense.value for c in categories], dtype="bool")
    return pd.DataFrame({
        "key": pd.Series([key(ts) if ts is not None else None for ts in timestamps], dtype="object"),
        "revenue": cents.where(is_revenue, 0),
        "expense": cents.where(is_expense, 0),
    }, columns=_COLUMNS)


def _activity_keys(activities: Iterable[Any], key: Callable = _day_key) -> pd.Series:
    timestamps = (parse_timestamp(get_field(a, "start")) for a in activities)
    return pd.Series([key(ts) for ts in timestamps if ts is not None], dtype="object")


def summarize(transactions: Iterable[Any]) -> Summary:
    """Revenue and expense totals by magnitude, then net = revenue - expense."""
    records = list(transactions)
    if not records:
        return Summary()

    frame = _transactions_frame(records)
    categories = [_category(get_field(t, "category")) for t in records]
    revenue_cents = int(frame["revenue"].sum())
    expense_cents = int(frame["expense"].sum())
    return Summary(
        revenue_total=_to_amount(revenue_cents),
        expense_total=_to_amount(expense_cents),
        net_balance=_to_amount(revenue_cents - expense_cents),
        revenue_count=categories.count(Category.revenue.value),
        expense_count=categories.count(Category.expense.value),
    )


def bucket_by_day(transactions: Iterable[Any], activities: Iterable[Any] = ()) -> List[DailyBucket]:
    """Daily revenue/expense totals with a running balance, ascending by day.

    Days present only through an activity get zero totals; days with no
    record at all are omitted rather than zero-filled.
    """
    frame = _transactions_frame(transactions).dropna(subset=["key"])
    daily = frame.groupby("key")[["revenue", "expense"]].sum()

    keys = sorted(set(daily.index) | set(_activity_keys(activities)))
    if not keys:
        return []

    daily = daily.reindex(keys, fill_value=0)
    daily["running_balance"] = (daily["revenue"] - daily["expense"]).cumsum()
    return [
        DailyBucket(
            date=key,
            revenue_total=_to_amount(row["revenue"]),
            expense_total=_to_amount(row["expense"]),
            running_balance=_to_amount(row["running_balance"]),
        )
        for key, row in daily.iterrows()
    ]


def _bucket_label(key: str, timeframe: Timeframe) -> str:
    if timeframe == Timeframe.yearly:
        return datetime.strptime(key, "%Y-%m").strftime("%b %Y")
    day = date.fromisoformat(key)
    return f"{day.day}/{day.month}"


def group_by_timeframe(transactions: Iterable[Any], activities: Iterable[Any],
                       timeframe) -> List[TimeframeBucket]:
    """Buckets for the dashboard chart, limited to the most recent ones.

    Weekly and monthly views bucket by day (7 and 30 buckets), the yearly
    view buckets by month (12 buckets).
    """
    timeframe = Timeframe(timeframe)
    key = _month_key if timeframe == Timeframe.yearly else _day_key

    frame = _transactions_frame(transactions, key).dropna(subset=["key"])
    sums = frame.groupby("key")[["revenue", "expense"]].sum()
    counts = _activity_keys(activities, key).value_counts()

    keys = sorted(set(sums.index) | set(counts.index))
    if not keys:
        return []
    keys = keys[-TIMEFRAME_LIMITS[timeframe]:]

    sums = sums.reindex(keys, fill_value=0)
    counts = counts.reindex(keys, fill_value=0)
    return [
        TimeframeBucket(
            key=bucket_key,
            label=_bucket_label(bucket_key, timeframe),
            revenue_sum=_to_amount(sums.at[bucket_key, "revenue"]),
            expense_sum=_to_amount(sums.at[bucket_key, "expense"]),
            activity_count=int(counts.at[bucket_key]),
        )
        for bucket_key in keys
    ]


def timeframe_metrics(buckets: Iterable[TimeframeBucket]) -> TimeframeMetrics:
    """Totals over already-grouped buckets, as shown on the dashboard cards."""
    buckets = list(buckets)
    revenue_cents = sum(round(bucket.revenue_sum * 100) for bucket in buckets)
    expense_cents = sum(round(bucket.expense_sum * 100) for bucket in buckets)
    return TimeframeMetrics(
        total_revenue=_to_amount(revenue_cents),
        total_expense=_to_amount(expense_cents),
        net_balance=_to_amount(revenue_cents - expense_cents),
        total_activities=sum(bucket.activity_count for bucket in buckets),
    )
