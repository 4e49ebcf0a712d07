"""Uniform field access over ORM rows, pydantic models and plain dicts."""

from datetime import date, datetime
from typing import Any, Optional

import pandas as pd

from components.core.timeutils import to_naive_utc


def get_field(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, dict):
        return record.get(name, default)
    return getattr(record, name, default)


def has_field(record: Any, name: str) -> bool:
    if isinstance(record, dict):
        return name in record
    return hasattr(record, name)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Best-effort conversion to a naive UTC datetime; None when unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    timestamp = pd.to_datetime(value, errors="coerce")
    if timestamp is None or pd.isna(timestamp):
        return None
    if timestamp.tzinfo is not None:
        timestamp = timestamp.tz_convert("UTC").tz_localize(None)
    return timestamp.to_pydatetime()
