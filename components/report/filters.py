"""Record selection by period and by derived activity status.

Every function here is pure: inputs are never mutated, output keeps the
input order, and the current time is always an explicit argument.
Filters compose as a conjunction through ``apply_filters``.
"""

import enum
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional, Union

from components.report.records import get_field, has_field, parse_timestamp

ALL = "all"

Predicate = Callable[[Any], bool]
PeriodValue = Union[int, str, None]


class ActivityStatus(str, enum.Enum):
    upcoming = "upcoming"
    ongoing = "ongoing"
    finished = "finished"


def activity_status(start, end, now: datetime) -> ActivityStatus:
    """Status of an activity at ``now``; both bounds count as ongoing.

    ``now`` is required and must be a parseable timestamp.
    """
    start_at = parse_timestamp(start)
    end_at = parse_timestamp(end)
    now_at = parse_timestamp(now)
    if now_at is None:
        raise ValueError(f"Invalid reference time: {now!r}")
    if start_at is not None and now_at < start_at:
        return ActivityStatus.upcoming
    if end_at is not None and now_at > end_at:
        return ActivityStatus.finished
    return ActivityStatus.ongoing


def is_all(value: PeriodValue) -> bool:
    """True for the "no restriction" sentinels: None, 0 and "all"."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip().lower() in (ALL, "", "0")
    return value == 0


def _default_date_field(record: Any) -> str:
    return "date" if has_field(record, "date") else "start"


def month_predicate(year: PeriodValue, month: PeriodValue, date_field: Optional[str] = None) -> Predicate:
    """Predicate keeping records whose timestamp falls in (year, month).

    ``month="all"`` keeps the whole year, ``year="all"`` keeps that month of
    every year, and both set to "all" (or 0) keeps everything.
    """
    year_value = None if is_all(year) else int(year)
    month_value = None if is_all(month) else int(month)

    def predicate(record: Any) -> bool:
        if year_value is None and month_value is None:
            return True
        timestamp = parse_timestamp(get_field(record, date_field or _default_date_field(record)))
        if timestamp is None:
            return False
        if year_value is not None and timestamp.year != year_value:
            return False
        if month_value is not None and timestamp.month != month_value:
            return False
        return True

    return predicate


def status_predicate(status: Union[ActivityStatus, str], now: datetime) -> Predicate:
    if is_all(status):
        return lambda record: True
    wanted = ActivityStatus(status)

    def predicate(record: Any) -> bool:
        return activity_status(get_field(record, "start"), get_field(record, "end"), now) == wanted

    return predicate


def apply_filters(records: Iterable[Any], *predicates: Predicate) -> List[Any]:
    """Records passing every predicate, in input order."""
    return [record for record in records if all(predicate(record) for predicate in predicates)]


def by_month(records: Iterable[Any], year: PeriodValue, month: PeriodValue,
             date_field: Optional[str] = None) -> List[Any]:
    return apply_filters(records, month_predicate(year, month, date_field))


def by_activity_status(activities: Iterable[Any], status: Union[ActivityStatus, str],
                       now: datetime) -> List[Any]:
    return apply_filters(activities, status_predicate(status, now))
