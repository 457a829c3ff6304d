"""Calendar helpers for day boundaries, day comparisons and date arithmetic.

Naive datetimes are interpreted in the requested timezone (the
``DELAMAIN_TIMEZONE`` setting when none is given); aware datetimes are
converted to it first.
"""

from __future__ import annotations

import calendar
from datetime import datetime, time, timedelta, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from .config import get_settings

TimezoneLike = Union[str, tzinfo, None]


def _resolve_tz(tz: TimezoneLike) -> tzinfo:
    if tz is None:
        return ZoneInfo(get_settings().timezone)
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def _localize(dt: datetime, tz: tzinfo) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def start_of_day(dt: datetime, tz: TimezoneLike = None) -> datetime:
    """Return midnight of the day *dt* falls on in *tz*."""

    zone = _resolve_tz(tz)
    local = _localize(dt, zone)
    return datetime.combine(local.date(), time(0, 0), tzinfo=zone)


def end_of_day(dt: datetime, tz: TimezoneLike = None) -> datetime:
    """Return 23:59:59 of the day *dt* falls on in *tz*."""

    zone = _resolve_tz(tz)
    local = _localize(dt, zone)
    return datetime.combine(local.date(), time(23, 59, 59), tzinfo=zone)


def is_same_day(first: datetime, second: datetime, tz: TimezoneLike = None) -> bool:
    zone = _resolve_tz(tz)
    return _localize(first, zone).date() == _localize(second, zone).date()


def _day_offset(dt: datetime, now: Optional[datetime], tz: TimezoneLike) -> int:
    zone = _resolve_tz(tz)
    reference = _localize(now, zone) if now is not None else datetime.now(zone)
    return (_localize(dt, zone).date() - reference.date()).days


def is_today(
    dt: datetime, *, now: Optional[datetime] = None, tz: TimezoneLike = None
) -> bool:
    return _day_offset(dt, now, tz) == 0


def is_yesterday(
    dt: datetime, *, now: Optional[datetime] = None, tz: TimezoneLike = None
) -> bool:
    return _day_offset(dt, now, tz) == -1


def is_tomorrow(
    dt: datetime, *, now: Optional[datetime] = None, tz: TimezoneLike = None
) -> bool:
    return _day_offset(dt, now, tz) == 1


def add_days(dt: datetime, days: int) -> datetime:
    """Shift *dt* by whole days; negative values go back in time."""

    return dt + timedelta(days=days)


def add_weeks(dt: datetime, weeks: int) -> datetime:
    return dt + timedelta(weeks=weeks)


def add_months(dt: datetime, months: int) -> datetime:
    """Shift *dt* by calendar months.

    Days that do not exist in the target month are clamped to its last day,
    e.g. January 31st plus one month is the last day of February.
    """

    month_index = dt.month - 1 + months
    year = dt.year + month_index // 12
    month = month_index % 12 + 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def is_before(dt: datetime, other: datetime) -> bool:
    return dt < other


def is_after(dt: datetime, other: datetime) -> bool:
    return dt > other


def is_between(dt: datetime, start: datetime, end: datetime) -> bool:
    """Return ``True`` when ``start <= dt <= end``."""

    return start <= dt <= end


__all__ = [
    "add_days",
    "add_months",
    "add_weeks",
    "end_of_day",
    "is_after",
    "is_before",
    "is_between",
    "is_same_day",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "start_of_day",
]
