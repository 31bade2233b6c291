"""
Calendar math: week and month boundaries defined once, centrally.

Pure functions over dates and aware datetimes. No events, no clock.
Week windows are computed in the venue's local calendar.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, tzinfo

from lineup.domain.types import WeekStart

DAYS_PER_WEEK = 7


def local_date(instant: datetime, tz: tzinfo) -> date:
    """Calendar date of ``instant`` in the venue timezone."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=tz)
    return instant.astimezone(tz).date()


def week_start_on_or_before(day: date, week_start: WeekStart) -> date:
    """First day of the week containing ``day``."""
    offset = (day.weekday() - week_start.weekday) % DAYS_PER_WEEK
    return day - timedelta(days=offset)


def week_end_on_or_after(day: date, week_start: WeekStart) -> date:
    """Last day of the week containing ``day``."""
    return week_start_on_or_before(day, week_start) + timedelta(days=DAYS_PER_WEEK - 1)


def start_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def week_window(instant: datetime, week_start: WeekStart, tz: tzinfo) -> tuple[datetime, datetime]:
    """Inclusive ``(first, last)`` instants of the local week containing ``instant``.

    ``last`` is one microsecond before local midnight starting the next week.
    """
    first_day = week_start_on_or_before(local_date(instant, tz), week_start)
    first = start_of_day(first_day, tz)
    last = start_of_day(first_day + timedelta(days=DAYS_PER_WEEK), tz) - timedelta(microseconds=1)
    return first, last


def is_same_week(a: datetime, b: datetime, week_start: WeekStart, tz: tzinfo) -> bool:
    return week_start_on_or_before(local_date(a, tz), week_start) == week_start_on_or_before(
        local_date(b, tz), week_start
    )


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the month."""
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def iter_days(first: date, last: date):
    """Every date from ``first`` to ``last`` inclusive."""
    day = first
    while day <= last:
        yield day
        day += timedelta(days=1)
