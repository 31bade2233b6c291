"""
Month grid: full weeks covering a reference month, one cell per day.

The grid starts on the week-start day on or before the 1st and ends on the
week's last day on or after the month's last day, so the number of rows
varies (4 to 6) and the cell count is always a multiple of 7. Days outside
the month are still populated.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, tzinfo

from lineup.domain.models import CalendarCell, MonthGrid
from lineup.domain.types import WeekStart

from .bucketing import by_calendar_day
from .contracts import resolve_timezone, validate_max_visible, validate_week_start
from .exceptions import ConfigurationError
from .normalize import EventLike, normalize_events
from .overflow import apply_overflow
from .weeks import iter_days, month_bounds, week_end_on_or_after, week_start_on_or_before


def grid_bounds(year: int, month: int, week_start: WeekStart) -> tuple[date, date]:
    """First and last date shown for the month."""
    first_of_month, last_of_month = month_bounds(year, month)
    return (
        week_start_on_or_before(first_of_month, week_start),
        week_end_on_or_after(last_of_month, week_start),
    )


def build_month_grid(
    events: Iterable[EventLike],
    year: int,
    month: int,
    *,
    week_start: WeekStart | str,
    max_visible: int,
    tz: str | tzinfo,
    today: date | None = None,
) -> MonthGrid:
    """Project events onto the month grid for ``year``/``month``.

    Args:
        events: Parsed ``Event`` values or raw persistence records
        year, month: Reference month
        week_start: First weekday of each grid row
        max_visible: Per-cell slot limit handed to the overflow policy
        tz: Venue timezone used to derive each event's day
        today: Optional local date to flag with ``is_today``

    Returns:
        MonthGrid whose cells are in date order, plus diagnostics for
        records that were excluded or degraded.

    Raises:
        ConfigurationError: For an invalid month, week start or slot limit.
    """
    if not 1 <= month <= 12:
        raise ConfigurationError(f"month must be in 1..12, got {month}", parameter="month")
    week_start = validate_week_start(week_start)
    max_visible = validate_max_visible(max_visible)
    zone = resolve_timezone(tz)

    normalized = normalize_events(events, zone)
    buckets = by_calendar_day(normalized.events, zone)
    first, last = grid_bounds(year, month, week_start)

    cells: list[CalendarCell] = []
    for day in iter_days(first, last):
        day_events = buckets.get(day, [])
        visible, hidden_count = apply_overflow(day_events, max_visible)
        cells.append(
            CalendarCell(
                date=day,
                is_in_reference_month=(day.year, day.month) == (year, month),
                visible_events=visible,
                hidden_count=hidden_count,
                is_today=today is not None and day == today,
                events=tuple(day_events),
            )
        )

    return MonthGrid(
        items=tuple(cells),
        diagnostics=normalized.diagnostics,
        year=year,
        month=month,
    )
