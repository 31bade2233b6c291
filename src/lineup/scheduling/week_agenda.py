"""
Week agenda: weekday columns for the signage player.

Columns are not slot-limited; scrolling long days is a presentation concern.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, tzinfo

from lineup.domain.models import AgendaColumn, WeekAgenda
from lineup.domain.types import Weekday, WeekStart

from .bucketing import by_weekday
from .contracts import resolve_timezone, validate_included_weekdays, validate_week_start
from .normalize import EventLike, normalize_events
from .weeks import DAYS_PER_WEEK, local_date, week_window


def build_week_agenda(
    events: Iterable[EventLike],
    reference: datetime,
    *,
    week_start: WeekStart | str,
    included_weekdays: Iterable[Weekday | int],
    tz: str | tzinfo,
    current_weekday: Weekday | int | None = None,
) -> WeekAgenda:
    """Build the columns of the week containing ``reference``.

    ``current_weekday`` marks the ``is_today`` column; when omitted it is the
    weekday of ``reference`` in the venue timezone. Columns keep week order
    (starting at ``week_start``) and only include ``included_weekdays``.
    """
    week_start = validate_week_start(week_start)
    included = validate_included_weekdays(included_weekdays)
    zone = resolve_timezone(tz)

    today = (
        Weekday(current_weekday)
        if current_weekday is not None
        else Weekday.of(local_date(reference, zone))
    )

    normalized = normalize_events(events, zone)
    first, last = week_window(reference, week_start, zone)
    grouped = by_weekday(normalized.events, first, last, zone)

    columns: list[AgendaColumn] = []
    first_day = first.date()
    for offset in range(DAYS_PER_WEEK):
        day = first_day + timedelta(days=offset)
        weekday = Weekday.of(day)
        if weekday not in included:
            continue
        columns.append(
            AgendaColumn(
                date=day,
                weekday=weekday,
                is_today=weekday == today,
                events=tuple(grouped.get(weekday, ())),
            )
        )

    return WeekAgenda(
        items=tuple(columns),
        diagnostics=normalized.diagnostics,
        week_start=first,
        week_end=last,
    )
