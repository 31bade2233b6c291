"""
Screen filter: the events one screen should show right now.

Recomputed from the full snapshot on every refresh; holds no state.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from lineup.domain.models import Event, ScreenSelection
from lineup.domain.types import WeekStart

from .bucketing import sort_events
from .contracts import resolve_timezone, validate_week_start
from .normalize import EventLike, normalize_events
from .weeks import week_window


def for_screen(
    events: Iterable[EventLike],
    screen_id: str,
    now: datetime,
    *,
    retain_current_week: bool,
    week_start: WeekStart | str,
    tz: str | tzinfo,
) -> ScreenSelection:
    """Events targeting ``screen_id`` that have not ended.

    With ``retain_current_week`` an event that already ended stays listed
    while its start falls in the calendar week containing ``now``, so the
    signage agenda does not blank out days earlier in the week. The raw
    ``end`` is compared, so an inverted record whose end has passed is only
    kept through week retention.
    """
    week_start = validate_week_start(week_start)
    zone = resolve_timezone(tz)
    normalized = normalize_events(events, zone)
    first, last = week_window(now, week_start, zone)

    def keep(event: Event) -> bool:
        if screen_id not in event.target_screen_ids:
            return False
        if event.end >= now:
            return True
        return retain_current_week and first <= event.start <= last

    return ScreenSelection(
        items=tuple(sort_events(e for e in normalized.events if keep(e))),
        diagnostics=normalized.diagnostics,
        screen_id=screen_id,
    )


def current_events(events: Iterable[Event], now: datetime) -> list[Event]:
    """Events that have not ended yet."""
    return sort_events(e for e in events if e.end >= now)


def active_events(events: Iterable[Event], now: datetime) -> list[Event]:
    """Events running at ``now`` (inclusive at both ends)."""
    return sort_events(e for e in events if not e.is_inverted and e.start <= now <= e.end)


def upcoming_events(events: Iterable[Event], now: datetime) -> list[Event]:
    """Events that start after ``now``."""
    return sort_events(e for e in events if e.start > now)
