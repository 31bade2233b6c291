"""
Date bucketing: group events by local calendar day or by weekday.

The bucketing anchor is always the event's start instant. Buckets are
ordered by start, ties broken by event id, so equal timestamps never
produce nondeterministic order.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import date, datetime, tzinfo

from lineup.domain.models import Event
from lineup.domain.types import Weekday

from .weeks import local_date


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Ascending by start instant, then by id."""
    return sorted(events, key=Event.sort_key)


def day_key(event: Event, tz: tzinfo) -> date:
    """Local calendar date of the event's start."""
    return local_date(event.start, tz)


def by_calendar_day(events: Iterable[Event], tz: tzinfo) -> dict[date, list[Event]]:
    buckets: dict[date, list[Event]] = defaultdict(list)
    for event in events:
        buckets[day_key(event, tz)].append(event)
    return {key: sort_events(bucket) for key, bucket in buckets.items()}


def by_weekday(
    events: Iterable[Event],
    week_start: datetime,
    week_end: datetime,
    tz: tzinfo,
) -> dict[Weekday, list[Event]]:
    """Group events starting within ``[week_start, week_end]`` by weekday.

    Events outside the window are dropped silently; choosing the window is
    the caller's job.
    """
    buckets: dict[Weekday, list[Event]] = defaultdict(list)
    for event in events:
        if week_start <= event.start <= week_end:
            buckets[Weekday.of(day_key(event, tz))].append(event)
    return {key: sort_events(bucket) for key, bucket in buckets.items()}
