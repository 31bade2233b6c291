"""
Aggregate statistics over an event snapshot for the admin dashboard.

Only the numbers are computed here; charting belongs to the presentation
layer.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import timedelta, tzinfo
from typing import Any

from lineup.domain.models import Event, Screen
from lineup.domain.types import Weekday

from .time_window import max_simultaneous
from .weeks import local_date


@dataclass(frozen=True)
class ScreenOccupancy:
    screen_id: str
    slug: str
    name: str
    events: int
    hours: float


def _ranked(counter: Counter[str], limit: int | None) -> list[tuple[str, int]]:
    ranked = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:limit] if limit is not None else ranked


def tag_counts(events: Iterable[Event], limit: int | None = 8) -> list[tuple[str, int]]:
    counter: Counter[str] = Counter()
    for event in events:
        counter.update(event.tags)
    return _ranked(counter, limit)


def location_counts(events: Iterable[Event], limit: int | None = 6) -> list[tuple[str, int]]:
    return _ranked(Counter(e.location for e in events), limit)


def peak_hours(events: Iterable[Event], tz: tzinfo) -> dict[int, int]:
    """Events per local hour-of-day, stepping hourly from each start while before the end."""
    hours: Counter[int] = Counter()
    for event in events:
        cursor = event.start.astimezone(tz)
        end = event.effective_end
        while cursor < end:
            hours[cursor.hour] += 1
            cursor += timedelta(hours=1)
    return dict(sorted(hours.items()))


def weekday_counts(events: Iterable[Event], tz: tzinfo) -> dict[Weekday, int]:
    counter = Counter(Weekday.of(local_date(e.start, tz)) for e in events)
    return dict(sorted(counter.items()))


def average_duration_minutes(events: Sequence[Event]) -> float:
    if not events:
        return 0.0
    total = sum((e.duration for e in events), timedelta())
    return round(total.total_seconds() / 60 / len(events), 1)


def screen_occupancy(events: Sequence[Event], screens: Iterable[Screen]) -> list[ScreenOccupancy]:
    rows: list[ScreenOccupancy] = []
    for screen in screens:
        assigned = [e for e in events if screen.id in e.target_screen_ids]
        hours = sum((e.duration for e in assigned), timedelta()).total_seconds() / 3600
        rows.append(
            ScreenOccupancy(
                screen_id=screen.id,
                slug=screen.slug,
                name=screen.name,
                events=len(assigned),
                hours=round(hours, 2),
            )
        )
    return rows


def summarize(events: Sequence[Event], screens: Iterable[Screen], tz: tzinfo) -> dict[str, Any]:
    """All dashboard statistics as one JSON-friendly dict."""
    return {
        "total_events": len(events),
        "tags": [{"name": name, "count": count} for name, count in tag_counts(events)],
        "locations": [{"name": name, "count": count} for name, count in location_counts(events)],
        "peak_hours": {f"{hour}h": count for hour, count in peak_hours(events, tz).items()},
        "weekdays": {day.abbr: count for day, count in weekday_counts(events, tz).items()},
        "average_duration_minutes": average_duration_minutes(events),
        "max_simultaneous": max_simultaneous(events),
        "screens": [
            {"id": row.screen_id, "slug": row.slug, "name": row.name, "events": row.events, "hours": row.hours}
            for row in screen_occupancy(events, screens)
        ],
    }
