"""
Time-window primitives: status classification, overlap and conflicts.

``now`` is always supplied by the caller; nothing here reads the clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from itertools import combinations

from lineup.domain.models import Conflict, Event
from lineup.domain.types import EventStatus


def classify(now: datetime, start: datetime, end: datetime) -> EventStatus:
    """Status of the window ``[start, end]`` at ``now``.

    Active is inclusive at both boundaries. A window with ``end <= start`` is
    never Active: it is Past once ``now >= start`` and Upcoming before.
    """
    if end <= start:
        return EventStatus.PAST if now >= start else EventStatus.UPCOMING
    if now < start:
        return EventStatus.UPCOMING
    if now <= end:
        return EventStatus.ACTIVE
    return EventStatus.PAST


def event_status(event: Event, now: datetime) -> EventStatus:
    return classify(now, event.start, event.end)


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """Half-open overlap test; back-to-back windows do not overlap."""
    return a_start < b_end and b_start < a_end


def events_overlap(a: Event, b: Event) -> bool:
    return overlaps(a.start, a.effective_end, b.start, b.effective_end)


def find_conflicts(events: Iterable[Event]) -> list[Conflict]:
    """Pairs of overlapping events that share at least one target screen."""
    ordered = sorted(events, key=Event.sort_key)
    conflicts: list[Conflict] = []
    for first, second in combinations(ordered, 2):
        shared = first.target_screen_ids & second.target_screen_ids
        if shared and events_overlap(first, second):
            conflicts.append(Conflict(first=first, second=second, screen_ids=frozenset(shared)))
    return conflicts


def max_simultaneous(events: Iterable[Event]) -> int:
    """Peak number of events running at any event's start instant."""
    pool = list(events)
    peak = 0
    for probe in pool:
        running = sum(1 for e in pool if e.start <= probe.start < e.effective_end)
        peak = max(peak, running)
    return peak
