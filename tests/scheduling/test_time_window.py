"""
Time window tests: status boundaries, half-open overlap and conflicts.
"""

from __future__ import annotations

from datetime import timedelta

from conftest import MONDAY, at, make_event

from lineup.domain.types import EventStatus
from lineup.scheduling.time_window import (
    classify,
    event_status,
    find_conflicts,
    max_simultaneous,
    overlaps,
)

T = at(MONDAY, 9)
HOUR = timedelta(hours=1)
TICK = timedelta(microseconds=1)


def test_active_at_exact_start_and_end():
    assert classify(T, T, T + HOUR) is EventStatus.ACTIVE
    assert classify(T + HOUR, T, T + HOUR) is EventStatus.ACTIVE


def test_upcoming_just_before_start():
    assert classify(T - TICK, T, T + HOUR) is EventStatus.UPCOMING


def test_past_just_after_end():
    assert classify(T + HOUR + TICK, T, T + HOUR) is EventStatus.PAST


def test_inverted_window_is_never_active():
    """end <= start: Past once now >= start, Upcoming before."""
    assert classify(T - TICK, T, T - HOUR) is EventStatus.UPCOMING
    assert classify(T, T, T - HOUR) is EventStatus.PAST
    assert classify(T, T, T) is EventStatus.PAST
    assert classify(T + HOUR, T, T) is EventStatus.PAST


def test_event_status_uses_event_window():
    event = make_event("a", T, T + HOUR)
    assert event_status(event, T + timedelta(minutes=30)) is EventStatus.ACTIVE


def test_back_to_back_windows_do_not_overlap():
    assert overlaps(T, T + HOUR, T + HOUR, T + 2 * HOUR) is False
    assert overlaps(T + HOUR, T + 2 * HOUR, T, T + HOUR) is False


def test_partial_and_nested_windows_overlap():
    assert overlaps(T, T + HOUR, T + HOUR / 2, T + 2 * HOUR) is True
    assert overlaps(T, T + 3 * HOUR, T + HOUR, T + 2 * HOUR) is True


def test_conflicts_require_shared_screen(scenario_events):
    conflicts = find_conflicts(scenario_events)
    assert len(conflicts) == 1
    (conflict,) = conflicts
    assert (conflict.first.id, conflict.second.id) == ("E1", "E2")
    assert conflict.screen_ids == frozenset({"S1"})


def test_events_without_screens_never_conflict():
    a = make_event("a", T, T + HOUR)
    b = make_event("b", T, T + HOUR)
    assert find_conflicts([a, b]) == []


def test_inverted_event_is_a_point_for_conflicts():
    long = make_event("long", T, T + 2 * HOUR, ("S1",))
    point = make_event("point", T + HOUR, T, ("S1",))
    outside = make_event("outside", T + 3 * HOUR, T, ("S1",))
    ids = {(c.first.id, c.second.id) for c in find_conflicts([long, point, outside])}
    assert ids == {("long", "point")}


def test_max_simultaneous(scenario_events):
    assert max_simultaneous(scenario_events) == 2
    assert max_simultaneous([]) == 0
