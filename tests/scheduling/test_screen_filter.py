"""
Screen filter tests.
"""

from __future__ import annotations

from datetime import UTC, timedelta

from conftest import MONDAY, SUNDAY, TUESDAY, at, make_event

from lineup.domain.types import WeekStart
from lineup.scheduling.screen_filter import (
    active_events,
    current_events,
    for_screen,
    upcoming_events,
)

NOW = at(MONDAY, 9, 45)


def _select(events, screen_id, now=NOW, *, retain=True, week_start=WeekStart.SUNDAY):
    return for_screen(
        events, screen_id, now, retain_current_week=retain, week_start=week_start, tz=UTC
    )


def test_scenario_selection_per_screen(scenario_events):
    assert [e.id for e in _select(scenario_events, "S1")] == ["E1", "E2"]
    assert [e.id for e in _select(scenario_events, "S2")] == ["E2", "E3"]
    assert _select(scenario_events, "S9").events == ()


def test_untargeted_event_is_never_selected():
    event = make_event("floating", at(MONDAY, 10), at(MONDAY, 11))
    assert len(_select([event], "S1")) == 0


def test_ended_event_retained_within_current_week():
    ended = make_event("ended", at(MONDAY, 7), at(MONDAY, 8), ("S1",))
    assert [e.id for e in _select([ended], "S1")] == ["ended"]


def test_ended_event_dropped_without_retention():
    ended = make_event("ended", at(MONDAY, 7), at(MONDAY, 8), ("S1",))
    assert len(_select([ended], "S1", retain=False)) == 0


def test_ended_event_from_previous_week_dropped():
    saturday = SUNDAY - timedelta(days=1)
    ended = make_event("old", at(saturday, 10), at(saturday, 11), ("S1",))
    assert len(_select([ended], "S1")) == 0


def test_retention_depends_on_week_start():
    # Sunday morning belongs to this week for a Sunday-start week but to the
    # previous week for a Monday-start week.
    ended = make_event("sun", at(SUNDAY, 10), at(SUNDAY, 11), ("S1",))
    assert len(_select([ended], "S1", week_start=WeekStart.SUNDAY)) == 1
    assert len(_select([ended], "S1", week_start=WeekStart.MONDAY)) == 0


def test_event_ending_exactly_now_is_kept():
    event = make_event("edge", at(MONDAY, 9), NOW, ("S1",))
    assert len(_select([event], "S1", retain=False)) == 1


def test_selection_sorted_by_start_then_id():
    events = [
        make_event("b", at(TUESDAY, 9), at(TUESDAY, 10), ("S1",)),
        make_event("c", at(MONDAY, 11), at(MONDAY, 12), ("S1",)),
        make_event("a", at(TUESDAY, 9), at(TUESDAY, 10), ("S1",)),
    ]
    assert [e.id for e in _select(events, "S1")] == ["c", "a", "b"]


def test_current_active_upcoming(scenario_events):
    ended = make_event("ended", at(MONDAY, 7), at(MONDAY, 8), ("S1",))
    events = [*scenario_events, ended]
    assert [e.id for e in current_events(events, NOW)] == ["E1", "E2", "E3"]
    assert [e.id for e in active_events(events, NOW)] == ["E1", "E2"]
    assert [e.id for e in upcoming_events(events, NOW)] == ["E3"]


def test_inverted_event_is_never_active():
    inverted = make_event("inv", at(MONDAY, 10), at(MONDAY, 9), ("S1",))
    assert active_events([inverted], at(MONDAY, 10)) == []


def test_inverted_event_compares_raw_end():
    """end < now <= start: dropped unless the current week is retained."""
    inverted = make_event("inv", at(MONDAY, 10), at(MONDAY, 9), ("S1",))
    assert len(_select([inverted], "S1", now=at(MONDAY, 9, 30), retain=False)) == 0
    assert [e.id for e in _select([inverted], "S1", now=at(MONDAY, 9, 30))] == ["inv"]
    assert current_events([inverted], at(MONDAY, 9, 30)) == []
    assert [e.id for e in current_events([inverted], at(MONDAY, 8))] == ["inv"]
