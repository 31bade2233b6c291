"""
Month grid contract tests.

MG-001: the grid is whole weeks (cell count is a multiple of 7).
MG-002: the grid covers every day of the reference month.
MG-003: out-of-month days are flagged but still populated.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import pytest
from conftest import MONDAY, at, make_event

from lineup.domain.types import WeekStart
from lineup.scheduling.exceptions import ConfigurationError
from lineup.scheduling.month_grid import build_month_grid, grid_bounds


def _grid(events, year, month, *, week_start=WeekStart.SUNDAY, max_visible=3, today=None):
    return build_month_grid(
        events, year, month, week_start=week_start, max_visible=max_visible, tz=UTC, today=today
    )


@pytest.mark.parametrize("week_start", list(WeekStart))
@pytest.mark.parametrize("month", range(1, 13))
def test_mg_001_grid_is_whole_weeks(month, week_start):
    """MG-001: every month produces full rows starting on the configured day."""
    grid = _grid([], 2026, month, week_start=week_start)
    assert len(grid) % 7 == 0
    assert 28 <= len(grid) <= 42
    assert grid.first_date.weekday() == week_start.weekday
    assert all(len(week) == 7 for week in grid.weeks)


@pytest.mark.parametrize("month", range(1, 13))
def test_mg_002_grid_covers_reference_month(month):
    """MG-002: every day of the month appears exactly once, in order."""
    grid = _grid([], 2026, month)
    in_month = [c.date for c in grid if c.is_in_reference_month]
    assert in_month[0] == date(2026, month, 1)
    assert all(d.month == month for d in in_month)
    assert [b - a for a, b in zip(in_month, in_month[1:])] == [timedelta(days=1)] * (len(in_month) - 1)


def test_february_2026_sunday_start_has_four_rows():
    # 2026-02-01 is a Sunday and the month has 28 days.
    assert grid_bounds(2026, 2, WeekStart.SUNDAY) == (date(2026, 2, 1), date(2026, 2, 28))
    assert len(_grid([], 2026, 2)) == 28
    assert len(_grid([], 2026, 2, week_start=WeekStart.MONDAY)) == 35


def test_may_2026_sunday_start_has_six_rows():
    assert grid_bounds(2026, 5, WeekStart.SUNDAY) == (date(2026, 4, 26), date(2026, 6, 6))
    assert len(_grid([], 2026, 5)) == 42
    assert len(_grid([], 2026, 5, week_start=WeekStart.MONDAY)) == 35


def test_mg_003_out_of_month_cells_are_populated():
    """MG-003: events on leading/trailing days still appear."""
    leading = make_event("lead", datetime(2026, 9, 28, 10, tzinfo=UTC), datetime(2026, 9, 28, 11, tzinfo=UTC))
    grid = _grid([leading], 2026, 10)
    cell = grid[1]
    assert cell.date == date(2026, 9, 28)
    assert cell.is_in_reference_month is False
    assert [e.id for e in cell.visible_events] == ["lead"]


def test_overflow_applied_per_cell():
    start = at(MONDAY, 8)
    events = [
        make_event(f"e{i}", start + timedelta(hours=i), start + timedelta(hours=i, minutes=30))
        for i in range(5)
    ]
    grid = _grid(events, 2026, 10)
    (cell,) = [c for c in grid if c.date == date(2026, 10, 19)]
    assert [e.id for e in cell.visible_events] == ["e0", "e1", "e2"]
    assert cell.hidden_count == 2
    assert [e.id for e in cell.hidden_events] == ["e3", "e4"]


def test_today_flag():
    grid = _grid([], 2026, 10, today=date(2026, 10, 19))
    assert [c.date for c in grid if c.is_today] == [date(2026, 10, 19)]
    assert not any(c.is_today for c in _grid([], 2026, 10))


def test_raw_records_and_diagnostics():
    records = [
        {"id": "ok", "name": "Ok", "startDateTime": "2026-10-19T09:00:00Z", "endDateTime": "2026-10-19T10:00:00Z"},
        {"id": "bad", "name": "Bad", "startDateTime": "yesterday", "endDateTime": "2026-10-19T10:00:00Z"},
    ]
    grid = _grid(records, 2026, 10)
    assert sum(len(c.visible_events) for c in grid) == 1
    assert [d.event_id for d in grid.diagnostics] == ["bad"]


@pytest.mark.parametrize("month", [0, 13])
def test_invalid_month_raises(month):
    with pytest.raises(ConfigurationError):
        _grid([], 2026, month)


def test_negative_max_visible_raises():
    with pytest.raises(ConfigurationError):
        _grid([], 2026, 10, max_visible=-1)


def test_building_twice_is_identical():
    start = at(MONDAY, 8)
    events = [make_event(f"e{i}", start, start + timedelta(hours=1), ("S1",)) for i in range(4)]
    assert _grid(events, 2026, 10) == _grid(list(reversed(events)), 2026, 10)


def test_bucket_coverage_no_duplicates_no_drops():
    """Every event starting inside the grid lands in exactly one cell."""
    inside = [
        make_event("lead", datetime(2026, 9, 27, 10, tzinfo=UTC), datetime(2026, 9, 27, 11, tzinfo=UTC)),
        make_event("mid", datetime(2026, 10, 15, 10, tzinfo=UTC), datetime(2026, 10, 17, 11, tzinfo=UTC)),
        make_event("tail", datetime(2026, 10, 31, 23, tzinfo=UTC), datetime(2026, 11, 1, 1, tzinfo=UTC)),
    ]
    outside = [
        make_event("before", datetime(2026, 9, 26, 10, tzinfo=UTC), datetime(2026, 9, 28, 11, tzinfo=UTC)),
        make_event("after", datetime(2026, 11, 1, 10, tzinfo=UTC), datetime(2026, 11, 1, 11, tzinfo=UTC)),
    ]
    grid = _grid([*inside, *outside], 2026, 10, max_visible=0)
    placed = [e.id for cell in grid for e in cell.events]
    assert sorted(placed) == ["lead", "mid", "tail"]
    assert sum(cell.hidden_count for cell in grid) == 3
