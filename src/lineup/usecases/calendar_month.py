from __future__ import annotations

from datetime import date, tzinfo
from typing import Any

from sqlalchemy.orm import Session

from ..domain.models import CalendarCell, MonthGrid
from ..scheduling.contracts import ScheduleConfig
from ..scheduling.month_grid import build_month_grid
from ..scheduling.weeks import next_month, prev_month
from .lookup import diagnostic_to_dict, event_to_dict
from .snapshot import load_snapshot


def cell_to_dict(cell: CalendarCell, tz: tzinfo) -> dict[str, Any]:
    return {
        "date": cell.date.isoformat(),
        "in_month": cell.is_in_reference_month,
        "is_today": cell.is_today,
        "events": [event_to_dict(e, tz) for e in cell.visible_events],
        "hidden_count": cell.hidden_count,
    }


def grid_to_dict(grid: MonthGrid, tz: tzinfo) -> dict[str, Any]:
    return {
        "year": grid.year,
        "month": grid.month,
        "previous": "{:04d}-{:02d}".format(*prev_month(grid.year, grid.month)),
        "next": "{:04d}-{:02d}".format(*next_month(grid.year, grid.month)),
        "weeks": [[cell_to_dict(c, tz) for c in week] for week in grid.weeks],
        "diagnostics": [diagnostic_to_dict(d) for d in grid.diagnostics],
    }


def render_month(
    db: Session,
    *,
    year: int,
    month: int,
    config: ScheduleConfig,
    today: date | None = None,
) -> dict[str, Any]:
    """Admin month calendar over every event, regardless of screens.

    Args:
        db: Database session
        year, month: Month to render
        config: Week start, slot limit and venue timezone
        today: Local date to highlight

    Returns:
        Dictionary with rows of 7 cells and diagnostics for bad records
    """
    snapshot = load_snapshot(db)
    grid = build_month_grid(
        snapshot.events,
        year,
        month,
        week_start=config.week_start,
        max_visible=config.max_visible,
        tz=config.tz,
        today=today,
    )
    return grid_to_dict(grid, config.tz)


__all__ = ["render_month", "grid_to_dict", "cell_to_dict"]
