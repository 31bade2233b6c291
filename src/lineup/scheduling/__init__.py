"""
Scheduling projection engine.

Pure, synchronous functions that turn a flat snapshot of events into month
grids, week agendas and per-screen selections:

- time_window: classify / overlaps / find_conflicts
- bucketing: by_calendar_day / by_weekday
- month_grid: build_month_grid (uses overflow.apply_overflow)
- week_agenda: build_week_agenda
- screen_filter: for_screen
"""

from .bucketing import by_calendar_day, by_weekday, sort_events
from .contracts import ScheduleConfig, parse_weekdays
from .exceptions import ConfigurationError, ScheduleValidationError
from .month_grid import build_month_grid
from .normalize import normalize_events
from .overflow import apply_overflow
from .screen_filter import active_events, current_events, for_screen, upcoming_events
from .time_window import classify, find_conflicts, max_simultaneous, overlaps
from .week_agenda import build_week_agenda

__all__ = [
    # Projections
    "build_month_grid",
    "build_week_agenda",
    "for_screen",
    "apply_overflow",
    "by_calendar_day",
    "by_weekday",
    "sort_events",
    "normalize_events",
    # Time windows
    "classify",
    "overlaps",
    "find_conflicts",
    "max_simultaneous",
    "active_events",
    "current_events",
    "upcoming_events",
    # Configuration
    "ScheduleConfig",
    "parse_weekdays",
    # Exceptions
    "ScheduleValidationError",
    "ConfigurationError",
]
