"""
Shared types and enums for LineUp.

This module contains common enums used across the domain, engine, CLI and
persistence layers.
"""

from __future__ import annotations

from datetime import date
from enum import Enum, IntEnum


class Orientation(str, Enum):
    """Physical layout of a screen. Affects rendering only."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class EventStatus(str, Enum):
    """Time-relative status of an event against a reference instant."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    PAST = "past"


class Weekday(IntEnum):
    """Day-of-week index, Monday=0 (same as ``date.weekday()``)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: date) -> Weekday:
        return cls(day.weekday())

    @property
    def abbr(self) -> str:
        return self.name[:3]


class WeekStart(str, Enum):
    """First day of the week for grids and agendas."""

    SUNDAY = "sunday"
    MONDAY = "monday"

    @property
    def weekday(self) -> Weekday:
        return Weekday.SUNDAY if self is WeekStart.SUNDAY else Weekday.MONDAY


class DiagnosticCode(str, Enum):
    """Data anomalies reported alongside a projection."""

    MALFORMED_TIMESTAMP = "MALFORMED_TIMESTAMP"
    INVERTED_WINDOW = "INVERTED_WINDOW"


BUSINESS_DAYS: frozenset[Weekday] = frozenset(
    {Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY}
)
ALL_DAYS: frozenset[Weekday] = frozenset(Weekday)
