"""
Domain models for the projection engine.

``Event`` and ``Screen`` are immutable snapshots of persisted records.
``CalendarCell`` and ``AgendaColumn`` are derived read models, recomputed on
every projection call and never persisted.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Generic, TypeVar

from .types import DiagnosticCode, Orientation, Weekday


@dataclass(frozen=True)
class Event:
    """A named, time-boxed activity assignable to zero or more screens."""

    id: str
    name: str
    start: datetime
    end: datetime
    location: str = ""
    target_screen_ids: frozenset[str] = frozenset()
    tags: frozenset[str] = frozenset()

    @property
    def is_inverted(self) -> bool:
        """True when ``end <= start`` (bad but already-persisted data)."""
        return self.end <= self.start

    @property
    def effective_end(self) -> datetime:
        """End instant, clamped to ``start`` for inverted windows."""
        return self.start if self.is_inverted else self.end

    @property
    def duration(self) -> timedelta:
        return self.effective_end - self.start

    def sort_key(self) -> tuple[datetime, str]:
        return (self.start, self.id)


@dataclass(frozen=True)
class Screen:
    """A display endpoint ("TV") addressed by a unique slug."""

    id: str
    slug: str
    name: str = ""
    orientation: Orientation = Orientation.HORIZONTAL


@dataclass(frozen=True)
class Diagnostic:
    """A data anomaly found while projecting; returned, never raised."""

    code: DiagnosticCode
    event_id: str | None
    message: str


@dataclass(frozen=True)
class CalendarCell:
    """One day of a month grid."""

    date: date
    is_in_reference_month: bool
    visible_events: tuple[Event, ...]
    hidden_count: int
    is_today: bool = False
    # Full bucket before overflow, in bucket order.
    events: tuple[Event, ...] = ()

    @property
    def hidden_events(self) -> tuple[Event, ...]:
        return self.events[len(self.visible_events):]


@dataclass(frozen=True)
class AgendaColumn:
    """One weekday of a signage week agenda. Not slot-limited."""

    date: date
    weekday: Weekday
    is_today: bool
    events: tuple[Event, ...]

    @property
    def weekday_index(self) -> int:
        return int(self.weekday)


T = TypeVar("T")


@dataclass(frozen=True)
class Projection(Generic[T]):
    """Ordered projection output with the diagnostics gathered on the way.

    Behaves as a read-only sequence of its items.
    """

    items: tuple[T, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


@dataclass(frozen=True)
class MonthGrid(Projection[CalendarCell]):
    """Full-week month grid: ``len(items)`` is always a multiple of 7."""

    year: int = 0
    month: int = 0

    @property
    def cells(self) -> tuple[CalendarCell, ...]:
        return self.items

    @property
    def weeks(self) -> list[tuple[CalendarCell, ...]]:
        return [self.items[i : i + 7] for i in range(0, len(self.items), 7)]

    @property
    def first_date(self) -> date:
        return self.items[0].date

    @property
    def last_date(self) -> date:
        return self.items[-1].date


@dataclass(frozen=True)
class WeekAgenda(Projection[AgendaColumn]):
    """Weekday columns of the week containing the reference instant."""

    week_start: datetime | None = None
    week_end: datetime | None = None

    @property
    def columns(self) -> tuple[AgendaColumn, ...]:
        return self.items

    def column_for(self, weekday: Weekday) -> AgendaColumn | None:
        return next((c for c in self.items if c.weekday == weekday), None)


@dataclass(frozen=True)
class ScreenSelection(Projection[Event]):
    """Events relevant to one screen, ascending by start."""

    screen_id: str = ""

    @property
    def events(self) -> tuple[Event, ...]:
        return self.items


@dataclass(frozen=True)
class NormalizedEvents:
    """Parsed events plus diagnostics for excluded/degraded records."""

    events: tuple[Event, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Conflict:
    """Two overlapping events that share at least one screen."""

    first: Event
    second: Event
    screen_ids: frozenset[str]


__all__ = [
    "Event",
    "Screen",
    "Diagnostic",
    "CalendarCell",
    "AgendaColumn",
    "Projection",
    "MonthGrid",
    "WeekAgenda",
    "ScreenSelection",
    "NormalizedEvents",
    "Conflict",
]
