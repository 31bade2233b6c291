from lineup.domain.models import AgendaColumn, CalendarCell, Event, Screen
from lineup.domain.types import EventStatus, Orientation, Weekday, WeekStart

__all__ = [
    "Event",
    "Screen",
    "CalendarCell",
    "AgendaColumn",
    "EventStatus",
    "Orientation",
    "Weekday",
    "WeekStart",
]
