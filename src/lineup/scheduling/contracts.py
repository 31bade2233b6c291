"""
Projection configuration contracts.

Every projection takes its configuration explicitly. These validators run at
the call boundary and raise ``ConfigurationError`` for programmer errors
(negative slot limits, empty weekday sets, unknown week conventions) instead
of clamping them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from lineup.domain.types import Weekday, WeekStart

from .exceptions import ConfigurationError

_WEEKDAY_NAMES = {w.abbr: w for w in Weekday}


def validate_max_visible(max_visible: int) -> int:
    """Slot limit for calendar cells; zero hides everything, negatives are rejected."""
    if isinstance(max_visible, bool) or not isinstance(max_visible, int):
        raise ConfigurationError(
            f"max_visible must be an integer, got {max_visible!r}", parameter="max_visible"
        )
    if max_visible < 0:
        raise ConfigurationError(
            f"max_visible must be >= 0, got {max_visible}", parameter="max_visible"
        )
    return max_visible


def validate_week_start(week_start: WeekStart | str) -> WeekStart:
    try:
        return WeekStart(week_start)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown week start convention: {week_start!r} (expected 'sunday' or 'monday')",
            parameter="week_start",
        ) from e


def validate_included_weekdays(weekdays: Iterable[Weekday | int]) -> frozenset[Weekday]:
    """Normalise the agenda weekday subset; it must be non-empty and in 0..6."""
    violations: list[str] = []
    result: set[Weekday] = set()
    for value in weekdays:
        try:
            result.add(Weekday(value))
        except ValueError:
            violations.append(f"{value!r} is not a weekday index (0=Monday .. 6=Sunday)")
    if violations:
        raise ConfigurationError(
            "included_weekdays contains invalid entries",
            parameter="included_weekdays",
            violations=violations,
        )
    if not result:
        raise ConfigurationError(
            "included_weekdays must not be empty", parameter="included_weekdays"
        )
    return frozenset(result)


def resolve_timezone(tz: str | tzinfo) -> tzinfo:
    """Resolve the venue timezone; unknown names are a configuration error."""
    if isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise ConfigurationError(f"Unknown timezone: {tz!r}", parameter="tz") from e


def parse_weekdays(text: str) -> frozenset[Weekday]:
    """Parse a day filter such as ``MON,TUE,WED`` (or ``0,1,2``)."""
    days: list[Weekday | int] = []
    violations: list[str] = []
    for token in (t.strip().upper() for t in text.split(",")):
        if not token:
            continue
        if token in _WEEKDAY_NAMES:
            days.append(_WEEKDAY_NAMES[token])
        elif token.isdigit():
            days.append(int(token))
        else:
            violations.append(f"Invalid day filter: {token}")
    if violations:
        raise ConfigurationError(
            "Invalid weekday list", parameter="included_weekdays", violations=violations
        )
    return validate_included_weekdays(days)


@dataclass(frozen=True)
class ScheduleConfig:
    """Per-call projection configuration."""

    week_start: WeekStart
    max_visible: int
    included_weekdays: frozenset[Weekday]
    retain_current_week: bool
    tz: tzinfo

    def __post_init__(self) -> None:
        validate_week_start(self.week_start)
        validate_max_visible(self.max_visible)
        validate_included_weekdays(self.included_weekdays)
        if not isinstance(self.tz, tzinfo):
            object.__setattr__(self, "tz", resolve_timezone(self.tz))

    @classmethod
    def create(
        cls,
        *,
        week_start: WeekStart | str,
        max_visible: int,
        included_weekdays: Iterable[Weekday | int],
        retain_current_week: bool,
        tz: str | tzinfo,
    ) -> ScheduleConfig:
        return cls(
            week_start=validate_week_start(week_start),
            max_visible=validate_max_visible(max_visible),
            included_weekdays=validate_included_weekdays(included_weekdays),
            retain_current_week=bool(retain_current_week),
            tz=resolve_timezone(tz),
        )
