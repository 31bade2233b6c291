"""Clock abstractions that supply "now" to projection callers.

The projection engine never reads time. The player and the CLI sample one of
these clocks and pass the instant in explicitly.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from threading import Lock
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo


@runtime_checkable
class Clock(Protocol):
    """Protocol implemented by clock providers."""

    def now_utc(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""


class MasterClock:
    """Wall clock providing timezone-aware timestamps."""

    def now_utc(self) -> datetime:
        """Return current UTC time as an aware datetime."""
        return datetime.now(timezone.utc)

    def now_local(self, tz: str | tzinfo | None = None) -> datetime:
        """Return current time in the requested timezone (defaults to system local)."""
        return self.now_utc().astimezone(_resolve_timezone(tz))


class SteppedMasterClock:
    """Deterministic clock used for tests.

    Time advances only when :meth:`advance` is called.
    """

    def __init__(self, start: datetime) -> None:
        if start.tzinfo is None or start.tzinfo.utcoffset(start) is None:
            raise ValueError("Datetime must be timezone-aware")
        self._current = start.astimezone(timezone.utc)
        self._lock = Lock()

    def now_utc(self) -> datetime:
        with self._lock:
            return self._current

    def now_local(self, tz: str | tzinfo | None = None) -> datetime:
        return self.now_utc().astimezone(_resolve_timezone(tz))

    def advance(self, delta: timedelta) -> datetime:
        """Advance the clock by ``delta`` (must be non-negative)."""
        if delta < timedelta(0):
            raise ValueError("delta must be non-negative")
        with self._lock:
            self._current += delta
            return self._current


def _resolve_timezone(tz: str | tzinfo | None) -> tzinfo:
    if tz is None:
        return datetime.now().astimezone().tzinfo or timezone.utc
    if isinstance(tz, tzinfo):
        return tz
    return ZoneInfo(tz)
