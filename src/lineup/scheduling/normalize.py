"""
Event normalisation: raw persistence records in, ``Event`` values out.

Records arrive in the persistence shape (ISO-8601 ``startDateTime`` /
``endDateTime`` strings, ``tvIds``). One bad record never blocks the rest:
unparseable timestamps exclude the record and produce a diagnostic,
inverted windows keep the record and produce a diagnostic.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, tzinfo
from typing import Any

import structlog

from lineup.domain.models import Diagnostic, Event, NormalizedEvents
from lineup.domain.types import DiagnosticCode

logger = structlog.get_logger(__name__)

EventLike = Event | Mapping[str, Any]

_START_KEYS = ("startDateTime", "start_date_time", "start")
_END_KEYS = ("endDateTime", "end_date_time", "end")
_SCREEN_KEYS = ("targetScreenIds", "target_screen_ids", "tvIds", "tv_ids")


class MalformedTimestamp(ValueError):
    """A record's start/end could not be parsed into an instant."""


def parse_instant(value: Any, tz: tzinfo) -> datetime:
    """Parse an ISO-8601 string (or datetime) into an aware datetime.

    Naive values are read as venue-local time.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise MalformedTimestamp(f"Invalid ISO-8601 timestamp: {value!r}") from e
    else:
        raise MalformedTimestamp(f"Missing or non-string timestamp: {value!r}")
    if parsed.tzinfo is None or parsed.tzinfo.utcoffset(parsed) is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def _first(record: Mapping[str, Any], keys: tuple[str, ...], default: Any = None) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return default


def _string_set(value: Any) -> frozenset[str]:
    if not value:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value})
    return frozenset(str(v) for v in value)


def event_from_record(record: Mapping[str, Any], tz: tzinfo) -> Event:
    """Build an ``Event`` from a raw record. Raises ``MalformedTimestamp``."""
    return Event(
        id=str(record.get("id", "")),
        name=str(record.get("name") or ""),
        location=str(record.get("location") or ""),
        start=parse_instant(_first(record, _START_KEYS), tz),
        end=parse_instant(_first(record, _END_KEYS), tz),
        target_screen_ids=_string_set(_first(record, _SCREEN_KEYS)),
        tags=_string_set(record.get("tags")),
    )


def normalize_events(records: Iterable[EventLike], tz: tzinfo) -> NormalizedEvents:
    """Parse every record, collecting diagnostics instead of raising."""
    events: list[Event] = []
    diagnostics: list[Diagnostic] = []

    for record in records:
        if isinstance(record, Event):
            event = record
        else:
            try:
                event = event_from_record(record, tz)
            except MalformedTimestamp as e:
                event_id = record.get("id")
                diagnostics.append(
                    Diagnostic(
                        code=DiagnosticCode.MALFORMED_TIMESTAMP,
                        event_id=str(event_id) if event_id is not None else None,
                        message=str(e),
                    )
                )
                logger.warning("event_excluded", event_id=event_id, reason=str(e))
                continue

        if event.is_inverted:
            diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.INVERTED_WINDOW,
                    event_id=event.id,
                    message=f"end {event.end.isoformat()} is not after start {event.start.isoformat()}",
                )
            )
        events.append(event)

    return NormalizedEvents(events=tuple(events), diagnostics=tuple(diagnostics))
