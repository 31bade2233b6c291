"""Shared resolution and formatting helpers for the use cases."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime, tzinfo
from typing import Any

import pydantic
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..domain.entities import EventRecord, ScreenRecord
from ..domain.models import Diagnostic, Event
from ..infra.exceptions import NotFoundError, ValidationError


def resolve_screen(db: Session, identifier: str) -> ScreenRecord:
    """Resolve a screen by id or slug (case-insensitive).

    Raises NotFoundError if the screen is not found.
    """
    screen = db.get(ScreenRecord, identifier)
    if screen is None:
        screen = db.scalars(
            select(ScreenRecord).where(func.lower(ScreenRecord.slug) == identifier.strip().lower())
        ).first()
    if screen is None:
        raise NotFoundError(f"Screen '{identifier}' not found")
    return screen


def resolve_screens(db: Session, identifiers: Iterable[str]) -> list[ScreenRecord]:
    """Resolve several screens, reporting every unknown identifier at once."""
    screens: dict[str, ScreenRecord] = {}
    missing: list[str] = []
    for identifier in identifiers:
        try:
            screen = resolve_screen(db, identifier)
        except NotFoundError:
            missing.append(identifier)
            continue
        screens[screen.id] = screen
    if missing:
        raise ValidationError(f"Unknown screen(s): {', '.join(missing)}")
    return list(screens.values())


def resolve_event(db: Session, identifier: str) -> EventRecord:
    """Resolve an event by id. Raises NotFoundError if the event is not found."""
    event = db.get(EventRecord, identifier)
    if event is None:
        raise NotFoundError(f"Event '{identifier}' not found")
    return event


def validation_message(error: pydantic.ValidationError) -> str:
    """Flatten pydantic errors into one line."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "__root__")
        msg = str(err.get("msg", "")).removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def format_datetime(dt: datetime | None) -> str | None:
    """Format datetime for output in ISO-8601 UTC format."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.isoformat() + "Z"
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def format_date(d: date | None) -> str | None:
    return d.isoformat() if d else None


def screen_to_dict(screen: ScreenRecord) -> dict[str, Any]:
    return {
        "id": screen.id,
        "name": screen.name,
        "slug": screen.slug,
        "orientation": screen.orientation.value,
        "active_image": screen.active_image,
        "created_at": format_datetime(screen.created_at),
    }


def event_record_to_dict(event: EventRecord) -> dict[str, Any]:
    return {
        "id": event.id,
        "name": event.name,
        "location": event.location,
        "start": event.start_date_time,
        "end": event.end_date_time,
        "screen_ids": event.screen_ids,
        "tags": list(event.tags or []),
        "created_at": format_datetime(event.created_at),
    }


def event_to_dict(event: Event, tz: tzinfo) -> dict[str, Any]:
    """Projection-side view of a parsed event, times in the venue timezone."""
    return {
        "id": event.id,
        "name": event.name,
        "location": event.location,
        "start": event.start.astimezone(tz).isoformat(),
        "end": event.end.astimezone(tz).isoformat(),
        "screen_ids": sorted(event.target_screen_ids),
        "tags": sorted(event.tags),
    }


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    return {
        "code": diagnostic.code.value,
        "event_id": diagnostic.event_id,
        "message": diagnostic.message,
    }
