from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any

from sqlalchemy.orm import Session

from ..scheduling.bucketing import sort_events
from ..scheduling.screen_filter import current_events
from ..scheduling.time_window import event_status
from .lookup import diagnostic_to_dict, event_record_to_dict, event_to_dict, resolve_event, resolve_screen
from .snapshot import load_snapshot


def list_events(
    db: Session,
    *,
    tz: tzinfo,
    now: datetime,
    screen_identifier: str | None = None,
    current_only: bool = False,
) -> dict[str, Any]:
    """List events ascending by start, each with its status at ``now``.

    Args:
        db: Database session
        tz: Venue timezone for naive timestamps
        now: Reference instant for status and ``current_only``
        screen_identifier: Optional screen id or slug to filter by
        current_only: If True, drop events that already ended

    Returns:
        Dictionary with events, count and diagnostics for unreadable records

    Raises:
        NotFoundError: If the screen is not found
    """
    normalized = load_snapshot(db).normalized(tz)
    events = sort_events(normalized.events)

    if screen_identifier:
        screen = resolve_screen(db, screen_identifier)
        events = [e for e in events if screen.id in e.target_screen_ids]
    if current_only:
        events = current_events(events, now)

    rows = []
    for event in events:
        row = event_to_dict(event, tz)
        row["status"] = event_status(event, now).value
        rows.append(row)

    return {
        "events": rows,
        "count": len(rows),
        "diagnostics": [diagnostic_to_dict(d) for d in normalized.diagnostics],
    }


def get_event(db: Session, *, event_identifier: str) -> dict[str, Any]:
    """Get a single event by id.

    Raises:
        NotFoundError: If the event is not found
    """
    return event_record_to_dict(resolve_event(db, event_identifier))


__all__ = ["list_events", "get_event"]
