from __future__ import annotations

from datetime import tzinfo
from typing import Any

import pydantic
from sqlalchemy.orm import Session

from ..domain.entities import EventRecord
from ..infra.exceptions import ValidationError
from ..infra.logging import get_logger
from ..scheduling.normalize import event_from_record
from ..scheduling.time_window import find_conflicts
from ..shared.schemas import EventCreate
from .lookup import event_record_to_dict, resolve_screens, validation_message
from .snapshot import load_snapshot

logger = get_logger(__name__)


def conflicts_for(db: Session, event: EventRecord, tz: tzinfo) -> list[dict[str, Any]]:
    """Other events overlapping ``event`` on at least one shared screen."""
    target = event_from_record(event.to_record(), tz)
    snapshot = load_snapshot(db)
    others = [e for e in snapshot.normalized(tz).events if e.id != target.id]
    conflicts = []
    for conflict in find_conflicts([target, *others]):
        if target.id not in (conflict.first.id, conflict.second.id):
            continue
        other = conflict.second if conflict.first.id == target.id else conflict.first
        conflicts.append(
            {
                "event_id": other.id,
                "name": other.name,
                "start": other.start.astimezone(tz).isoformat(),
                "end": other.end.astimezone(tz).isoformat(),
                "screen_ids": sorted(conflict.screen_ids),
            }
        )
    return conflicts


def add_event(
    db: Session,
    *,
    name: str,
    start: str,
    end: str,
    tz: tzinfo,
    location: str = "",
    screens: list[str] | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Create an event and assign it to screens.

    Args:
        db: Database session
        name: Event name
        start, end: ISO-8601 instants with offset; ``end`` must be after ``start``
        tz: Venue timezone, used to report conflicts
        location: Free-text location
        screens: Screen ids or slugs (may be empty)
        tags: Category labels

    Returns:
        Dictionary with the created event and any overlapping events that
        share a screen (reported, not rejected)

    Raises:
        ValidationError: If the input is invalid or a screen is unknown
    """
    try:
        data = EventCreate(
            name=name,
            location=location,
            start=start,
            end=end,
            screen_ids=screens or [],
            tags=tags or [],
        )
    except pydantic.ValidationError as e:
        raise ValidationError(validation_message(e)) from e

    event = EventRecord(
        name=data.name,
        location=data.location,
        start_date_time=data.start.isoformat(),
        end_date_time=data.end.isoformat(),
        tags=data.tags,
    )
    event.screens = resolve_screens(db, data.screen_ids)
    db.add(event)
    db.commit()
    db.refresh(event)

    conflicts = conflicts_for(db, event, tz)
    logger.info(
        "event_added",
        event_id=event.id,
        screens=len(event.screens),
        conflicts=len(conflicts),
    )
    return {"event": event_record_to_dict(event), "conflicts": conflicts}


__all__ = ["add_event", "conflicts_for"]
