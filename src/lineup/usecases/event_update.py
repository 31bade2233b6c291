from __future__ import annotations

from datetime import tzinfo
from typing import Any

import pydantic
from sqlalchemy.orm import Session

from ..infra.exceptions import ValidationError
from ..infra.logging import get_logger
from ..scheduling.normalize import MalformedTimestamp, parse_instant
from ..shared.schemas import EventUpdate
from .event_add import conflicts_for
from .lookup import event_record_to_dict, resolve_event, resolve_screens, validation_message

logger = get_logger(__name__)


def update_event(
    db: Session,
    *,
    event_identifier: str,
    tz: tzinfo,
    name: str | None = None,
    location: str | None = None,
    start: str | None = None,
    end: str | None = None,
    screens: list[str] | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Edit an event. Only the provided fields change.

    The resulting window must still satisfy ``end > start``.

    Raises:
        NotFoundError: If the event is not found
        ValidationError: If the input is invalid or a screen is unknown
    """
    event = resolve_event(db, event_identifier)
    try:
        changes = EventUpdate(
            name=name, location=location, start=start, end=end, screen_ids=screens, tags=tags
        )
    except pydantic.ValidationError as e:
        raise ValidationError(validation_message(e)) from e

    try:
        new_start = changes.start or parse_instant(event.start_date_time, tz)
        new_end = changes.end or parse_instant(event.end_date_time, tz)
    except MalformedTimestamp as e:
        raise ValidationError(f"Stored window is unreadable, provide both start and end: {e}") from e
    if new_end <= new_start:
        raise ValidationError("end must be after start")

    if changes.name is not None:
        event.name = changes.name
    if changes.location is not None:
        event.location = changes.location
    if changes.start is not None:
        event.start_date_time = changes.start.isoformat()
    if changes.end is not None:
        event.end_date_time = changes.end.isoformat()
    if changes.tags is not None:
        event.tags = sorted({t.strip() for t in changes.tags if t.strip()})
    if changes.screen_ids is not None:
        event.screens = resolve_screens(db, changes.screen_ids)

    db.commit()
    db.refresh(event)

    conflicts = conflicts_for(db, event, tz)
    logger.info("event_updated", event_id=event.id, conflicts=len(conflicts))
    return {"event": event_record_to_dict(event), "conflicts": conflicts}


__all__ = ["update_event"]
