from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from ..infra.logging import get_logger
from .lookup import resolve_event

logger = get_logger(__name__)


def delete_event(db: Session, *, event_identifier: str) -> dict[str, Any]:
    """Delete an event by id.

    Raises:
        NotFoundError: If the event is not found
    """
    event = resolve_event(db, event_identifier)
    event_id, name = event.id, event.name

    db.delete(event)
    db.commit()

    logger.info("event_deleted", event_id=event_id)
    return {"id": event_id, "name": name, "deleted": True}


__all__ = ["delete_event"]
