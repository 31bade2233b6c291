from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from ..infra.logging import get_logger
from .lookup import resolve_screen

logger = get_logger(__name__)


def delete_screen(db: Session, *, screen_identifier: str) -> dict[str, Any]:
    """Delete a screen by id or slug and detach it from every event.

    Events themselves are kept; an event left without screens is still shown
    on the admin calendar.

    Raises:
        NotFoundError: If the screen is not found
    """
    screen = resolve_screen(db, screen_identifier)
    screen_id, slug = screen.id, screen.slug
    detached = len(screen.events)

    screen.events.clear()
    db.delete(screen)
    db.commit()

    logger.info("screen_deleted", screen_id=screen_id, slug=slug, detached_events=detached)
    return {"id": screen_id, "slug": slug, "detached_events": detached, "deleted": True}


__all__ = ["delete_screen"]
