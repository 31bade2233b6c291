from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..domain.entities import ScreenRecord
from .lookup import resolve_screen, screen_to_dict


def list_screens(db: Session) -> dict[str, Any]:
    """List screens ordered by slug.

    Returns:
        Dictionary with screens list and count
    """
    screens = db.scalars(select(ScreenRecord).order_by(ScreenRecord.slug)).all()
    return {
        "screens": [screen_to_dict(s) for s in screens],
        "count": len(screens),
    }


def get_screen(db: Session, *, screen_identifier: str) -> dict[str, Any]:
    """Get a single screen by id or slug, with its assigned event count.

    Raises:
        NotFoundError: If the screen is not found
    """
    screen = resolve_screen(db, screen_identifier)
    result = screen_to_dict(screen)
    result["event_count"] = len(screen.events)
    return result


__all__ = ["list_screens", "get_screen"]
