from __future__ import annotations

from typing import Any

import pydantic
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..domain.entities import ScreenRecord
from ..domain.types import Orientation
from ..infra.exceptions import ConflictError, ValidationError
from ..infra.logging import get_logger
from ..shared.schemas import ScreenCreate
from .lookup import screen_to_dict, validation_message

logger = get_logger(__name__)


def slug_taken(db: Session, slug: str, exclude_id: str | None = None) -> bool:
    query = select(ScreenRecord.id).where(func.lower(ScreenRecord.slug) == slug.lower())
    if exclude_id is not None:
        query = query.where(ScreenRecord.id != exclude_id)
    return db.scalars(query).first() is not None


def add_screen(
    db: Session,
    *,
    name: str,
    slug: str | None = None,
    orientation: str | Orientation = Orientation.HORIZONTAL,
) -> dict[str, Any]:
    """Register a screen.

    Args:
        db: Database session
        name: Display name
        slug: Routing key; derived from ``name`` when omitted
        orientation: ``horizontal`` or ``vertical``

    Returns:
        Dictionary with the created screen

    Raises:
        ValidationError: If the input is invalid
        ConflictError: If the slug is already in use
    """
    try:
        data = ScreenCreate(name=name, slug=slug, orientation=orientation)
    except pydantic.ValidationError as e:
        raise ValidationError(validation_message(e)) from e

    if slug_taken(db, data.slug):
        raise ConflictError(f"Screen slug '{data.slug}' already exists")

    screen = ScreenRecord(name=data.name, slug=data.slug, orientation=data.orientation)
    db.add(screen)
    db.commit()
    db.refresh(screen)

    logger.info("screen_added", screen_id=screen.id, slug=screen.slug)
    return screen_to_dict(screen)


__all__ = ["add_screen", "slug_taken"]
