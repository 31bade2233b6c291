from __future__ import annotations

from typing import Any

import pydantic
from sqlalchemy.orm import Session

from ..infra.exceptions import ConflictError, ValidationError
from ..infra.logging import get_logger
from ..shared.schemas import ScreenUpdate
from .lookup import resolve_screen, screen_to_dict, validation_message
from .screen_add import slug_taken

logger = get_logger(__name__)


def update_screen(
    db: Session,
    *,
    screen_identifier: str,
    name: str | None = None,
    slug: str | None = None,
    orientation: str | None = None,
    active_image: str | None = None,
) -> dict[str, Any]:
    """Edit a screen. Only the provided fields change.

    Raises:
        NotFoundError: If the screen is not found
        ValidationError: If the input is invalid
        ConflictError: If the new slug belongs to another screen
    """
    screen = resolve_screen(db, screen_identifier)
    try:
        changes = ScreenUpdate(name=name, slug=slug, orientation=orientation, active_image=active_image)
    except pydantic.ValidationError as e:
        raise ValidationError(validation_message(e)) from e

    if changes.slug is not None and slug_taken(db, changes.slug, exclude_id=screen.id):
        raise ConflictError(f"Screen slug '{changes.slug}' already exists")

    for field, value in changes.model_dump(exclude_none=True).items():
        setattr(screen, field, value)

    db.commit()
    db.refresh(screen)
    logger.info("screen_updated", screen_id=screen.id, slug=screen.slug)
    return screen_to_dict(screen)


__all__ = ["update_screen"]
