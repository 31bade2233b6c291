"""
Snapshot loading: the complete current set of events and screens.

The projection engine always works from a full snapshot; there is no delta
path.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..domain.entities import EventRecord, ScreenRecord
from ..domain.models import NormalizedEvents, Screen
from ..scheduling.normalize import normalize_events


@dataclass(frozen=True)
class Snapshot:
    """Raw event records and parsed screens as of one read."""

    events: tuple[dict[str, Any], ...]
    screens: tuple[Screen, ...]

    def normalized(self, tz: tzinfo) -> NormalizedEvents:
        return normalize_events(self.events, tz)

    def screen_by_slug(self, slug: str) -> Screen | None:
        wanted = slug.strip().lower()
        return next((s for s in self.screens if s.slug.lower() == wanted), None)


def screen_from_record(record: ScreenRecord) -> Screen:
    return Screen(id=record.id, slug=record.slug, name=record.name, orientation=record.orientation)


def load_snapshot(db: Session) -> Snapshot:
    """Read every event (with its screens) and every screen."""
    events = db.scalars(
        select(EventRecord).options(selectinload(EventRecord.screens)).order_by(EventRecord.start_date_time)
    ).all()
    screens = db.scalars(select(ScreenRecord).order_by(ScreenRecord.slug)).all()
    return Snapshot(
        events=tuple(e.to_record() for e in events),
        screens=tuple(screen_from_record(s) for s in screens),
    )


__all__ = ["Snapshot", "load_snapshot", "screen_from_record"]
