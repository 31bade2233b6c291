"""
Persistence entities for LineUp.

ORM mappings for the two stored record types. Event timestamps are kept as
the ISO-8601 strings the admin panel submits; they are parsed only when a
snapshot is projected, so a bad record surfaces as a diagnostic instead of a
load failure.
"""

from __future__ import annotations

import uuid as uuid_module
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Table, Text
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ..infra.db import Base
from .types import Orientation


def _new_id() -> str:
    return str(uuid_module.uuid4())


event_screens = Table(
    "event_screens",
    Base.metadata,
    Column("event_id", String(36), ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
    Column("screen_id", String(36), ForeignKey("screens.id", ondelete="CASCADE"), primary_key=True),
)


class ScreenRecord(Base):
    """A display screen ("TV") addressed by its slug."""

    __tablename__ = "screens"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    orientation: Mapped[Orientation] = mapped_column(
        SQLEnum(Orientation, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=Orientation.HORIZONTAL,
    )
    active_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    events: Mapped[list[EventRecord]] = relationship(
        secondary=event_screens, back_populates="screens"
    )

    def __repr__(self) -> str:
        return f"<ScreenRecord(id={self.id}, slug={self.slug}, orientation={self.orientation})>"


class EventRecord(Base):
    """A scheduled event as stored by the admin panel."""

    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    start_date_time: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    end_date_time: Mapped[str] = mapped_column(String(64), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    screens: Mapped[list[ScreenRecord]] = relationship(
        secondary=event_screens, back_populates="events"
    )

    @property
    def screen_ids(self) -> list[str]:
        return sorted(s.id for s in self.screens)

    def to_record(self) -> dict[str, Any]:
        """Raw record in the persistence shape consumed by the projection engine."""
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "startDateTime": self.start_date_time,
            "endDateTime": self.end_date_time,
            "tvIds": self.screen_ids,
            "tags": list(self.tags or []),
        }

    def __repr__(self) -> str:
        return f"<EventRecord(id={self.id}, name={self.name}, start={self.start_date_time})>"
