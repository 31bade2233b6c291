"""
Pydantic schemas for admin input.

Creation-path business rules (``end > start``, slug shape) are enforced
here, before anything is persisted. The projection engine does not
re-validate them.
"""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lineup.domain.types import Orientation

_SLUG_STRIP = re.compile(r"[^a-z0-9-]+")
_SLUG_DASHES = re.compile(r"-{2,}")


def slugify(value: str) -> str:
    """Lowercase, dash-separated routing key (e.g. ``"Lobby TV 1"`` -> ``lobby-tv-1``)."""
    slug = _SLUG_STRIP.sub("-", value.strip().lower())
    return _SLUG_DASHES.sub("-", slug).strip("-")


def _require_aware(value: datetime) -> datetime:
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise ValueError("timestamp must include a UTC offset")
    return value


class ScreenCreate(BaseModel):
    """Schema for registering a screen."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    slug: str | None = Field(None, max_length=255, description="Routing key; derived from name when omitted")
    orientation: Orientation = Field(Orientation.HORIZONTAL, description="Screen orientation")

    @model_validator(mode="after")
    def _derive_slug(self) -> ScreenCreate:
        slug = slugify(self.slug if self.slug else self.name)
        if not slug:
            raise ValueError("slug must contain at least one letter or digit")
        self.slug = slug
        return self


class ScreenUpdate(BaseModel):
    """Schema for editing a screen. Omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    orientation: Orientation | None = None
    active_image: str | None = None

    @field_validator("slug")
    @classmethod
    def _normalise_slug(cls, value: str | None) -> str | None:
        if value is None:
            return None
        slug = slugify(value)
        if not slug:
            raise ValueError("slug must contain at least one letter or digit")
        return slug


class EventCreate(BaseModel):
    """Schema for creating an event."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="Event name")
    location: str = Field("", max_length=255, description="Room or venue area")
    start: datetime = Field(..., description="Start instant (ISO-8601 with offset)")
    end: datetime = Field(..., description="End instant (ISO-8601 with offset)")
    screen_ids: list[str] = Field(default_factory=list, description="Target screen ids or slugs")
    tags: list[str] = Field(default_factory=list, description="Category labels")

    @field_validator("start", "end")
    @classmethod
    def _aware(cls, value: datetime) -> datetime:
        return _require_aware(value)

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: list[str]) -> list[str]:
        return sorted({t.strip() for t in value if t.strip()})

    @model_validator(mode="after")
    def _check_window(self) -> EventCreate:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self


class EventUpdate(BaseModel):
    """Schema for editing an event. Omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    start: datetime | None = None
    end: datetime | None = None
    screen_ids: list[str] | None = None
    tags: list[str] | None = None

    @field_validator("start", "end")
    @classmethod
    def _aware(cls, value: datetime | None) -> datetime | None:
        return None if value is None else _require_aware(value)
