"""Overflow policy for slot-limited calendar cells."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .contracts import validate_max_visible

T = TypeVar("T")


def apply_overflow(day_events: Sequence[T], max_visible: int) -> tuple[tuple[T, ...], int]:
    """Split a bucket into ``(visible, hidden_count)``.

    The bucket is trusted to be sorted already; no re-sorting happens here.
    """
    max_visible = validate_max_visible(max_visible)
    visible = tuple(day_events[:max_visible])
    return visible, max(0, len(day_events) - max_visible)
