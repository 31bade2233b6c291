"""
Overflow policy tests.
"""

from __future__ import annotations

import pytest

from lineup.scheduling.exceptions import ConfigurationError
from lineup.scheduling.overflow import apply_overflow


def test_five_events_three_slots():
    visible, hidden = apply_overflow(["a", "b", "c", "d", "e"], 3)
    assert visible == ("a", "b", "c")
    assert hidden == 2


@pytest.mark.parametrize("size", range(0, 7))
@pytest.mark.parametrize("max_visible", [0, 1, 3, 10])
def test_nothing_lost_or_duplicated(size, max_visible):
    bucket = [f"e{i}" for i in range(size)]
    visible, hidden = apply_overflow(bucket, max_visible)
    assert len(visible) + hidden == size
    assert list(visible) == bucket[: len(visible)]
    assert len(visible) <= max_visible


def test_zero_hides_everything():
    assert apply_overflow(["a", "b"], 0) == ((), 2)


def test_empty_bucket():
    assert apply_overflow([], 3) == ((), 0)


def test_order_is_preserved_not_resorted():
    assert apply_overflow(["z", "a"], 5) == (("z", "a"), 0)


@pytest.mark.parametrize("bad", [-1, 2.5, "3", True])
def test_invalid_limit_raises(bad):
    with pytest.raises(ConfigurationError):
        apply_overflow(["a"], bad)
