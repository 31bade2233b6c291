"""
Record normalisation tests.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from lineup.domain.types import DiagnosticCode
from lineup.scheduling.normalize import (
    MalformedTimestamp,
    event_from_record,
    normalize_events,
    parse_instant,
)

SAO_PAULO = ZoneInfo("America/Sao_Paulo")


def _record(event_id="e1", start="2026-10-19T09:00:00Z", end="2026-10-19T10:00:00Z", **extra):
    return {"id": event_id, "name": "Talk", "startDateTime": start, "endDateTime": end, **extra}


def test_persistence_shape_is_parsed():
    event = event_from_record(
        _record(location="Room A", tvIds=["tv-1", "tv-2"], tags=["keynote"]), UTC
    )
    assert event.start == datetime(2026, 10, 19, 9, tzinfo=UTC)
    assert event.location == "Room A"
    assert event.target_screen_ids == frozenset({"tv-1", "tv-2"})
    assert event.tags == frozenset({"keynote"})


def test_snake_case_keys_accepted():
    record = {
        "id": "e1",
        "name": "Talk",
        "start": "2026-10-19T09:00:00+00:00",
        "end": "2026-10-19T10:00:00+00:00",
        "target_screen_ids": ["tv-1"],
    }
    assert event_from_record(record, UTC).target_screen_ids == frozenset({"tv-1"})


def test_offset_is_preserved():
    parsed = parse_instant("2026-10-19T09:00:00-03:00", UTC)
    assert parsed.utcoffset() == timedelta(hours=-3)
    assert parsed == datetime(2026, 10, 19, 12, tzinfo=timezone.utc)


def test_naive_timestamp_is_venue_local():
    parsed = parse_instant("2026-10-19T09:00:00", SAO_PAULO)
    assert parsed == datetime(2026, 10, 19, 12, tzinfo=UTC)


@pytest.mark.parametrize("value", ["", "not-a-date", None, 12345, "2026-13-40T00:00:00"])
def test_malformed_values_raise(value):
    with pytest.raises(MalformedTimestamp):
        parse_instant(value, UTC)


def test_malformed_record_excluded_with_diagnostic():
    result = normalize_events([_record("good"), _record("bad", start="garbage")], UTC)
    assert [e.id for e in result.events] == ["good"]
    (diagnostic,) = result.diagnostics
    assert diagnostic.code is DiagnosticCode.MALFORMED_TIMESTAMP
    assert diagnostic.event_id == "bad"


def test_missing_end_excluded():
    record = {"id": "x", "name": "No end", "startDateTime": "2026-10-19T09:00:00Z"}
    result = normalize_events([record], UTC)
    assert result.events == ()
    assert result.diagnostics[0].code is DiagnosticCode.MALFORMED_TIMESTAMP


def test_inverted_record_kept_with_diagnostic():
    result = normalize_events([_record("inv", end="2026-10-19T08:00:00Z")], UTC)
    assert [e.id for e in result.events] == ["inv"]
    assert result.events[0].effective_end == result.events[0].start
    assert [d.code for d in result.diagnostics] == [DiagnosticCode.INVERTED_WINDOW]


def test_events_pass_through():
    event = event_from_record(_record(), UTC)
    result = normalize_events([event], UTC)
    assert result.events == (event,)
    assert result.diagnostics == ()
