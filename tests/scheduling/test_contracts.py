"""
Projection configuration contract tests.
"""

from __future__ import annotations

from datetime import UTC
from zoneinfo import ZoneInfo

import pytest

from lineup.domain.types import BUSINESS_DAYS, Weekday, WeekStart
from lineup.scheduling.contracts import (
    ScheduleConfig,
    parse_weekdays,
    resolve_timezone,
    validate_included_weekdays,
    validate_max_visible,
    validate_week_start,
)
from lineup.scheduling.exceptions import ConfigurationError


def test_create_normalises_inputs():
    config = ScheduleConfig.create(
        week_start="monday",
        max_visible=3,
        included_weekdays=[0, 1, 2, 3, 4],
        retain_current_week=True,
        tz="America/Sao_Paulo",
    )
    assert config.week_start is WeekStart.MONDAY
    assert config.included_weekdays == BUSINESS_DAYS
    assert config.tz == ZoneInfo("America/Sao_Paulo")


def test_direct_construction_is_validated():
    with pytest.raises(ConfigurationError):
        ScheduleConfig(
            week_start=WeekStart.SUNDAY,
            max_visible=-1,
            included_weekdays=BUSINESS_DAYS,
            retain_current_week=True,
            tz=UTC,
        )


def test_max_visible_zero_allowed():
    assert validate_max_visible(0) == 0


def test_unknown_week_start():
    with pytest.raises(ConfigurationError) as exc:
        validate_week_start("saturday")
    assert exc.value.parameter == "week_start"


def test_invalid_weekday_entries_listed():
    with pytest.raises(ConfigurationError) as exc:
        validate_included_weekdays([0, 7, -1])
    assert len(exc.value.violations) == 2
    assert "Violations:" in str(exc.value)


def test_unknown_timezone():
    with pytest.raises(ConfigurationError):
        resolve_timezone("Mars/Olympus_Mons")
    assert resolve_timezone(UTC) is UTC


def test_parse_weekdays_names_and_indexes():
    assert parse_weekdays("MON, tue,WED,THU,FRI") == BUSINESS_DAYS
    assert parse_weekdays("5,6") == frozenset({Weekday.SATURDAY, Weekday.SUNDAY})


@pytest.mark.parametrize("text", ["", " , ", "FUNDAY", "MON,9"])
def test_parse_weekdays_rejects(text):
    with pytest.raises(ConfigurationError):
        parse_weekdays(text)


def test_direct_construction_resolves_timezone():
    with pytest.raises(ConfigurationError):
        ScheduleConfig(
            week_start=WeekStart.SUNDAY,
            max_visible=3,
            included_weekdays=BUSINESS_DAYS,
            retain_current_week=True,
            tz="Nope/Zone",
        )
    config = ScheduleConfig(
        week_start=WeekStart.SUNDAY,
        max_visible=3,
        included_weekdays=BUSINESS_DAYS,
        retain_current_week=True,
        tz="America/Sao_Paulo",
    )
    assert config.tz == ZoneInfo("America/Sao_Paulo")
