"""
Settings and logging tests.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from lineup.domain.types import BUSINESS_DAYS, Weekday, WeekStart
from lineup.infra.logging import redact_secrets
from lineup.infra.settings import Settings
from lineup.scheduling.exceptions import ConfigurationError


def test_defaults_build_schedule_config(monkeypatch):
    for name in ("WEEK_START", "MAX_VISIBLE", "AGENDA_WEEKDAYS", "RETAIN_CURRENT_WEEK", "VENUE_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    config = Settings(_env_file=None).schedule_config()
    assert config.week_start is WeekStart.SUNDAY
    assert config.max_visible == 3
    assert config.included_weekdays == BUSINESS_DAYS
    assert config.retain_current_week is True
    assert config.tz == ZoneInfo("America/Sao_Paulo")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WEEK_START", "monday")
    monkeypatch.setenv("MAX_VISIBLE", "5")
    monkeypatch.setenv("AGENDA_WEEKDAYS", "SAT,SUN")
    monkeypatch.setenv("RETAIN_CURRENT_WEEK", "false")
    monkeypatch.setenv("VENUE_TIMEZONE", "UTC")

    config = Settings(_env_file=None).schedule_config()

    assert config.week_start is WeekStart.MONDAY
    assert config.max_visible == 5
    assert config.included_weekdays == frozenset({Weekday.SATURDAY, Weekday.SUNDAY})
    assert config.retain_current_week is False


def test_bad_settings_fail_fast(monkeypatch):
    monkeypatch.setenv("MAX_VISIBLE", "-2")
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None).schedule_config()


def test_redact_secrets():
    event = redact_secrets(
        None,
        None,
        {
            "event": "connect",
            "database_url": "postgresql://user:pw@host/db",
            "dsn": "postgresql://user:pw@host/db",
            "nested": {"url": "https://a:b@example.com"},
        },
    )
    assert event["database_url"] == "***REDACTED***"
    assert event["dsn"] == "postgresql://***@host/db"
    assert event["nested"]["url"] == "https://***@example.com"
    assert event["event"] == "connect"
