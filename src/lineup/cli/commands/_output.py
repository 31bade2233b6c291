"""Shared output and error mapping for CLI commands.

Use cases never write to stdout; all IO stays in the command wrappers.
"""

from __future__ import annotations

import json
from datetime import datetime, tzinfo
from typing import Any, NoReturn

import typer

from ...infra.exceptions import ConflictError, NotFoundError, ValidationError
from ...infra.settings import settings
from ...runtime.clock import MasterClock
from ...scheduling.contracts import ScheduleConfig, parse_weekdays, resolve_timezone
from ...scheduling.exceptions import ConfigurationError
from ...scheduling.normalize import MalformedTimestamp, parse_instant


def error_code(exc: Exception) -> str:
    if isinstance(exc, NotFoundError):
        return "NOT_FOUND"
    if isinstance(exc, ConflictError):
        return "SLUG_DUPLICATE"
    if isinstance(exc, ConfigurationError):
        return "CONFIGURATION_ERROR"
    if isinstance(exc, (ValidationError, MalformedTimestamp)):
        return "VALIDATION_ERROR"
    return "UNKNOWN_ERROR"


def fail(exc: Exception, json_output: bool, action: str) -> NoReturn:
    """Report ``exc`` in the requested format and exit 1."""
    code = error_code(exc)
    if json_output:
        typer.echo(json.dumps({"status": "error", "code": code, "message": str(exc)}, indent=2))
    elif code == "UNKNOWN_ERROR":
        typer.echo(f"Error {action}: {exc}", err=True)
    else:
        typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(1)


def echo_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps({"status": "ok", **payload}, indent=2, default=str))


def venue_tz(tz_name: str | None) -> tzinfo:
    return resolve_timezone(tz_name or settings.venue_timezone)


def resolve_now(now: str | None, tz: tzinfo) -> datetime:
    """``--now`` override, else the wall clock."""
    if now:
        return parse_instant(now, tz)
    return MasterClock().now_utc()


def schedule_config(
    *,
    week_start: str | None = None,
    max_visible: int | None = None,
    tz_name: str | None = None,
    retain_current_week: bool | None = None,
    weekdays: str | None = None,
) -> ScheduleConfig:
    """Settings-derived configuration with per-command overrides."""
    base = settings.schedule_config()
    return ScheduleConfig.create(
        week_start=week_start or base.week_start,
        max_visible=base.max_visible if max_visible is None else max_visible,
        included_weekdays=base.included_weekdays if weekdays is None else parse_weekdays(weekdays),
        retain_current_week=base.retain_current_week if retain_current_week is None else retain_current_week,
        tz=venue_tz(tz_name) if tz_name else base.tz,
    )


def split_csv(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [v.strip() for v in value.split(",") if v.strip()]
