"""
Application settings for LineUp.

This module defines all configuration settings for LineUp using Pydantic BaseSettings.
The projection engine never reads these; callers turn them into a
``ScheduleConfig`` and pass it per call.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lineup.scheduling.contracts import ScheduleConfig, parse_weekdays


class Settings(BaseSettings):
    """Main application settings using Pydantic BaseSettings."""

    # Persistence
    database_url: str = Field(default="sqlite:///lineup.db", alias="DATABASE_URL")
    echo_sql: bool = Field(default=False, alias="ECHO_SQL")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    env: str = Field(default="dev", alias="ENV")  # dev|prod|test

    # Venue calendar
    venue_timezone: str = Field(default="America/Sao_Paulo", alias="VENUE_TIMEZONE")
    week_start: str = Field(default="sunday", alias="WEEK_START")  # sunday|monday
    max_visible: int = Field(default=3, alias="MAX_VISIBLE")
    agenda_weekdays: str = Field(default="MON,TUE,WED,THU,FRI", alias="AGENDA_WEEKDAYS")
    retain_current_week: bool = Field(default=True, alias="RETAIN_CURRENT_WEEK")

    # Signage player
    refresh_interval_seconds: float = Field(default=10.0, alias="REFRESH_INTERVAL_SECONDS")

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def schedule_config(self) -> ScheduleConfig:
        """Build the per-call projection configuration from these settings."""
        return ScheduleConfig.create(
            week_start=self.week_start,
            max_visible=self.max_visible,
            included_weekdays=parse_weekdays(self.agenda_weekdays),
            retain_current_week=self.retain_current_week,
            tz=self.venue_timezone,
        )


def _resolve_env_file() -> str | None:
    # 1) Explicit override
    explicit = os.getenv("LINEUP_ENV_FILE")
    if explicit and Path(explicit).is_file():
        return explicit

    # 2) CWD .env
    cwd_env = Path.cwd() / ".env"
    if cwd_env.is_file():
        return str(cwd_env)

    # 3) Walk up from this file to find nearest .env
    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / ".env"
        if candidate.is_file():
            return str(candidate)
    return None


# Global settings instance (load from best-effort .env discovery)
_env_file = _resolve_env_file()
settings = Settings(_env_file=_env_file) if _env_file else Settings()  # type: ignore[call-arg]
