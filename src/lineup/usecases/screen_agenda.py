from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, tzinfo
from typing import Any

from sqlalchemy.orm import Session

from ..domain.models import Screen, WeekAgenda
from ..infra.exceptions import NotFoundError
from ..scheduling.contracts import ScheduleConfig
from ..scheduling.normalize import EventLike
from ..scheduling.screen_filter import for_screen
from ..scheduling.time_window import event_status
from ..scheduling.week_agenda import build_week_agenda
from .lookup import diagnostic_to_dict, event_to_dict
from .snapshot import Snapshot, load_snapshot


def project_screen(
    events: Sequence[EventLike],
    screen: Screen,
    now: datetime,
    config: ScheduleConfig,
) -> WeekAgenda:
    """Screen filter followed by the week agenda, as the player renders it."""
    selection = for_screen(
        events,
        screen.id,
        now,
        retain_current_week=config.retain_current_week,
        week_start=config.week_start,
        tz=config.tz,
    )
    agenda = build_week_agenda(
        selection.events,
        now,
        week_start=config.week_start,
        included_weekdays=config.included_weekdays,
        tz=config.tz,
    )
    return WeekAgenda(
        items=agenda.items,
        diagnostics=selection.diagnostics,
        week_start=agenda.week_start,
        week_end=agenda.week_end,
    )


def agenda_to_dict(screen: Screen, agenda: WeekAgenda, now: datetime, tz: tzinfo) -> dict[str, Any]:
    columns = []
    for column in agenda.columns:
        events = []
        for event in column.events:
            row = event_to_dict(event, tz)
            row["status"] = event_status(event, now).value
            events.append(row)
        columns.append(
            {
                "date": column.date.isoformat(),
                "weekday": column.weekday.abbr,
                "is_today": column.is_today,
                "events": events,
            }
        )
    return {
        "screen": {
            "id": screen.id,
            "slug": screen.slug,
            "name": screen.name,
            "orientation": screen.orientation.value,
        },
        "week_start": agenda.week_start.isoformat() if agenda.week_start else None,
        "week_end": agenda.week_end.isoformat() if agenda.week_end else None,
        "columns": columns,
        "empty": not any(c.events for c in agenda.columns),
        "diagnostics": [diagnostic_to_dict(d) for d in agenda.diagnostics],
    }


def render_snapshot_agenda(
    snapshot: Snapshot, *, slug: str, now: datetime, config: ScheduleConfig
) -> dict[str, Any]:
    """Render a screen's agenda from an already loaded snapshot.

    Raises:
        NotFoundError: If no screen has ``slug``
    """
    screen = snapshot.screen_by_slug(slug)
    if screen is None:
        raise NotFoundError(f"Screen '{slug}' not found")
    agenda = project_screen(snapshot.events, screen, now, config)
    return agenda_to_dict(screen, agenda, now, config.tz)


def render_screen_agenda(
    db: Session, *, slug: str, now: datetime, config: ScheduleConfig
) -> dict[str, Any]:
    """Weekly signage agenda for the screen addressed by ``slug``.

    Raises:
        NotFoundError: If no screen has ``slug``
    """
    return render_snapshot_agenda(load_snapshot(db), slug=slug, now=now, config=config)


__all__ = ["render_screen_agenda", "render_snapshot_agenda", "project_screen", "agenda_to_dict"]
