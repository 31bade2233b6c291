from __future__ import annotations

import json

import typer

from ...infra.settings import settings
from ...infra.uow import session
from ...runtime.clock import MasterClock
from ...runtime.player import PlayerFrame, SignagePlayer
from ...usecases import screen_agenda as _uc_screen_agenda
from ...usecases.snapshot import load_snapshot
from ._output import echo_json, fail, resolve_now, schedule_config

app = typer.Typer(name="player", help="Signage agenda rendering for one screen")


def _echo_agenda(agenda: dict) -> None:
    screen = agenda["screen"]
    typer.echo(f"{screen['name'] or screen['slug']} ({screen['orientation']})")
    if agenda["empty"]:
        typer.echo("  No events scheduled")
        return
    for column in agenda["columns"]:
        marker = "*" if column["is_today"] else " "
        typer.echo(f"{marker}{column['weekday']} {column['date']}")
        if not column["events"]:
            typer.echo("    -")
        for e in column["events"]:
            where = f" @ {e['location']}" if e["location"] else ""
            typer.echo(f"    {e['start'][11:16]}-{e['end'][11:16]} {e['name']}{where} [{e['status']}]")


@app.command("show")
def show(
    slug: str = typer.Argument(..., help="Screen slug"),
    now: str | None = typer.Option(None, "--now", help="Reference instant (defaults to the wall clock)"),
    week_start: str | None = typer.Option(None, "--week-start", help="sunday or monday"),
    weekdays: str | None = typer.Option(None, "--weekdays", help="Columns to show, e.g. MON,TUE,WED,THU,FRI"),
    retain_week: bool | None = typer.Option(
        None, "--retain-week/--no-retain-week", help="Keep already-ended events of the current week"
    ),
    tz: str | None = typer.Option(None, "--tz", help="Venue timezone (defaults to VENUE_TIMEZONE)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Render the weekly agenda a screen shows right now."""
    with session() as db:
        try:
            config = schedule_config(
                week_start=week_start, tz_name=tz, retain_current_week=retain_week, weekdays=weekdays
            )
            result = _uc_screen_agenda.render_screen_agenda(
                db, slug=slug, now=resolve_now(now, config.tz), config=config
            )
        except Exception as e:
            fail(e, json_output, "rendering agenda")

    if json_output:
        echo_json({"agenda": result})
    else:
        _echo_agenda(result)


def _snapshot_source():
    with session() as db:
        return load_snapshot(db)


@app.command("run")
def run(
    slug: str = typer.Argument(..., help="Screen slug"),
    interval: float | None = typer.Option(None, "--interval", help="Refresh interval in seconds"),
    once: bool = typer.Option(False, "--once", help="Render a single frame and exit"),
    json_output: bool = typer.Option(False, "--json", help="Emit each frame as JSON"),
):
    """Keep a screen's agenda fresh, re-rendering whenever it changes."""

    def on_render(frame: PlayerFrame) -> None:
        if json_output:
            typer.echo(json.dumps({"fade_key": frame.fade_key, "found": frame.found, "agenda": frame.agenda}))
        elif not frame.found:
            typer.echo(f"Screen not found: {slug}. Register it with 'lineup screen add'.")
        else:
            _echo_agenda(frame.agenda)

    try:
        player = SignagePlayer(
            slug,
            snapshot_source=_snapshot_source,
            clock=MasterClock(),
            config=schedule_config(),
            on_render=on_render,
            refresh_interval_seconds=settings.refresh_interval_seconds if interval is None else interval,
        )
    except Exception as e:
        fail(e, json_output, "starting player")

    if once:
        frame = player.refresh_once()
        if frame is None or not frame.found:
            raise typer.Exit(1)
        return

    player.start()
    try:
        while not player.wait(1.0):
            pass
    except KeyboardInterrupt:
        pass
    finally:
        player.stop()
