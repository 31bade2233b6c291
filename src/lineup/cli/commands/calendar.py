from __future__ import annotations

import typer

from ...infra.uow import session
from ...scheduling.exceptions import ConfigurationError
from ...usecases import calendar_month as _uc_calendar_month
from ...usecases import calendar_stats as _uc_calendar_stats
from ._output import echo_json, fail, resolve_now, schedule_config, venue_tz

app = typer.Typer(name="calendar", help="Admin calendar projections and statistics")


def _parse_month(value: str) -> tuple[int, int]:
    try:
        year_text, month_text = value.split("-", 1)
        return int(year_text), int(month_text)
    except ValueError as e:
        raise ConfigurationError(f"Invalid month: {value!r} (expected YYYY-MM)", parameter="month") from e


@app.command("month")
def month(
    month: str | None = typer.Option(None, "--month", help="Month to render as YYYY-MM (defaults to the current month)"),
    week_start: str | None = typer.Option(None, "--week-start", help="sunday or monday"),
    max_visible: int | None = typer.Option(None, "--max-visible", help="Events shown per day before '+N more'"),
    now: str | None = typer.Option(None, "--now", help="Reference instant (defaults to the wall clock)"),
    tz: str | None = typer.Option(None, "--tz", help="Venue timezone (defaults to VENUE_TIMEZONE)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Render the admin month calendar.

    Examples:
        lineup calendar month --month 2026-10
        lineup calendar month --week-start monday --max-visible 5 --json
    """
    with session() as db:
        try:
            config = schedule_config(week_start=week_start, max_visible=max_visible, tz_name=tz)
            today = resolve_now(now, config.tz).astimezone(config.tz).date()
            year, month_number = _parse_month(month) if month else (today.year, today.month)
            result = _uc_calendar_month.render_month(
                db, year=year, month=month_number, config=config, today=today
            )
        except Exception as e:
            fail(e, json_output, "rendering calendar")

    if json_output:
        echo_json({"calendar": result})
        return

    typer.echo(f"{result['year']:04d}-{result['month']:02d}")
    for week in result["weeks"]:
        for cell in week:
            marker = "*" if cell["is_today"] else " "
            dim = "" if cell["in_month"] else " (adjacent)"
            if not cell["events"] and not cell["hidden_count"]:
                continue
            typer.echo(f"{marker}{cell['date']}{dim}")
            for e in cell["events"]:
                typer.echo(f"    {e['start'][11:16]} {e['name']}")
            if cell["hidden_count"]:
                typer.echo(f"    + {cell['hidden_count']} more")
    for d in result["diagnostics"]:
        typer.echo(f"Skipped {d['event_id']}: {d['message']}", err=True)


@app.command("conflicts")
def conflicts(
    tz: str | None = typer.Option(None, "--tz", help="Venue timezone (defaults to VENUE_TIMEZONE)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """List overlapping events that share a screen."""
    with session() as db:
        try:
            result = _uc_calendar_stats.list_conflicts(db, tz=venue_tz(tz))
        except Exception as e:
            fail(e, json_output, "listing conflicts")

    if json_output:
        echo_json(result)
        return
    if not result["conflicts"]:
        typer.echo("No conflicts found")
        return
    for c in result["conflicts"]:
        typer.echo(f"  {c['first']['name']} <> {c['second']['name']} on {', '.join(c['screens'])}")
    typer.echo(f"\nTotal: {result['count']} conflicts")


@app.command("stats")
def stats(
    tz: str | None = typer.Option(None, "--tz", help="Venue timezone (defaults to VENUE_TIMEZONE)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Dashboard statistics: tags, locations, peak hours, screen occupancy."""
    with session() as db:
        try:
            result = _uc_calendar_stats.analytics_report(db, tz=venue_tz(tz))
        except Exception as e:
            fail(e, json_output, "computing statistics")

    if json_output:
        echo_json({"stats": result})
        return
    typer.echo(f"Total events: {result['total_events']}")
    typer.echo(f"Average duration: {result['average_duration_minutes']} min")
    typer.echo(f"Max simultaneous: {result['max_simultaneous']}")
    if result["tags"]:
        typer.echo("Top tags: " + ", ".join(f"{t['name']} ({t['count']})" for t in result["tags"]))
    if result["locations"]:
        typer.echo("Top locations: " + ", ".join(f"{loc['name']} ({loc['count']})" for loc in result["locations"]))
    for s in result["screens"]:
        typer.echo(f"  {s['slug']}: {s['events']} events, {s['hours']} h")
