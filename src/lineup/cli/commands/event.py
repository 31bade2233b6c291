from __future__ import annotations

import typer

from ...infra.uow import session
from ...usecases import event_add as _uc_event_add
from ...usecases import event_delete as _uc_event_delete
from ...usecases import event_list as _uc_event_list
from ...usecases import event_update as _uc_event_update
from ._output import echo_json, fail, resolve_now, split_csv, venue_tz

app = typer.Typer(name="event", help="Event management operations")


def _echo_event(event: dict) -> None:
    typer.echo(f"  ID: {event['id']}")
    typer.echo(f"  Name: {event['name']}")
    typer.echo(f"  When: {event['start']} - {event['end']}")
    if event.get("location"):
        typer.echo(f"  Location: {event['location']}")
    if event.get("screen_ids"):
        typer.echo(f"  Screens: {', '.join(event['screen_ids'])}")
    if event.get("tags"):
        typer.echo(f"  Tags: {', '.join(event['tags'])}")


def _echo_conflicts(conflicts: list[dict]) -> None:
    for c in conflicts:
        typer.echo(
            f"  Warning: overlaps '{c['name']}' ({c['start']} - {c['end']}) on {', '.join(c['screen_ids'])}"
        )


@app.command("add")
def add_event(
    name: str = typer.Option(..., "--name", help="Event name"),
    start: str = typer.Option(..., "--start", help="Start instant, ISO-8601 with offset"),
    end: str = typer.Option(..., "--end", help="End instant, ISO-8601 with offset"),
    location: str = typer.Option("", "--location", help="Room or area"),
    screens: str | None = typer.Option(None, "--screens", help="Comma-separated screen ids or slugs"),
    tags: str | None = typer.Option(None, "--tags", help="Comma-separated category labels"),
    tz: str | None = typer.Option(None, "--tz", help="Venue timezone (defaults to VENUE_TIMEZONE)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Create an event.

    Examples:
        lineup event add --name "Opening" --start 2026-10-19T09:00-03:00 --end 2026-10-19T10:00-03:00 --screens lobby
    """
    with session() as db:
        try:
            result = _uc_event_add.add_event(
                db,
                name=name,
                start=start,
                end=end,
                tz=venue_tz(tz),
                location=location,
                screens=split_csv(screens),
                tags=split_csv(tags),
            )
        except Exception as e:
            fail(e, json_output, "creating event")

    if json_output:
        echo_json(result)
    else:
        typer.echo("Event created:")
        _echo_event(result["event"])
        _echo_conflicts(result["conflicts"])


@app.command("list")
def list_events(
    screen: str | None = typer.Option(None, "--screen", help="Filter by screen id or slug"),
    current_only: bool = typer.Option(False, "--current", help="Hide events that already ended"),
    now: str | None = typer.Option(None, "--now", help="Reference instant (defaults to the wall clock)"),
    tz: str | None = typer.Option(None, "--tz", help="Venue timezone (defaults to VENUE_TIMEZONE)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """List events ascending by start, with their status."""
    with session() as db:
        try:
            zone = venue_tz(tz)
            result = _uc_event_list.list_events(
                db,
                tz=zone,
                now=resolve_now(now, zone),
                screen_identifier=screen,
                current_only=current_only,
            )
        except Exception as e:
            fail(e, json_output, "listing events")

    if json_output:
        echo_json({"total": result["count"], "events": result["events"], "diagnostics": result["diagnostics"]})
        return
    if not result["events"]:
        typer.echo("No events found")
    else:
        typer.echo("Events:")
        for e in result["events"]:
            typer.echo(f"  [{e['status']}] {e['start']} {e['name']}")
            typer.echo(f"      ID: {e['id']}")
        typer.echo(f"\nTotal: {result['count']} events")
    for d in result["diagnostics"]:
        typer.echo(f"Skipped {d['event_id']}: {d['message']}", err=True)


@app.command("show")
def show_event(
    selector: str = typer.Argument(..., help="Event id"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Show one event."""
    with session() as db:
        try:
            result = _uc_event_list.get_event(db, event_identifier=selector)
        except Exception as e:
            fail(e, json_output, "showing event")

    if json_output:
        echo_json({"event": result})
    else:
        typer.echo("Event:")
        _echo_event(result)


@app.command("update")
def update_event(
    selector: str = typer.Argument(..., help="Event id"),
    name: str | None = typer.Option(None, "--name", help="New name"),
    start: str | None = typer.Option(None, "--start", help="New start instant"),
    end: str | None = typer.Option(None, "--end", help="New end instant"),
    location: str | None = typer.Option(None, "--location", help="New location"),
    screens: str | None = typer.Option(None, "--screens", help="Replace target screens (comma-separated)"),
    tags: str | None = typer.Option(None, "--tags", help="Replace tags (comma-separated)"),
    tz: str | None = typer.Option(None, "--tz", help="Venue timezone (defaults to VENUE_TIMEZONE)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Edit an event."""
    with session() as db:
        try:
            result = _uc_event_update.update_event(
                db,
                event_identifier=selector,
                tz=venue_tz(tz),
                name=name,
                location=location,
                start=start,
                end=end,
                screens=split_csv(screens),
                tags=split_csv(tags),
            )
        except Exception as e:
            fail(e, json_output, "updating event")

    if json_output:
        echo_json(result)
    else:
        typer.echo("Event updated:")
        _echo_event(result["event"])
        _echo_conflicts(result["conflicts"])


@app.command("delete")
def delete_event(
    selector: str = typer.Argument(..., help="Event id"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Delete an event."""
    with session() as db:
        try:
            result = _uc_event_delete.delete_event(db, event_identifier=selector)
        except Exception as e:
            fail(e, json_output, "deleting event")

    if json_output:
        echo_json({"event": result})
    else:
        typer.echo(f"Event '{result['name']}' deleted")
