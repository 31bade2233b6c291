from __future__ import annotations

import typer

from ...infra.uow import session
from ...usecases import screen_add as _uc_screen_add
from ...usecases import screen_delete as _uc_screen_delete
from ...usecases import screen_list as _uc_screen_list
from ...usecases import screen_update as _uc_screen_update
from ._output import echo_json, fail

app = typer.Typer(name="screen", help="Display screen (TV) management operations")


def _echo_screen(result: dict) -> None:
    typer.echo(f"  ID: {result['id']}")
    typer.echo(f"  Name: {result['name']}")
    typer.echo(f"  Slug: {result['slug']}")
    typer.echo(f"  Orientation: {result['orientation']}")


@app.command("add")
def add_screen(
    name: str = typer.Option(..., "--name", help="Display name (e.g., 'Lobby TV')"),
    slug: str | None = typer.Option(None, "--slug", help="Routing key; derived from the name when omitted"),
    orientation: str = typer.Option("horizontal", "--orientation", help="horizontal or vertical"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Register a screen.

    Examples:
        lineup screen add --name "Lobby TV"
        lineup screen add --name "Hall B" --slug hall-b --orientation vertical
    """
    with session() as db:
        try:
            result = _uc_screen_add.add_screen(db, name=name, slug=slug, orientation=orientation)
        except Exception as e:
            fail(e, json_output, "creating screen")

    if json_output:
        echo_json({"screen": result})
    else:
        typer.echo("Screen created:")
        _echo_screen(result)


@app.command("list")
def list_screens(
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """List screens ordered by slug."""
    with session() as db:
        try:
            result = _uc_screen_list.list_screens(db)
        except Exception as e:
            fail(e, json_output, "listing screens")

    if json_output:
        echo_json({"total": result["count"], "screens": result["screens"]})
        return
    if not result["screens"]:
        typer.echo("No screens found")
        return
    typer.echo("Screens:")
    for s in result["screens"]:
        typer.echo(f"  {s['slug']}: {s['name']} ({s['orientation']})")
        typer.echo(f"      ID: {s['id']}")
    typer.echo(f"\nTotal: {result['count']} screens")


@app.command("show")
def show_screen(
    selector: str = typer.Argument(..., help="Screen identifier: id or slug"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Show one screen."""
    with session() as db:
        try:
            result = _uc_screen_list.get_screen(db, screen_identifier=selector)
        except Exception as e:
            fail(e, json_output, "showing screen")

    if json_output:
        echo_json({"screen": result})
    else:
        typer.echo("Screen:")
        _echo_screen(result)
        typer.echo(f"  Events: {result['event_count']}")


@app.command("update")
def update_screen(
    selector: str = typer.Argument(..., help="Screen identifier: id or slug"),
    name: str | None = typer.Option(None, "--name", help="New display name"),
    slug: str | None = typer.Option(None, "--slug", help="New routing key"),
    orientation: str | None = typer.Option(None, "--orientation", help="horizontal or vertical"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Edit a screen."""
    with session() as db:
        try:
            result = _uc_screen_update.update_screen(
                db, screen_identifier=selector, name=name, slug=slug, orientation=orientation
            )
        except Exception as e:
            fail(e, json_output, "updating screen")

    if json_output:
        echo_json({"screen": result})
    else:
        typer.echo("Screen updated:")
        _echo_screen(result)


@app.command("delete")
def delete_screen(
    selector: str = typer.Argument(..., help="Screen identifier: id or slug"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Delete a screen. Its events are kept and simply lose this target."""
    with session() as db:
        try:
            result = _uc_screen_delete.delete_screen(db, screen_identifier=selector)
        except Exception as e:
            fail(e, json_output, "deleting screen")

    if json_output:
        echo_json({"screen": result})
    else:
        typer.echo(f"Screen '{result['slug']}' deleted ({result['detached_events']} events detached)")
