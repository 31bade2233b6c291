"""
Main CLI application using Typer with router-based command dispatch.

This module provides the command-line interface for LineUp, calling the
application use cases and outputting JSON when requested.
"""

from __future__ import annotations

import typer

from ..infra.db import create_schema
from ..infra.logging import configure_logging
from ..infra.uow import session
from .commands import calendar, event, player, screen
from .router import get_router

app = typer.Typer(help="LineUp signage scheduling CLI")

router = get_router(app)

router.register("screen", screen.app, help_text="Display screen (TV) management operations")
router.register("event", event.app, help_text="Event management operations")
router.register("calendar", calendar.app, help_text="Admin calendar projections and statistics")
router.register("player", player.app, help_text="Signage agenda rendering for one screen")


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Configure logging and make sure the schema exists before any command."""
    configure_logging(log_level)
    with session() as db:
        create_schema(db.get_bind())


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
