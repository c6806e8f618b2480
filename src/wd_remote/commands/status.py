"""Query the remote end's status."""

import typer

from wd_remote.app_context import use_context
from wd_remote.command import Command, CommandName


def status(ctx: typer.Context) -> None:
    """Show the server status."""
    app = use_context(ctx)
    app.out.print_envelope(app.execute(Command(CommandName.GET_SERVER_STATUS)))
