"""List known commands."""

import typer

from wd_remote.app_context import use_context
from wd_remote.remote.resources import DEFAULT_RESOURCES


def list_(ctx: typer.Context) -> None:
    """List command names with their HTTP method and path."""
    app = use_context(ctx)
    app.out.print_resources((str(name), resource) for name, resource in DEFAULT_RESOURCES.items())
