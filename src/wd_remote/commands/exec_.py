"""Execute a single command against the remote end."""

import json
from typing import Annotated, Any

import typer

from wd_remote.app_context import use_context
from wd_remote.command import Command


def parse_param(raw: str) -> tuple[str, Any]:
    """Parse ``key=value``; the value is read as JSON when it parses, else kept as a string."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        msg = f"Expected key=value, got {raw!r}"
        raise typer.BadParameter(msg)
    try:
        return key, json.loads(value)
    except ValueError:
        return key, value


def exec_(
    ctx: typer.Context,
    name: str,
    *,
    param: Annotated[list[str] | None, typer.Option("--param", "-p", help="Command parameter as key=value.")] = None,
    params: Annotated[str | None, typer.Option("--params", help="Command parameters as a JSON object.")] = None,
) -> None:
    """Execute a command by name and print the response envelope."""
    app = use_context(ctx)
    parameters: dict[str, Any] = {}
    if params:
        try:
            loaded = json.loads(params)
        except ValueError as e:
            app.out.print_error_and_exit("invalid_params", f"--params is not valid JSON: {e}")
        if not isinstance(loaded, dict):
            app.out.print_error_and_exit("invalid_params", "--params must be a JSON object.")
        parameters.update(loaded)
    for raw in param or []:
        key, value = parse_param(raw)
        parameters[key] = value
    app.out.print_envelope(app.execute(Command(name, parameters)))
