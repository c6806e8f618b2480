"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 — this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import sys
from collections.abc import Iterable
from typing import Any, NoReturn

import typer

from wd_remote.remote.resources import Resource


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    def print_envelope(self, envelope: Any) -> None:  # noqa: ANN401
        """Print a decoded response envelope."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": envelope}))
            return
        if isinstance(envelope, dict) and "status" in envelope:
            print(f"status: {envelope['status']}")
            value = envelope.get("value")
            print(value if isinstance(value, str) else json.dumps(value, indent=2))
        else:
            print(json.dumps(envelope, indent=2))

    def print_resources(self, resources: Iterable[tuple[str, Resource]]) -> None:
        """Print command names with the resources they map to."""
        rows = sorted(resources)
        if self._json_mode:
            data = [{"name": name, "method": r.method, "path": r.path} for name, r in rows]
            print(json.dumps({"ok": True, "data": {"commands": data}}))
            return
        width = max((len(name) for name, _ in rows), default=0)
        for name, resource in rows:
            print(f"{name:<{width}}  {resource.method:<6}  {resource.path}")
