"""Application context shared across CLI commands."""

import asyncio
from dataclasses import dataclass
from typing import Any

import typer

from wd_remote.command import Command
from wd_remote.config import Config
from wd_remote.errors import WireError
from wd_remote.output import Output
from wd_remote.remote.client import HttpClient
from wd_remote.remote.executor import Executor


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    cfg: Config

    def execute(self, command: Command) -> Any:  # noqa: ANN401
        """Execute one command against the configured server, exiting with an error on failure."""
        try:
            return asyncio.run(_execute(self.cfg, command))
        except WireError as e:
            self.out.print_error_and_exit(e.code, str(e))


async def _execute(cfg: Config, command: Command) -> Any:  # noqa: ANN401
    async with HttpClient.from_config(cfg) as client:
        return await Executor(client).execute(command)


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result
