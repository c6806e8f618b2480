"""CLI entry point for wd-remote."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus
from pydantic import ValidationError

from wd_remote.app_context import AppContext
from wd_remote.commands.exec_ import exec_
from wd_remote.commands.list import list_
from wd_remote.commands.status import status
from wd_remote.config import Config
from wd_remote.log import setup_logging
from wd_remote.output import Output

app = TyperPlus(package_name="wd-remote")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path.")] = None,
    server_url: Annotated[str | None, typer.Option("--server-url", help="Command root of the remote end.")] = None,
    proxy: Annotated[str | None, typer.Option("--proxy", help="Proxy URL to route requests through.")] = None,
    trace: Annotated[bool, typer.Option("--trace", help="Log full requests and responses.")] = False,
) -> None:
    """Send commands to a remote automation server over HTTP + JSON."""
    out = Output(json_mode=json_output)
    try:
        cfg = Config.build(data_dir, server_url=server_url, proxy_url=proxy)
    except ValidationError as e:
        out.print_error_and_exit("invalid_config", str(e))
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, trace=trace)
    ctx.obj = AppContext(out=out, cfg=cfg)


app.command("exec", aliases=["x"])(exec_)
app.command(aliases=["s"])(status)
app.command("commands", aliases=["l"])(list_)
