"""Logging configuration for wd-remote."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Below DEBUG: full request/response messages
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def setup_logging(log_path: Path, *, trace: bool = False) -> None:
    """Configure package logger with a rotating file handler.

    Idempotent — skips if handler is already attached.
    """
    root = logging.getLogger("wd_remote")
    if root.handlers:
        return

    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))

    root.setLevel(TRACE if trace else logging.DEBUG)
    root.addHandler(handler)
