"""Centralized application configuration."""

import tomllib
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

DEFAULT_DATA_DIR = Path.home() / ".local" / "wd-remote"
DEFAULT_SERVER_URL = "http://localhost:4444/wd/hub"


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(description="Base directory for application data")
    server_url: str = Field(default=DEFAULT_SERVER_URL, description="Command root of the remote end")
    proxy_url: str | None = Field(default=None, description="Proxy to route requests through")
    max_redirects: int = Field(default=20, ge=0, description="Longest redirect chain that is followed")
    max_reset_retries: int = Field(default=10, ge=0, description="Retries for a connection reset by the peer")
    reset_retry_delay: float = Field(default=0.015, ge=0, description="Delay before a reset retry, in seconds")

    @field_validator("server_url", "proxy_url")
    @classmethod
    def _require_host(cls, value: str | None) -> str | None:
        if value is not None and not urlsplit(value).hostname:
            msg = f"URL has no host: {value}"
            raise ValueError(msg)
        return value

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "wd-remote.log"

    @staticmethod
    def build(data_dir: Path | None = None, *, server_url: str | None = None, proxy_url: str | None = None) -> "Config":
        """Build a Config from defaults, optional config.toml, and explicit overrides."""
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            for key in ("server_url", "proxy_url"):
                if isinstance(toml_data.get(key), str):
                    kwargs[key] = toml_data[key]
            for key in ("max_redirects", "max_reset_retries"):
                if isinstance(toml_data.get(key), int):
                    kwargs[key] = toml_data[key]
            if isinstance(toml_data.get("reset_retry_delay"), int | float):
                kwargs["reset_retry_delay"] = toml_data["reset_retry_delay"]

        if server_url is not None:
            kwargs["server_url"] = server_url
        if proxy_url is not None:
            kwargs["proxy_url"] = proxy_url
        return Config(**kwargs)
