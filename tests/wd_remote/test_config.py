"""Tests for Config model validation, computed paths, and layered build."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from wd_remote.config import DEFAULT_SERVER_URL, Config

DATA_DIR = Path("/fake/data-dir")


class TestConfigPaths:
    """Computed path properties derive from data_dir."""

    def test_config_path(self):
        """Config file is data_dir / config.toml."""
        cfg = Config(data_dir=DATA_DIR)
        assert cfg.config_path == DATA_DIR / "config.toml"

    def test_log_path(self):
        """Log file is data_dir / wd-remote.log."""
        cfg = Config(data_dir=DATA_DIR)
        assert cfg.log_path == DATA_DIR / "wd-remote.log"


class TestConfigValidation:
    """Pydantic field constraints."""

    def test_defaults(self):
        """Default values for optional fields."""
        cfg = Config(data_dir=DATA_DIR)
        assert cfg.server_url == DEFAULT_SERVER_URL
        assert cfg.proxy_url is None
        assert cfg.max_redirects == 20
        assert cfg.max_reset_retries == 10
        assert cfg.reset_retry_delay == 0.015

    def test_negative_max_redirects(self):
        """max_redirects < 0 is rejected."""
        with pytest.raises(ValidationError):
            Config(data_dir=DATA_DIR, max_redirects=-1)

    def test_negative_reset_retry_delay(self):
        """reset_retry_delay < 0 is rejected."""
        with pytest.raises(ValidationError):
            Config(data_dir=DATA_DIR, reset_retry_delay=-0.5)

    def test_server_url_without_host(self):
        """A server URL with no host is rejected."""
        with pytest.raises(ValidationError):
            Config(data_dir=DATA_DIR, server_url="/wd/hub")

    def test_proxy_url_without_host(self):
        """A proxy URL with no host is rejected."""
        with pytest.raises(ValidationError):
            Config(data_dir=DATA_DIR, proxy_url="proxy-without-scheme")


class TestConfigBuild:
    """Config.build layers defaults, config.toml, and explicit overrides."""

    def test_without_config_file(self, tmp_path: Path):
        """Missing config.toml yields defaults."""
        cfg = Config.build(tmp_path)
        assert cfg.data_dir == tmp_path
        assert cfg.server_url == DEFAULT_SERVER_URL

    def test_reads_config_file(self, tmp_path: Path):
        """Known keys are read from config.toml."""
        (tmp_path / "config.toml").write_text(
            'server_url = "http://grid:4444/wd/hub"\n'
            'proxy_url = "http://proxy:3128"\n'
            "max_redirects = 5\n"
            "reset_retry_delay = 1\n"
        )
        cfg = Config.build(tmp_path)
        assert cfg.server_url == "http://grid:4444/wd/hub"
        assert cfg.proxy_url == "http://proxy:3128"
        assert cfg.max_redirects == 5
        assert cfg.reset_retry_delay == 1.0

    def test_ignores_mistyped_values(self, tmp_path: Path):
        """Values of the wrong type in config.toml fall back to defaults."""
        (tmp_path / "config.toml").write_text('max_redirects = "many"\n')
        cfg = Config.build(tmp_path)
        assert cfg.max_redirects == 20

    def test_explicit_overrides_win(self, tmp_path: Path):
        """Explicit arguments override config.toml."""
        (tmp_path / "config.toml").write_text('server_url = "http://grid:4444/wd/hub"\n')
        cfg = Config.build(tmp_path, server_url="http://other:9515", proxy_url="http://proxy:8080")
        assert cfg.server_url == "http://other:9515"
        assert cfg.proxy_url == "http://proxy:8080"
