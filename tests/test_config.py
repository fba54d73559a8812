"""Tests for configuration."""

from pathlib import Path

import pytest

from odsview.config import ViewerConfig
from odsview.exceptions import ConfigError

ENV_VARS = [
    "CELESTIA_NODE_URL",
    "CELESTIA_NODE_AUTH_TOKEN",
    "CELESTIA_BIN",
    "POLL_INTERVAL",
    "LOG_DIR",
    "LOG_FILENAME",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without viewer variables in the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_viewer_config_defaults():
    """Test ViewerConfig default values."""
    config = ViewerConfig()
    assert config.node_url == "http://localhost:26658"
    assert config.auth_token is None
    assert config.celestia_bin == "celestia"
    assert config.poll_interval == 2.0
    assert config.log_dir == Path("logs")


def test_viewer_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("CELESTIA_NODE_URL", "http://node:26658")
    monkeypatch.setenv("CELESTIA_NODE_AUTH_TOKEN", "token")
    monkeypatch.setenv("CELESTIA_BIN", "/usr/local/bin/celestia")
    monkeypatch.setenv("POLL_INTERVAL", "0.5")
    monkeypatch.setenv("LOG_DIR", "/tmp/odsview-logs")
    monkeypatch.setenv("LOG_FILENAME", "viewer.log")

    config = ViewerConfig.from_env()
    assert config.node_url == "http://node:26658"
    assert config.auth_token == "token"
    assert config.celestia_bin == "/usr/local/bin/celestia"
    assert config.poll_interval == 0.5
    assert config.log_dir == Path("/tmp/odsview-logs")
    assert config.log_filename == "viewer.log"


@pytest.mark.parametrize("value", ["invalid", "0", "-1"])
def test_viewer_config_invalid_poll_interval(monkeypatch, value):
    """Test handling invalid POLL_INTERVAL."""
    monkeypatch.setenv("POLL_INTERVAL", value)
    config = ViewerConfig.from_env()
    # Should fall back to default
    assert config.poll_interval == 2.0


def test_viewer_config_rejects_non_positive_poll_interval():
    """Test the model itself validates the poll interval."""
    with pytest.raises(ValueError):
        ViewerConfig(poll_interval=0)


def test_viewer_config_from_toml(tmp_path):
    """Test loading node settings from a TOML file."""
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        'url = "http://node:26658"\nauth_key = "secret"\npoll_interval = 5\n'
    )

    config = ViewerConfig.from_toml(config_file)
    assert config.node_url == "http://node:26658"
    assert config.auth_token == "secret"
    assert config.poll_interval == 5.0


def test_viewer_config_env_overrides_toml(tmp_path, monkeypatch):
    """Test environment variables take precedence over the file."""
    config_file = tmp_path / "config.toml"
    config_file.write_text('url = "http://file:26658"\nauth_key = "file-token"\n')
    monkeypatch.setenv("CELESTIA_NODE_AUTH_TOKEN", "env-token")

    config = ViewerConfig.from_toml(config_file)
    assert config.node_url == "http://file:26658"
    assert config.auth_token == "env-token"


def test_viewer_config_from_toml_missing(tmp_path):
    """Test a missing config file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        ViewerConfig.from_toml(tmp_path / "missing.toml")


def test_viewer_config_from_toml_invalid_syntax(tmp_path):
    """Test a malformed config file raises ConfigError."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("url = \n")
    with pytest.raises(ConfigError, match="Invalid config file"):
        ViewerConfig.from_toml(config_file)


def test_viewer_config_from_toml_invalid_values(tmp_path):
    """Test invalid values in the file raise ConfigError."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("poll_interval = -3\n")
    with pytest.raises(ConfigError, match="Invalid config file"):
        ViewerConfig.from_toml(config_file)
