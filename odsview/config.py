"""Configuration for the ODS viewer."""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from odsview.constants import DEFAULT_NODE_URL
from odsview.exceptions import ConfigError


class ViewerConfig(BaseModel):
    """Viewer configuration with Pydantic validation."""

    # Node connection
    node_url: str = Field(default=DEFAULT_NODE_URL)
    auth_token: str | None = None
    celestia_bin: str = Field(default="celestia")

    # Streaming
    poll_interval: float = Field(default=2.0, gt=0)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="odsview.log")

    @staticmethod
    def _env_overrides() -> dict:
        """Collect config values set in the environment."""
        config_dict = {}

        # Node connection
        if "CELESTIA_NODE_URL" in os.environ:
            config_dict["node_url"] = os.environ["CELESTIA_NODE_URL"]
        if "CELESTIA_NODE_AUTH_TOKEN" in os.environ:
            config_dict["auth_token"] = os.environ["CELESTIA_NODE_AUTH_TOKEN"]
        if "CELESTIA_BIN" in os.environ:
            config_dict["celestia_bin"] = os.environ["CELESTIA_BIN"]

        # Streaming
        if "POLL_INTERVAL" in os.environ:
            try:
                interval = float(os.environ["POLL_INTERVAL"])
                if interval > 0:
                    config_dict["poll_interval"] = interval
            except ValueError:
                pass  # Keep default if invalid

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        return config_dict

    @classmethod
    def from_env(cls) -> "ViewerConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        return cls(**cls._env_overrides())

    @classmethod
    def from_toml(cls, path: Path) -> "ViewerConfig":
        """Load configuration from a TOML file, then apply environment overrides.

        The file uses the node's own key names (``url`` and ``auth_key``).

        Args:
            path: Path to the TOML config file

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is missing, unparseable or invalid
        """
        load_dotenv()

        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        config_dict = {}
        if "url" in data:
            config_dict["node_url"] = data["url"]
        if "auth_key" in data:
            config_dict["auth_token"] = data["auth_key"]
        if "celestia_bin" in data:
            config_dict["celestia_bin"] = data["celestia_bin"]
        if "poll_interval" in data:
            config_dict["poll_interval"] = data["poll_interval"]

        config_dict.update(cls._env_overrides())

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
