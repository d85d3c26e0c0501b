"""
Environment settings for the application.

Environment variables (a .env file in the working directory is honoured):
- FUST_CONFIG_PATH: configuration file. Defaults to $XDG_CONFIG_HOME/fust/config.json.
- FUST_DATA_DIR: directory holding projects.json and tasks.json. Defaults to $XDG_DATA_HOME/fust.
- FUST_LOG_LEVEL: logging level name used when --verbose is not given. Defaults to WARNING.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from fust.exceptions import ConfigurationError

APP_NAME = "fust"

# Load environment variables from .env file
_ = load_dotenv()


def _xdg_dir(env_var: str, default_subdir: str) -> Path:
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_default_config_path() -> Path:
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / "config.json"


def get_default_data_dir() -> Path:
    return _xdg_dir("XDG_DATA_HOME", ".local/share")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.config_path: Path = self._get_path_env(
            "FUST_CONFIG_PATH", get_default_config_path()
        )
        self.data_dir: Path = self._get_path_env("FUST_DATA_DIR", get_default_data_dir())
        self.log_level: int = self._get_log_level("FUST_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_path_env(self, key: str, default: Path) -> Path:
        value = os.getenv(key)
        return Path(value).expanduser() if value else default

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name from the environment, raise error if unknown."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log level in {key}: {name}")
        return level
