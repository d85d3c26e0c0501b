"""
User configuration stored as a JSON file.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

from fust.config.settings import get_default_config_path
from fust.exceptions import ConfigurationError

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _parse_bool(key: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for {key}: {value}")


@dataclass
class CliConfig:
    """
    CLI configuration.

    Attributes:
        workspace_path: Workspace initialised with `fust init`
        default_project: Project used when a command needs one and none is given
        theme: Output theme name
        auto_save: Save configuration changes immediately
        notifications_enabled: Show notifications
    """

    workspace_path: Optional[str] = None
    default_project: Optional[str] = None
    theme: str = "default"
    auto_save: bool = True
    notifications_enabled: bool = True

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> "CliConfig":
        """
        Load configuration from file; a missing file yields the defaults.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(config_path) if config_path else get_default_config_path()
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot load configuration {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must be a JSON object")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def save(self, config_path: Optional[Union[str, Path]] = None) -> Path:
        """
        Save configuration to file, creating the parent directory if needed.

        Returns:
            The path written to
        """
        path = Path(config_path) if config_path else get_default_config_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot save configuration {path}: {e}") from e
        return path

    def get_value(self, key: str) -> Optional[str]:
        """Return a value as text, None for unknown keys or unset values."""
        if key not in self.keys():
            return None
        value: Any = getattr(self, key)
        if value is None:
            return None
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)

    def set_value(self, key: str, value: str) -> None:
        """
        Set a value from its text form.

        Raises:
            ConfigurationError: If the key is unknown or a boolean cannot be parsed
        """
        if key in ("auto_save", "notifications_enabled"):
            setattr(self, key, _parse_bool(key, value))
        elif key in ("workspace_path", "default_project", "theme"):
            setattr(self, key, value)
        else:
            raise ConfigurationError(f"Unknown configuration key: {key}")

    @classmethod
    def keys(cls) -> list[str]:
        return [f.name for f in fields(cls)]
