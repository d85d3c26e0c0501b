"""
Tests for CliConfig.
"""

import json

import pytest

from fust.config.cli_config import CliConfig
from fust.exceptions import ConfigurationError


class TestCliConfig:
    """Test cases for loading, saving and editing the CLI configuration."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = CliConfig.load(tmp_path / "config.json")

        assert config == CliConfig()
        assert config.theme == "default"
        assert config.auto_save is True

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = CliConfig(workspace_path="/work", default_project="web")

        written = config.save(path)

        assert written == path
        assert CliConfig.load(path) == config

    def test_unknown_keys_in_file_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"theme": "dark", "legacy": 1}))

        assert CliConfig.load(path).theme == "dark"

    @pytest.mark.parametrize("content", ["{broken", "[]"])
    def test_invalid_file(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content)

        with pytest.raises(ConfigurationError):
            CliConfig.load(path)

    def test_default_path_from_xdg(self, tmp_path, monkeypatch):
        """Test that the default location follows XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        CliConfig(theme="dark").save()

        assert (tmp_path / "fust" / "config.json").exists()
        assert CliConfig.load().theme == "dark"

    def test_get_value(self):
        config = CliConfig(theme="dark", auto_save=False)

        assert config.get_value("theme") == "dark"
        assert config.get_value("auto_save") == "false"
        assert config.get_value("workspace_path") is None
        assert config.get_value("nope") is None

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("YES", True), ("1", True), ("off", False), ("0", False)],
    )
    def test_set_boolean(self, raw, expected):
        config = CliConfig()

        config.set_value("notifications_enabled", raw)

        assert config.notifications_enabled is expected

    def test_set_invalid_boolean(self):
        with pytest.raises(ConfigurationError, match="Invalid boolean"):
            CliConfig().set_value("auto_save", "maybe")

    def test_set_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration key: color"):
            CliConfig().set_value("color", "red")

    def test_keys(self):
        assert CliConfig.keys() == [
            "workspace_path",
            "default_project",
            "theme",
            "auto_save",
            "notifications_enabled",
        ]
