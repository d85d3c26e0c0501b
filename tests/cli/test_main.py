"""
End-to-end tests for the fust command line.
"""

import json
import logging
import os
import re

import pytest

from fust.cli.main import LOG_FORMAT, build_parser, main


@pytest.fixture(autouse=True)
def cli_env(isolated_env):
    """Isolate storage and drop the log handler installed by main()."""
    yield isolated_env
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if getattr(handler.formatter, "_fmt", None) == LOG_FORMAT:
            root.removeHandler(handler)


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestParser:
    def test_help_exits_cleanly(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["fud", "--help"])

        assert exc_info.value.code == 0
        assert "Path to list directories from" in capsys.readouterr().out

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])

        assert exc_info.value.code == 2

    def test_fud_path_optional(self):
        args = build_parser().parse_args(["fud"])

        assert args.path is None


class TestFud:
    """Test cases for `fust fud`."""

    def test_lists_directories(self, capsys, temp_directory):
        code, out, err = run(capsys, "fud", temp_directory)

        assert code == 0
        assert out.splitlines() == ["alpha", "beta"]
        assert err == ""

    def test_defaults_to_current_directory(self, capsys, temp_directory, monkeypatch):
        monkeypatch.chdir(temp_directory)

        code, out, _ = run(capsys, "fud")

        assert code == 0
        assert out.splitlines() == ["alpha", "beta"]

    def test_non_utf8_directory_name(self, capsys, tmp_path):
        """Test that a name that is not valid UTF-8 prints as unknown."""
        try:
            os.mkdir(os.path.join(os.fsencode(tmp_path), b"bad\xff"))
        except OSError:
            pytest.skip("filesystem rejects names that are not valid UTF-8")
        (tmp_path / "good").mkdir()

        code, out, err = run(capsys, "fud", str(tmp_path))

        assert code == 0
        assert out.splitlines() == ["unknown", "good"]
        assert err == ""

    def test_missing_path(self, capsys, tmp_path):
        code, out, err = run(capsys, "fud", str(tmp_path / "missing"))

        assert code == 1
        assert out == ""
        assert err.startswith("Path not found: ")
        assert err.count("\n") == 1


class TestDir:
    """Test cases for `fust dir`."""

    def test_create_rename_delete(self, capsys, tmp_path):
        created = tmp_path / "a" / "b"
        renamed = tmp_path / "c"

        assert run(capsys, "dir", "create", str(created))[0] == 0
        assert created.is_dir()

        assert run(capsys, "dir", "rename", str(tmp_path / "a"), str(renamed))[0] == 0
        assert (renamed / "b").is_dir()

        assert run(capsys, "dir", "delete", str(renamed))[0] == 0
        assert not renamed.exists()

    def test_rename_onto_existing(self, capsys, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "dst").mkdir()

        code, _, err = run(
            capsys, "dir", "rename", str(tmp_path / "src"), str(tmp_path / "dst")
        )

        assert code == 1
        assert err.startswith("IO error: Destination already exists")
        assert (tmp_path / "src").is_dir()

    def test_delete_missing(self, capsys, tmp_path):
        code, _, err = run(capsys, "dir", "delete", str(tmp_path / "missing"))

        assert code == 1
        assert err.startswith("Path not found: ")


class TestProjects:
    """Test cases for project commands."""

    def test_add_list_show_search_remove(self, capsys, temp_directory):
        code, out, _ = run(
            capsys, "add", "Website", temp_directory, "-d", "Marketing", "-t", "Web"
        )
        assert code == 0
        assert "Project 'Website' added successfully" in out

        code, out, _ = run(capsys, "list")
        assert code == 0
        assert "Website" in out

        code, out, _ = run(capsys, "show", "website")
        assert code == 0
        assert "Project: Website" in out
        assert "Tasks: 0" in out

        code, out, _ = run(capsys, "search", "market")
        assert code == 0
        assert "Website" in out

        code, out, _ = run(capsys, "remove", "Website")
        assert code == 0
        assert "removed successfully" in out

        code, out, _ = run(capsys, "list")
        assert "No projects found" in out

    def test_add_missing_path(self, capsys, tmp_path):
        code, _, err = run(capsys, "add", "Ghost", str(tmp_path / "missing"))

        assert code == 1
        assert err.startswith("Error: Validation error: path")

    def test_projects_persist_in_data_dir(self, capsys, temp_directory, cli_env):
        run(capsys, "add", "Website", temp_directory)

        stored = json.loads((cli_env / "data" / "projects.json").read_text())

        assert [record["name"] for record in stored.values()] == ["Website"]

    def test_show_unknown_project(self, capsys):
        code, _, err = run(capsys, "show", "nothing")

        assert code == 1
        assert "Entity not found" in err


class TestTasks:
    """Test cases for task commands."""

    def test_task_lifecycle(self, capsys, temp_directory):
        run(capsys, "add", "Website", temp_directory)

        code, out, _ = run(
            capsys, "task", "add", "Write docs", "-p", "high", "--project", "Website"
        )
        assert code == 0
        task_id = re.search(r"\(([0-9a-f-]{36})\)", out).group(1)

        code, out, _ = run(capsys, "task", "list", "--project", "Website")
        assert code == 0
        assert "Write docs" in out

        assert run(capsys, "task", "start", task_id[:8])[0] == 0

        code, out, _ = run(capsys, "task", "complete", task_id)
        assert code == 0
        assert "Task 'Write docs' completed" in out

        code, out, _ = run(capsys, "task", "list", "-s", "todo")
        assert "No tasks found." in out

        code, _, err = run(capsys, "task", "start", task_id)
        assert code == 1
        assert "Task cannot be started" in err

    def test_invalid_priority(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["task", "add", "x", "-p", "urgent"])

        assert exc_info.value.code == 2


class TestConfigAndInit:
    """Test cases for configuration commands and workspace initialization."""

    def test_set_and_get(self, capsys, cli_env):
        assert run(capsys, "config", "set", "theme", "dark")[0] == 0

        code, out, _ = run(capsys, "config", "get", "theme")

        assert code == 0
        assert out.strip() == "dark"
        saved = json.loads((cli_env / "config" / "config.json").read_text())
        assert saved["theme"] == "dark"

    def test_get_unset_key(self, capsys):
        code, out, err = run(capsys, "config", "get", "workspace_path")

        assert code == 1
        assert out == ""
        assert err == "Error: Configuration key 'workspace_path' not found\n"

    def test_set_unknown_key(self, capsys):
        code, _, err = run(capsys, "config", "set", "colour", "red")

        assert code == 1
        assert "Unknown configuration key: colour" in err

    def test_show(self, capsys):
        code, out, _ = run(capsys, "config", "show")

        assert code == 0
        assert "theme: default" in out

    def test_explicit_config_file(self, capsys, tmp_path):
        path = tmp_path / "custom.json"

        run(capsys, "-c", str(path), "config", "set", "auto_save", "no")

        assert json.loads(path.read_text())["auto_save"] is False

    def test_init(self, capsys, tmp_path):
        workspace = tmp_path / "ws"

        code, out, _ = run(capsys, "init", str(workspace))

        assert code == 0
        assert (workspace / ".fust").is_dir()
        assert run(capsys, "config", "get", "workspace_path")[1].strip() == str(
            workspace
        )

    def test_invalid_log_level(self, capsys, monkeypatch):
        monkeypatch.setenv("FUST_LOG_LEVEL", "loud")

        code, _, err = run(capsys, "list")

        assert code == 1
        assert err.startswith("Error: Invalid log level")

    def test_corrupt_config_only_affects_config_commands(
        self, capsys, cli_env, temp_directory
    ):
        """Test that an unreadable config file does not stop listing directories."""
        config_file = cli_env / "config" / "config.json"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{not json")

        code, out, err = run(capsys, "fud", temp_directory)
        assert code == 0
        assert out.splitlines() == ["alpha", "beta"]
        assert err == ""

        code, _, err = run(capsys, "config", "show")
        assert code == 1
        assert err.startswith("Error: Cannot load configuration")
