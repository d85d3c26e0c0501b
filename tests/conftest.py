"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from fust.config.settings import Settings
from fust.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory tree for testing directory operations.

    Layout:
        alpha/            (contains nested/ and a file)
        beta/
        notes.txt
        run.sh            (mode 0o755)

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        alpha = os.path.join(temp_dir, "alpha")
        os.makedirs(os.path.join(alpha, "nested"))
        with open(os.path.join(alpha, "inside.txt"), "w") as f:
            f.write("inside alpha")

        os.makedirs(os.path.join(temp_dir, "beta"))

        with open(os.path.join(temp_dir, "notes.txt"), "w") as f:
            f.write("This is a test file.")

        script = os.path.join(temp_dir, "run.sh")
        with open(script, "w") as f:
            f.write("#!/bin/sh\necho hi\n")
        os.chmod(script, 0o755)

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """
    Point configuration and data files at a temporary directory.

    Returns:
        The temporary directory holding config.json and the data directory
    """
    monkeypatch.setenv("FUST_CONFIG_PATH", str(tmp_path / "config" / "config.json"))
    monkeypatch.setenv("FUST_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("FUST_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def dependency_container(isolated_env, mock_logger):
    """
    Create a dependency container with isolated storage for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(Settings())
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
