"""
Read-only git adapter backed by the git command line.
"""

import logging
import os
import shutil
import subprocess
from typing import Optional

from typing_extensions import override

from fust.exceptions import GitError
from fust.ports.services.git_service_port import GitServicePort

GIT_TIMEOUT_SECONDS = 5


class LocalGitAdapter(GitServicePort):
    """Query git through `git -C <path> ...` subprocess calls."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def _require_git_available(self) -> None:
        if shutil.which("git") is None:
            raise GitError("git executable not found in PATH")

    def _git(self, path: str, *args: str) -> Optional[str]:
        """
        Run a git command and return its stripped stdout.

        Returns:
            Output text, or None when git exits non-zero

        Raises:
            GitError: If git is missing or the call times out
        """
        self._require_git_available()
        try:
            result = subprocess.run(
                ["git", "-C", path, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=GIT_TIMEOUT_SECONDS,
            )
        except subprocess.TimeoutExpired:
            raise GitError(f"git {args[0]} timed out")
        except OSError as e:
            raise GitError(f"Failed to run git: {e}")
        if result.returncode != 0:
            self._logger.debug(
                f"git {' '.join(args)} failed in {path}: {result.stderr.strip()}"
            )
            return None
        return result.stdout.strip()

    @override
    def is_git_repository(self, path: str) -> bool:
        if os.path.isdir(os.path.join(path, ".git")):
            return True
        if not os.path.isdir(path):
            return False
        return self._git(path, "rev-parse", "--is-inside-work-tree") == "true"

    @override
    def get_current_branch(self, path: str) -> Optional[str]:
        branch = self._git(path, "rev-parse", "--abbrev-ref", "HEAD")
        if not branch or branch == "HEAD":
            return None
        return branch

    @override
    def get_remote_url(self, path: str, remote: str = "origin") -> Optional[str]:
        url = self._git(path, "remote", "get-url", remote)
        return url or None
