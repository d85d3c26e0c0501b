from abc import ABC, abstractmethod
from typing import Optional


class GitServicePort(ABC):
    """Read-only access to the git state of a working tree."""

    @abstractmethod
    def is_git_repository(self, path: str) -> bool:
        pass

    @abstractmethod
    def get_current_branch(self, path: str) -> Optional[str]:
        """
        Return the checked-out branch name.

        Returns:
            Branch name, or None when HEAD is detached or path is not a repository
        """
        pass

    @abstractmethod
    def get_remote_url(self, path: str, remote: str = "origin") -> Optional[str]:
        pass
