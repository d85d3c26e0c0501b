"""
Project repository port interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from fust.entities.project import Project, ProjectId


class ProjectRepositoryPort(ABC):
    """Port interface for project persistence."""

    @abstractmethod
    def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        pass

    @abstractmethod
    def find_all(self) -> list[Project]:
        pass

    @abstractmethod
    def save(self, project: Project) -> None:
        """
        Insert or replace a project, keyed by its id.

        Raises:
            RepositoryError: If the store cannot be written
        """
        pass

    @abstractmethod
    def delete(self, project_id: ProjectId) -> bool:
        """
        Delete a project.

        Returns:
            True if a project was removed, False if none had that id
        """
        pass

    @abstractmethod
    def find_by_tag(self, tag: str) -> list[Project]:
        pass

    @abstractmethod
    def find_by_path(self, path: str) -> Optional[Project]:
        pass
