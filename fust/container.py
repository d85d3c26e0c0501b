"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from fust.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fust.adapters.git.local_git_adapter import LocalGitAdapter
from fust.adapters.repositories.json_repositories import (
    JsonProjectRepository,
    JsonTaskRepository,
)
from fust.config.settings import Settings
from fust.ports.files.directory_repository_port import DirectoryRepositoryPort
from fust.ports.repositories.project_repository_port import ProjectRepositoryPort
from fust.ports.repositories.task_repository_port import TaskRepositoryPort
from fust.ports.services.git_service_port import GitServicePort
from fust.services.directory_service import DirectoryService
from fust.use_cases.files.list_directories import ListDirectoriesUseCase
from fust.use_cases.projects.project_use_case import ProjectUseCase
from fust.use_cases.tasks.task_use_case import TaskUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_directory_repository(self) -> DirectoryRepositoryPort:
        """
        Get directory repository adapter instance.

        Returns:
            DirectoryRepositoryPort implementation
        """
        if "directory_repository" not in self._instances:
            self._instances["directory_repository"] = LocalFileSystemAdapter(
                self._logger
            )
        return self._instances["directory_repository"]

    def get_directory_service(self) -> DirectoryService:
        if "directory_service" not in self._instances:
            self._instances["directory_service"] = DirectoryService(self._logger)
        return self._instances["directory_service"]

    def get_project_repository(self) -> ProjectRepositoryPort:
        if "project_repository" not in self._instances:
            self._instances["project_repository"] = JsonProjectRepository(
                self.settings.data_dir, self._logger
            )
        return self._instances["project_repository"]

    def get_task_repository(self) -> TaskRepositoryPort:
        if "task_repository" not in self._instances:
            self._instances["task_repository"] = JsonTaskRepository(
                self.settings.data_dir, self._logger
            )
        return self._instances["task_repository"]

    def get_git_service(self) -> GitServicePort:
        if "git_service" not in self._instances:
            self._instances["git_service"] = LocalGitAdapter(self._logger)
        return self._instances["git_service"]

    def get_list_directories_use_case(self) -> ListDirectoriesUseCase:
        """
        Get list directories use case with injected dependencies.

        Returns:
            Configured ListDirectoriesUseCase
        """
        if "list_directories_use_case" not in self._instances:
            self._instances["list_directories_use_case"] = ListDirectoriesUseCase(
                self.get_directory_repository(), self._logger
            )
        return self._instances["list_directories_use_case"]

    def get_project_use_case(self) -> ProjectUseCase:
        if "project_use_case" not in self._instances:
            self._instances["project_use_case"] = ProjectUseCase(
                self.get_project_repository(), self._logger
            )
        return self._instances["project_use_case"]

    def get_task_use_case(self) -> TaskUseCase:
        if "task_use_case" not in self._instances:
            self._instances["task_use_case"] = TaskUseCase(
                self.get_task_repository(), self._logger
            )
        return self._instances["task_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
