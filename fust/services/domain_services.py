"""
Domain services holding the business rules for projects, tasks and workspaces.
"""

import os

from fust.entities.project import Project
from fust.entities.task import Task, TaskStatus
from fust.exceptions import ValidationError


class ProjectService:
    """Business rules for projects."""

    @staticmethod
    def validate_project(project: Project) -> None:
        """
        Validate a project.

        Raises:
            ValidationError: If the name or path is empty
        """
        if not project.name:
            raise ValidationError("name", "Project name cannot be empty")
        if not project.path:
            raise ValidationError("path", "Project path cannot be empty")

    @staticmethod
    def can_delete_project(project: Project) -> bool:
        # Tasks reference projects loosely; deleting one leaves its tasks unattached.
        return True


class TaskService:
    """Business rules for tasks."""

    @staticmethod
    def validate_task(task: Task) -> None:
        if not task.title:
            raise ValidationError("title", "Task title cannot be empty")

    @staticmethod
    def can_complete_task(task: Task) -> bool:
        return task.status in (TaskStatus.TODO, TaskStatus.IN_PROGRESS)

    @staticmethod
    def can_start_task(task: Task) -> bool:
        return task.status == TaskStatus.TODO

    @staticmethod
    def calculate_priority_score(task: Task) -> int:
        return task.priority.rank


class WorkspaceService:
    """Checks on workspace directories."""

    @staticmethod
    def validate_workspace_path(path: str) -> None:
        """
        Validate that a workspace path points at an existing directory.

        Raises:
            ValidationError: If the path is empty, missing or not a directory
        """
        if not path:
            raise ValidationError("path", "Workspace path cannot be empty")
        if not os.path.exists(path):
            raise ValidationError("path", "Workspace path does not exist")
        if not os.path.isdir(path):
            raise ValidationError("path", "Workspace path must be a directory")

    @staticmethod
    def is_git_repository(path: str) -> bool:
        return os.path.isdir(os.path.join(path, ".git"))
