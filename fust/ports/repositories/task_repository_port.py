"""
Task repository port interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from fust.entities.project import ProjectId
from fust.entities.task import Task, TaskId, TaskPriority, TaskStatus


class TaskRepositoryPort(ABC):
    """Port interface for task persistence."""

    @abstractmethod
    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        pass

    @abstractmethod
    def find_all(self) -> list[Task]:
        pass

    @abstractmethod
    def find_by_project(self, project_id: ProjectId) -> list[Task]:
        pass

    @abstractmethod
    def save(self, task: Task) -> None:
        pass

    @abstractmethod
    def delete(self, task_id: TaskId) -> bool:
        pass

    @abstractmethod
    def find_by_status(self, status: TaskStatus) -> list[Task]:
        pass

    @abstractmethod
    def find_by_priority(self, priority: TaskPriority) -> list[Task]:
        pass
