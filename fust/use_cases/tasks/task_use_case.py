"""
Use case for managing tasks.
"""

import logging
import uuid
from typing import Optional

from fust.entities.project import ProjectId
from fust.entities.task import Task, TaskId, TaskPriority, TaskStatus
from fust.entities.value_objects import TaskTitle
from fust.exceptions import DomainError, EntityNotFoundError
from fust.ports.repositories.task_repository_port import TaskRepositoryPort
from fust.services.domain_services import TaskService


def _by_priority(tasks: list[Task]) -> list[Task]:
    """Highest priority first, oldest first within a priority."""
    return sorted(
        tasks, key=lambda t: (-TaskService.calculate_priority_score(t), t.created_at)
    )


class TaskUseCase:
    """Create, list and move tasks through their lifecycle."""

    def __init__(
        self,
        task_repository: TaskRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._task_repository = task_repository
        self._logger = logger or logging.getLogger(__name__)

    def create_task(
        self,
        title: str,
        description: Optional[str] = None,
        priority: TaskPriority = TaskPriority.MEDIUM,
        project_id: Optional[ProjectId] = None,
    ) -> Task:
        """
        Create and store a new task in the TODO state.

        Raises:
            ValidationError: If the title is invalid
        """
        task = Task(
            id=TaskId(str(uuid.uuid4())),
            title=TaskTitle.parse(title).value,
            description=description or None,
            priority=priority,
            project_id=project_id,
        )
        TaskService.validate_task(task)
        self._task_repository.save(task)
        self._logger.info(f"Created task {task.title} ({task.id})")
        return task

    def get_task(self, task_id: TaskId) -> Optional[Task]:
        return self._task_repository.find_by_id(task_id)

    def list_tasks(self, status: Optional[TaskStatus] = None) -> list[Task]:
        """List tasks, highest priority first, optionally filtered by status."""
        if status is not None:
            tasks = self._task_repository.find_by_status(status)
        else:
            tasks = self._task_repository.find_all()
        return _by_priority(tasks)

    def resolve_task(self, id_or_prefix: str) -> Task:
        """
        Find a task by full id or by an unambiguous id prefix.

        Raises:
            EntityNotFoundError: If no task matches
            DomainError: If the prefix matches several tasks
        """
        task = self._task_repository.find_by_id(TaskId(id_or_prefix))
        if task is not None:
            return task
        matches = [
            t
            for t in self._task_repository.find_all()
            if id_or_prefix and t.id.value.startswith(id_or_prefix)
        ]
        if not matches:
            raise EntityNotFoundError("Task", id_or_prefix)
        if len(matches) > 1:
            raise DomainError(f"Task id prefix is ambiguous: {id_or_prefix}")
        return matches[0]

    def _require_task(self, task_id: TaskId) -> Task:
        task = self._task_repository.find_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("Task", task_id.value)
        return task

    def complete_task(self, task_id: TaskId) -> Task:
        task = self._require_task(task_id)
        if not TaskService.can_complete_task(task):
            raise DomainError("Task cannot be completed")
        task.complete()
        self._task_repository.save(task)
        self._logger.info(f"Completed task {task_id}")
        return task

    def start_task(self, task_id: TaskId) -> Task:
        task = self._require_task(task_id)
        if not TaskService.can_start_task(task):
            raise DomainError("Task cannot be started")
        task.start()
        self._task_repository.save(task)
        self._logger.info(f"Started task {task_id}")
        return task

    def find_tasks_by_project(self, project_id: ProjectId) -> list[Task]:
        return _by_priority(self._task_repository.find_by_project(project_id))
