"""
JSON file repositories for projects and tasks.

Each store is a single JSON object mapping id -> record, loaded and written
back whole on every operation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from typing_extensions import override

from fust.entities.project import Project, ProjectId
from fust.entities.task import Task, TaskId, TaskPriority, TaskStatus
from fust.exceptions import RepositoryError
from fust.ports.repositories.project_repository_port import ProjectRepositoryPort
from fust.ports.repositories.task_repository_port import TaskRepositoryPort


class JsonFileStore:
    """Load/save a whole JSON object from one file."""

    def __init__(self, file_path: Path, logger: Optional[logging.Logger] = None):
        self.file_path = file_path
        self._logger = logger or logging.getLogger(__name__)

    def load(self) -> dict[str, dict[str, Any]]:
        if not self.file_path.exists():
            return {}
        try:
            data = json.loads(self.file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise RepositoryError(f"Corrupt data file {self.file_path}: {e}") from e
        except OSError as e:
            raise RepositoryError(f"Cannot read {self.file_path}: {e}") from e
        if not isinstance(data, dict):
            raise RepositoryError(
                f"Corrupt data file {self.file_path}: expected a JSON object"
            )
        return data

    def save(self, data: dict[str, dict[str, Any]]) -> None:
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(
                json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
            )
        except OSError as e:
            raise RepositoryError(f"Cannot write {self.file_path}: {e}") from e
        self._logger.debug(f"Wrote {len(data)} records to {self.file_path}")


class JsonProjectRepository(ProjectRepositoryPort):
    """Projects stored in <data_dir>/projects.json."""

    def __init__(
        self, data_dir: Union[str, Path], logger: Optional[logging.Logger] = None
    ):
        self._store = JsonFileStore(Path(data_dir) / "projects.json", logger)

    def _load(self) -> dict[str, Project]:
        try:
            return {
                key: Project.from_dict(record)
                for key, record in self._store.load().items()
            }
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(f"Invalid project record: {e}") from e

    def _save(self, projects: dict[str, Project]) -> None:
        self._store.save({key: p.to_dict() for key, p in projects.items()})

    @override
    def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        return self._load().get(project_id.value)

    @override
    def find_all(self) -> list[Project]:
        return list(self._load().values())

    @override
    def save(self, project: Project) -> None:
        projects = self._load()
        projects[project.id.value] = project
        self._save(projects)

    @override
    def delete(self, project_id: ProjectId) -> bool:
        projects = self._load()
        if projects.pop(project_id.value, None) is None:
            return False
        self._save(projects)
        return True

    @override
    def find_by_tag(self, tag: str) -> list[Project]:
        return [p for p in self._load().values() if tag in p.tags]

    @override
    def find_by_path(self, path: str) -> Optional[Project]:
        return next((p for p in self._load().values() if p.path == path), None)


class JsonTaskRepository(TaskRepositoryPort):
    """Tasks stored in <data_dir>/tasks.json."""

    def __init__(
        self, data_dir: Union[str, Path], logger: Optional[logging.Logger] = None
    ):
        self._store = JsonFileStore(Path(data_dir) / "tasks.json", logger)

    def _load(self) -> dict[str, Task]:
        try:
            return {
                key: Task.from_dict(record) for key, record in self._store.load().items()
            }
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(f"Invalid task record: {e}") from e

    def _save(self, tasks: dict[str, Task]) -> None:
        self._store.save({key: t.to_dict() for key, t in tasks.items()})

    @override
    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        return self._load().get(task_id.value)

    @override
    def find_all(self) -> list[Task]:
        return list(self._load().values())

    @override
    def find_by_project(self, project_id: ProjectId) -> list[Task]:
        return [t for t in self._load().values() if t.project_id == project_id]

    @override
    def save(self, task: Task) -> None:
        tasks = self._load()
        tasks[task.id.value] = task
        self._save(tasks)

    @override
    def delete(self, task_id: TaskId) -> bool:
        tasks = self._load()
        if tasks.pop(task_id.value, None) is None:
            return False
        self._save(tasks)
        return True

    @override
    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self._load().values() if t.status == status]

    @override
    def find_by_priority(self, priority: TaskPriority) -> list[Task]:
        return [t for t in self._load().values() if t.priority == priority]
