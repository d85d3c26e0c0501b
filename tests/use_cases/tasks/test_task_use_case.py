"""
Tests for the TaskUseCase.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from fust.adapters.repositories.json_repositories import JsonTaskRepository
from fust.entities.project import ProjectId
from fust.entities.task import Task, TaskId, TaskPriority, TaskStatus
from fust.exceptions import DomainError, EntityNotFoundError, ValidationError
from fust.ports.repositories.task_repository_port import TaskRepositoryPort
from fust.services.domain_services import TaskService
from fust.use_cases.tasks.task_use_case import TaskUseCase


@pytest.fixture
def use_case(tmp_path, mock_logger):
    return TaskUseCase(JsonTaskRepository(tmp_path), mock_logger)


class TestTaskUseCase:
    """Test cases for the TaskUseCase."""

    def test_create_task(self, use_case):
        task = use_case.create_task(
            " Write docs ", priority=TaskPriority.HIGH, project_id=ProjectId("p1")
        )

        assert task.title == "Write docs"
        assert task.status == TaskStatus.TODO
        assert use_case.get_task(task.id) == task
        assert use_case.find_tasks_by_project(ProjectId("p1")) == [task]

    def test_create_task_empty_title(self, use_case):
        with pytest.raises(ValidationError):
            use_case.create_task("  ")

    def test_list_tasks_by_priority_then_age(self, mock_logger):
        """Test that higher priorities come first and ties keep creation order."""
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        tasks = [
            Task(
                id=TaskId("a"),
                title="low",
                priority=TaskPriority.LOW,
                created_at=base,
            ),
            Task(
                id=TaskId("b"),
                title="medium-new",
                created_at=base + timedelta(hours=2),
            ),
            Task(
                id=TaskId("c"),
                title="critical",
                priority=TaskPriority.CRITICAL,
                created_at=base + timedelta(hours=3),
            ),
            Task(
                id=TaskId("d"),
                title="medium-old",
                created_at=base + timedelta(hours=1),
            ),
        ]
        repository = MagicMock(spec=TaskRepositoryPort)
        repository.find_all.return_value = tasks

        result = TaskUseCase(repository, mock_logger).list_tasks()

        assert [t.title for t in result] == [
            "critical",
            "medium-old",
            "medium-new",
            "low",
        ]

    def test_project_tasks_ordered_by_priority_score(self, use_case):
        """Test that project listings use the priority score as sort key."""
        project_id = ProjectId("p1")
        use_case.create_task("minor", priority=TaskPriority.LOW, project_id=project_id)
        use_case.create_task(
            "urgent", priority=TaskPriority.CRITICAL, project_id=project_id
        )
        use_case.create_task("elsewhere", priority=TaskPriority.HIGH)

        with patch(
            "fust.use_cases.tasks.task_use_case.TaskService.calculate_priority_score",
            wraps=TaskService.calculate_priority_score,
        ) as score:
            tasks = use_case.find_tasks_by_project(project_id)

        assert [t.title for t in tasks] == ["urgent", "minor"]
        assert score.call_count == 2

    def test_list_tasks_by_status(self, use_case):
        first = use_case.create_task("One")
        use_case.create_task("Two")
        use_case.complete_task(first.id)

        completed = use_case.list_tasks(TaskStatus.COMPLETED)

        assert [t.title for t in completed] == ["One"]

    def test_lifecycle(self, use_case):
        task = use_case.create_task("Ship")

        started = use_case.start_task(task.id)
        assert started.status == TaskStatus.IN_PROGRESS

        completed = use_case.complete_task(task.id)
        assert completed.status == TaskStatus.COMPLETED
        assert use_case.get_task(task.id).completed_at is not None

    def test_cannot_start_twice(self, use_case):
        task = use_case.create_task("Ship")
        use_case.start_task(task.id)

        with pytest.raises(DomainError, match="Task cannot be started"):
            use_case.start_task(task.id)

    def test_cannot_complete_twice(self, use_case):
        task = use_case.create_task("Ship")
        use_case.complete_task(task.id)

        with pytest.raises(DomainError, match="Task cannot be completed"):
            use_case.complete_task(task.id)

    def test_missing_task(self, use_case):
        with pytest.raises(EntityNotFoundError):
            use_case.start_task(TaskId("missing"))


class TestResolveTask:
    """Test cases for TaskUseCase.resolve_task."""

    @pytest.fixture
    def use_case(self, mock_logger):
        repository = MagicMock(spec=TaskRepositoryPort)
        repository.find_by_id.return_value = None
        repository.find_all.return_value = [
            Task(id=TaskId("abc123"), title="one"),
            Task(id=TaskId("abd456"), title="two"),
        ]
        return TaskUseCase(repository, mock_logger)

    def test_unique_prefix(self, use_case):
        assert use_case.resolve_task("abc").title == "one"

    def test_ambiguous_prefix(self, use_case):
        with pytest.raises(DomainError, match="ambiguous"):
            use_case.resolve_task("ab")

    def test_no_match(self, use_case):
        with pytest.raises(EntityNotFoundError):
            use_case.resolve_task("zzz")

    def test_empty_prefix_matches_nothing(self, use_case):
        with pytest.raises(EntityNotFoundError):
            use_case.resolve_task("")
