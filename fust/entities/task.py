"""
Task domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from fust.entities.project import ProjectId, utc_now


@dataclass(frozen=True)
class TaskId:
    """Task identifier."""

    value: str

    def __str__(self) -> str:
        return self.value


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    """Task priority, ordered from LOW to CRITICAL."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANKS[self]


_PRIORITY_RANKS = {
    TaskPriority.LOW: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.HIGH: 3,
    TaskPriority.CRITICAL: 4,
}


@dataclass
class Task:
    """
    A task represents a work item, optionally attached to a project.
    """

    id: TaskId
    title: str
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    project_id: Optional[ProjectId] = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def complete(self) -> None:
        now = utc_now()
        self.status = TaskStatus.COMPLETED
        self.completed_at = now
        self.updated_at = now

    def start(self) -> None:
        self.status = TaskStatus.IN_PROGRESS
        self.updated_at = utc_now()

    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)
            self.updated_at = utc_now()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.value,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "project_id": self.project_id.value if self.project_id else None,
            "tags": list(self.tags),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        created_at = datetime.fromisoformat(data["created_at"])
        updated_raw = data.get("updated_at")
        completed_raw = data.get("completed_at")
        project_raw = data.get("project_id")
        return cls(
            id=TaskId(data["id"]),
            title=data["title"],
            description=data.get("description"),
            status=TaskStatus(data.get("status", TaskStatus.TODO.value)),
            priority=TaskPriority(data.get("priority", TaskPriority.MEDIUM.value)),
            project_id=ProjectId(project_raw) if project_raw else None,
            tags=list(data.get("tags") or []),
            created_at=created_at,
            updated_at=datetime.fromisoformat(updated_raw) if updated_raw else created_at,
            completed_at=datetime.fromisoformat(completed_raw) if completed_raw else None,
        )
