"""
Project domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProjectId:
    """Project identifier."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class Project:
    """
    A project represents a workspace or repository tracked by fust.
    """

    id: ProjectId
    name: str
    path: str
    description: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def add_tag(self, tag: str) -> None:
        """Add a tag; adding an existing tag is a no-op."""
        if tag not in self.tags:
            self.tags.append(tag)
            self.updated_at = utc_now()

    def remove_tag(self, tag: str) -> bool:
        """
        Remove a tag.

        Returns:
            True if the tag was present, False otherwise
        """
        if tag not in self.tags:
            return False
        self.tags.remove(tag)
        self.updated_at = utc_now()
        return True

    def set_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value
        self.updated_at = utc_now()

    def get_metadata(self, key: str) -> Optional[str]:
        return self.metadata.get(key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "path": self.path,
            "description": self.description,
            "tags": list(self.tags),
            "metadata": dict(self.metadata),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        created_at = datetime.fromisoformat(data["created_at"])
        updated_raw = data.get("updated_at")
        return cls(
            id=ProjectId(data["id"]),
            name=data["name"],
            path=data["path"],
            description=data.get("description"),
            tags=list(data.get("tags") or []),
            metadata=dict(data.get("metadata") or {}),
            created_at=created_at,
            updated_at=datetime.fromisoformat(updated_raw) if updated_raw else created_at,
        )
