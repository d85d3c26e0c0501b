"""
Value objects for the domain.
"""

import os
from dataclasses import dataclass
from typing import Optional

from fust.exceptions import ValidationError

MAX_TAG_LENGTH = 50
MAX_PROJECT_NAME_LENGTH = 100
MAX_TASK_TITLE_LENGTH = 200


@dataclass(frozen=True)
class FilePath:
    """A non-empty filesystem path."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError("path", "File path cannot be empty")

    def file_name(self) -> Optional[str]:
        return os.path.basename(self.value.rstrip(os.sep)) or None

    def parent(self) -> Optional[str]:
        parent = os.path.dirname(self.value.rstrip(os.sep))
        return parent or None

    def exists(self) -> bool:
        return os.path.exists(self.value)

    def is_file(self) -> bool:
        return os.path.isfile(self.value)

    def is_dir(self) -> bool:
        return os.path.isdir(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """
    A normalized tag: trimmed, lower-cased, without spaces.

    Use ``Tag.parse`` to build one from user input.
    """

    value: str

    @classmethod
    def parse(cls, raw: str) -> "Tag":
        tag = raw.strip().lower()
        if not tag:
            raise ValidationError("tag", "Tag cannot be empty")
        if " " in tag:
            raise ValidationError("tag", "Tag cannot contain spaces")
        if len(tag) > MAX_TAG_LENGTH:
            raise ValidationError(
                "tag", f"Tag cannot be longer than {MAX_TAG_LENGTH} characters"
            )
        return cls(tag)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProjectName:
    value: str

    @classmethod
    def parse(cls, raw: str) -> "ProjectName":
        name = raw.strip()
        if not name:
            raise ValidationError("name", "Project name cannot be empty")
        if len(name) > MAX_PROJECT_NAME_LENGTH:
            raise ValidationError(
                "name",
                f"Project name cannot be longer than {MAX_PROJECT_NAME_LENGTH} characters",
            )
        return cls(name)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TaskTitle:
    value: str

    @classmethod
    def parse(cls, raw: str) -> "TaskTitle":
        title = raw.strip()
        if not title:
            raise ValidationError("title", "Task title cannot be empty")
        if len(title) > MAX_TASK_TITLE_LENGTH:
            raise ValidationError(
                "title",
                f"Task title cannot be longer than {MAX_TASK_TITLE_LENGTH} characters",
            )
        return cls(title)

    def __str__(self) -> str:
        return self.value
