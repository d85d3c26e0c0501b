"""
File and directory metadata value objects.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePath
from typing import Optional


@dataclass(frozen=True)
class FileMetadata:
    """
    Immutable description of a file as observed on disk.

    Attributes:
        path: File path
        size: Size in bytes
        permissions: Mode bitmask (e.g. 0o644)
        modified: Last modification time
    """

    path: PurePath
    size: int
    permissions: int
    modified: datetime

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")
        if not 0 <= self.permissions <= 0xFFFFFFFF:
            raise ValueError(f"Permissions out of range: {self.permissions}")

    def extension(self) -> Optional[str]:
        suffix = self.path.suffix
        return suffix[1:] if suffix else None

    def is_executable(self) -> bool:
        return self.permissions & 0o111 != 0

    def is_readable(self) -> bool:
        return self.permissions & 0o444 != 0

    def is_writable(self) -> bool:
        return self.permissions & 0o222 != 0


@dataclass(frozen=True)
class DirectoryMetadata:
    """
    Immutable description of a directory.

    Attributes:
        path: Directory path
        created: Creation time
    """

    path: PurePath
    created: datetime

    def name(self) -> Optional[str]:
        """Last path component, None for a root path or a non-UTF-8 name."""
        name = self.path.name
        if not name:
            return None
        try:
            # Undecodable bytes come back from the OS as lone surrogates
            name.encode("utf-8")
        except UnicodeEncodeError:
            return None
        return name

    def parent(self) -> Optional[PurePath]:
        """Path without its last component, None for a root path."""
        if not self.path.name:
            return None
        return self.path.parent
