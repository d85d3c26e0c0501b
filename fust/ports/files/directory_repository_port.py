"""
Directory repository port interface defining the contract for directory listing.
"""

from abc import ABC, abstractmethod
from os import PathLike
from typing import Union

from fust.entities.metadata import DirectoryMetadata

PathInput = Union[str, PathLike]


class DirectoryRepositoryPort(ABC):
    """Port interface for directory listing operations."""

    @abstractmethod
    def list_directories(self, directory: PathInput) -> list[DirectoryMetadata]:
        """
        List the immediate subdirectories of a directory.

        The order is decided by the implementation but is stable for a single call.

        Args:
            directory: Path of the directory to list subdirectories from

        Returns:
            List of DirectoryMetadata values

        Raises:
            FsError: If listing fails
        """
        pass
