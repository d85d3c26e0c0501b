"""
File repository port interface defining the contract for file listing.
"""

from abc import ABC, abstractmethod

from fust.entities.metadata import FileMetadata
from fust.ports.files.directory_repository_port import PathInput


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_files(self, directory: PathInput) -> list[FileMetadata]:
        """
        List the regular files directly inside a directory.

        Args:
            directory: Path to the directory to list files from

        Returns:
            List of FileMetadata values

        Raises:
            FsError: If listing fails
        """
        pass
