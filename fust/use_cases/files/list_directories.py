"""
Use case for listing the subdirectories of a directory.
"""

import logging
from typing import Optional

from fust.entities.metadata import DirectoryMetadata
from fust.exceptions import FsError
from fust.ports.files.directory_repository_port import (
    DirectoryRepositoryPort,
    PathInput,
)


class ListDirectoriesUseCase:
    """Use case for listing the subdirectories of a directory."""

    def __init__(
        self,
        directory_repository: DirectoryRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            directory_repository: Any implementation of the directory listing port
            logger: Logger instance to use for logging
        """
        self._directory_repository = directory_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: PathInput) -> list[DirectoryMetadata]:
        """
        List the subdirectories of a directory.

        The repository result is returned as is, and its FsError is re-raised unchanged.

        Args:
            path: Path to the directory to list subdirectories from

        Returns:
            List of DirectoryMetadata values, in repository order

        Raises:
            FsError: If listing fails
        """
        try:
            self._logger.info(f"Listing directories in: {path}")
            directories = self._directory_repository.list_directories(path)
            self._logger.info(f"Found {len(directories)} directories")
            return directories
        except FsError:
            raise
        except OSError as e:
            self._logger.error(f"Error listing directories: {e}")
            raise FsError.from_os_error(
                e, f"Failed to list directories in {path}: {e}"
            ) from e
