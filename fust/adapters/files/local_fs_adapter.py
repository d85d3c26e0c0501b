"""
Local file system adapter implementation for directory and file listing.
"""

import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from typing_extensions import override

from fust.entities.metadata import DirectoryMetadata, FileMetadata
from fust.exceptions import FsError
from fust.ports.files.directory_repository_port import (
    DirectoryRepositoryPort,
    PathInput,
)
from fust.ports.files.file_repository_port import FileRepositoryPort


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _creation_time(st: os.stat_result) -> datetime:
    """Birth time where the platform reports it, inode change time otherwise."""
    birth = getattr(st, "st_birthtime", None)
    return _timestamp(birth if birth is not None else st.st_ctime)


class LocalFileSystemAdapter(DirectoryRepositoryPort, FileRepositoryPort):
    """Local file system implementation of the directory and file ports."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: PathInput) -> Path:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Returns:
            The directory as a Path

        Raises:
            FsError: If the path is malformed, does not exist or is not a directory
        """
        text = os.fsdecode(directory)
        if "\0" in text:
            raise FsError.invalid_path(f"Path contains invalid character: {text!r}")

        path = Path(text)
        if not path.exists():
            raise FsError.not_found(f"Directory does not exist: {text}")

        if not path.is_dir():
            raise FsError.io(f"Path is not a directory: {text}")

        return path

    def _scan(self, path: Path) -> list[os.DirEntry]:
        """Read the entries of a directory sorted by name."""
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            raise FsError.from_os_error(e, f"Failed to read directory {path}: {e}") from e
        return sorted(entries, key=lambda entry: entry.name)

    @override
    def list_directories(self, directory: PathInput) -> list[DirectoryMetadata]:
        """
        List the immediate subdirectories of a directory, sorted by name.

        Symbolic links to directories are not followed and not listed.

        Args:
            directory: Path to the directory to list subdirectories from

        Returns:
            List of DirectoryMetadata values

        Raises:
            FsError: If listing fails
        """
        path = self._validate_directory(directory)
        self._logger.debug(f"Listing directories in: {path}")

        directories: list[DirectoryMetadata] = []
        for entry in self._scan(path):
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
                st = entry.stat(follow_symlinks=False)
            except FileNotFoundError:
                # Removed between scandir and stat
                self._logger.debug(f"Entry vanished while listing: {entry.path}")
                continue
            except OSError as e:
                raise FsError.from_os_error(
                    e, f"Cannot read metadata of {entry.path}: {e}"
                ) from e
            directories.append(DirectoryMetadata(Path(entry.path), _creation_time(st)))

        self._logger.debug(f"Found {len(directories)} directories in {path}")
        return directories

    @override
    def list_files(self, directory: PathInput) -> list[FileMetadata]:
        """
        List the regular files directly inside a directory, sorted by name.

        Args:
            directory: Path to the directory to list files from

        Returns:
            List of FileMetadata values

        Raises:
            FsError: If listing fails
        """
        path = self._validate_directory(directory)
        self._logger.debug(f"Listing files in: {path}")

        files: list[FileMetadata] = []
        for entry in self._scan(path):
            try:
                if not entry.is_file(follow_symlinks=False):
                    continue
                st = entry.stat(follow_symlinks=False)
            except FileNotFoundError:
                self._logger.debug(f"Entry vanished while listing: {entry.path}")
                continue
            except OSError as e:
                raise FsError.from_os_error(
                    e, f"Cannot read metadata of {entry.path}: {e}"
                ) from e
            files.append(
                FileMetadata(
                    path=Path(entry.path),
                    size=st.st_size,
                    permissions=stat.S_IMODE(st.st_mode),
                    modified=_timestamp(st.st_mtime),
                )
            )

        self._logger.debug(f"Found {len(files)} files in {path}")
        return files
