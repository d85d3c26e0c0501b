"""
Directory service performing validated create/rename/delete operations.

Every failure is raised as an FsError; no raw OSError leaves this module.
The service holds no mutable state, so one instance can be shared freely.
Existence pre-checks and the OS call are not atomic together: when another
process changes the tree in between, the OS error is classified instead.
"""

import asyncio
import errno
import logging
import os
import shutil
from typing import Optional

from fust.exceptions import FsError
from fust.ports.files.directory_repository_port import PathInput

_INVALID_INPUT_ERRNOS = {errno.EINVAL, errno.ENAMETOOLONG}
_DESTINATION_EXISTS_ERRNOS = {errno.EEXIST, errno.ENOTEMPTY}


def _validate_path(path: PathInput) -> str:
    """
    Return the string form of a path, rejecting NUL bytes.

    Raises:
        FsError: INVALID_PATH if the path contains a NUL byte
    """
    text = os.fsdecode(path)
    if "\0" in text:
        raise FsError.invalid_path(f"Path contains invalid character: {text!r}")
    return text


class DirectoryService:
    """Filesystem operations on directory trees."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the service.

        Args:
            logger: Logger instance to use for logging. If None, a module logger is used.
        """
        self._logger = logger or logging.getLogger(__name__)

    def create(self, path: PathInput) -> None:
        """
        Create a directory and all missing parent directories.

        Creating a directory that already exists succeeds, and an empty path
        has nothing to create.

        Args:
            path: The directory to create

        Raises:
            FsError: INVALID_PATH, PERMISSION_DENIED, NOT_FOUND or IO
        """
        target = _validate_path(path)
        if not target:
            self._logger.info("Empty path given, nothing to create")
            return
        self._logger.info(f"Creating directory: {target}")

        try:
            os.makedirs(target, exist_ok=True)
        except PermissionError as e:
            self._logger.error(f"Failed to create directory {target}: {e}")
            raise FsError.permission_denied(
                f"Permission denied creating directory: {target}"
            ) from e
        except FileNotFoundError as e:
            self._logger.error(f"Failed to create directory {target}: {e}")
            raise FsError.not_found(f"Parent directory not found: {target}") from e
        except OSError as e:
            self._logger.error(f"Failed to create directory {target}: {e}")
            if e.errno in _INVALID_INPUT_ERRNOS:
                raise FsError.invalid_path(f"Invalid path: {target}") from e
            raise FsError.io(f"IO error creating directory {target}: {e}") from e

        self._logger.info(f"Successfully created directory: {target}")

    def rename(self, old_path: PathInput, new_path: PathInput) -> None:
        """
        Rename a directory.

        The destination must not exist; a collision is reported as IO so callers
        can tell a fixable conflict apart from access or existence problems.

        Args:
            old_path: The current path of the directory
            new_path: The new path for the directory

        Raises:
            FsError: INVALID_PATH, NOT_FOUND, PERMISSION_DENIED or IO
        """
        source = _validate_path(old_path)
        destination = _validate_path(new_path)
        self._logger.info(f"Renaming directory from {source} to {destination}")

        if not os.path.lexists(source):
            raise FsError.not_found(f"Directory not found: {source}")
        if os.path.lexists(destination):
            raise FsError.io(f"Destination already exists: {destination}")

        try:
            os.rename(source, destination)
        except PermissionError as e:
            self._logger.error(
                f"Failed to rename directory from {source} to {destination}: {e}"
            )
            raise FsError.permission_denied(
                f"Permission denied renaming directory: {source}"
            ) from e
        except FileNotFoundError as e:
            self._logger.error(
                f"Failed to rename directory from {source} to {destination}: {e}"
            )
            raise FsError.not_found(f"Directory not found: {source}") from e
        except OSError as e:
            self._logger.error(
                f"Failed to rename directory from {source} to {destination}: {e}"
            )
            if e.errno in _DESTINATION_EXISTS_ERRNOS:
                raise FsError.io(f"Destination already exists: {destination}") from e
            raise FsError.io(
                f"IO error renaming directory {source} to {destination}: {e}"
            ) from e

        self._logger.info(
            f"Successfully renamed directory from {source} to {destination}"
        )

    def delete(self, path: PathInput) -> None:
        """
        Delete a directory and everything below it.

        Unlike create, deleting a missing directory is an error.

        Args:
            path: The directory to delete

        Raises:
            FsError: INVALID_PATH, NOT_FOUND, PERMISSION_DENIED or IO
        """
        target = _validate_path(path)
        self._logger.info(f"Deleting directory: {target}")

        if not os.path.lexists(target):
            raise FsError.not_found(f"Directory not found: {target}")

        try:
            shutil.rmtree(target)
        except PermissionError as e:
            self._logger.error(f"Failed to delete directory {target}: {e}")
            raise FsError.permission_denied(
                f"Permission denied deleting directory: {target}"
            ) from e
        except FileNotFoundError as e:
            self._logger.error(f"Failed to delete directory {target}: {e}")
            raise FsError.not_found(f"Directory not found: {target}") from e
        except OSError as e:
            self._logger.error(f"Failed to delete directory {target}: {e}")
            raise FsError.io(f"IO error deleting directory {target}: {e}") from e

        self._logger.info(f"Successfully deleted directory: {target}")


class AsyncDirectoryService:
    """
    Awaitable facade over DirectoryService.

    Each call runs on a worker thread and resolves to exactly one result.
    Cancelling the awaiting task does not stop an OS call already issued.
    """

    def __init__(self, service: Optional[DirectoryService] = None):
        self._service = service or DirectoryService()

    async def create(self, path: PathInput) -> None:
        await asyncio.to_thread(self._service.create, path)

    async def rename(self, old_path: PathInput, new_path: PathInput) -> None:
        await asyncio.to_thread(self._service.rename, old_path, new_path)

    async def delete(self, path: PathInput) -> None:
        await asyncio.to_thread(self._service.delete, path)
