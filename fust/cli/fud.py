"""
The `fud` command: print the subdirectories of a path, one name per line.
"""

import logging
import sys
from typing import Optional, TextIO

from fust.exceptions import FsError, FsErrorKind
from fust.use_cases.files.list_directories import ListDirectoriesUseCase

logger = logging.getLogger(__name__)

DEFAULT_PATH = "."
UNKNOWN_NAME = "unknown"

_ERROR_PREFIXES: dict[FsErrorKind, str] = {
    FsErrorKind.NOT_FOUND: "Path not found",
    FsErrorKind.PERMISSION_DENIED: "Permission denied",
    FsErrorKind.NOT_IMPLEMENTED: "Feature not implemented",
    FsErrorKind.IO: "IO error",
    FsErrorKind.INVALID_PATH: "Invalid path",
}


def format_fs_error(error: FsError) -> str:
    """Render an FsError as the single user-facing line for its kind."""
    return f"{_ERROR_PREFIXES[error.kind]}: {error.message}"


class FudCommand:
    """Binds a directory listing use case to terminal output."""

    def __init__(self, use_case: ListDirectoriesUseCase):
        self._use_case = use_case

    def execute(self, path: Optional[str] = None, out: Optional[TextIO] = None) -> None:
        """
        List directories under path (default ".") and print their names.

        Raises:
            FsError: If listing fails; nothing is printed in that case
        """
        target = path or DEFAULT_PATH
        stream = out or sys.stdout
        logger.debug(f"Executing fud command for path: {target}")

        directories = self._use_case.execute(target)
        for directory in directories:
            print(directory.name() or UNKNOWN_NAME, file=stream)

        logger.debug("fud command completed successfully")

    def run(
        self,
        path: Optional[str] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> int:
        """
        Execute and translate failures into one stderr line and an exit code.

        Returns:
            0 on success, 1 on failure
        """
        try:
            self.execute(path, out=out)
        except FsError as e:
            logger.debug(f"fud failed: {e!r}")
            print(format_fs_error(e), file=err or sys.stderr)
            return 1
        return 0
