"""
Custom exceptions for the application.
"""

import errno
from enum import Enum
from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FsErrorKind(str, Enum):
    """Closed set of filesystem failure kinds."""

    IO = "io"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    INVALID_PATH = "invalid_path"
    NOT_IMPLEMENTED = "not_implemented"


_ERRNO_KINDS: dict[int, FsErrorKind] = {
    errno.EACCES: FsErrorKind.PERMISSION_DENIED,
    errno.EPERM: FsErrorKind.PERMISSION_DENIED,
    errno.ENOENT: FsErrorKind.NOT_FOUND,
    errno.EINVAL: FsErrorKind.INVALID_PATH,
    errno.ENAMETOOLONG: FsErrorKind.INVALID_PATH,
}


class FsError(BaseAppError):
    """
    Filesystem error carrying exactly one kind and a descriptive message.

    Callers match on ``kind``; the message is free text for humans.
    """

    def __init__(self, kind: FsErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def io(cls, message: str) -> "FsError":
        return cls(FsErrorKind.IO, message)

    @classmethod
    def permission_denied(cls, message: str) -> "FsError":
        return cls(FsErrorKind.PERMISSION_DENIED, message)

    @classmethod
    def not_found(cls, message: str) -> "FsError":
        return cls(FsErrorKind.NOT_FOUND, message)

    @classmethod
    def invalid_path(cls, message: str) -> "FsError":
        return cls(FsErrorKind.INVALID_PATH, message)

    @classmethod
    def not_implemented(cls, message: str) -> "FsError":
        return cls(FsErrorKind.NOT_IMPLEMENTED, message)

    @staticmethod
    def classify(exc: OSError) -> FsErrorKind:
        """
        Map an OSError to a kind using its errno only.

        Args:
            exc: The error raised by the operating system

        Returns:
            The matching kind, IO when the errno is not recognised
        """
        if exc.errno is None:
            return FsErrorKind.IO
        return _ERRNO_KINDS.get(exc.errno, FsErrorKind.IO)

    @classmethod
    def from_os_error(cls, exc: OSError, message: Optional[str] = None) -> "FsError":
        """Build an FsError for an OSError, keeping the OS text when no message is given."""
        return cls(cls.classify(exc), message or str(exc))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FsError):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"FsError(kind={self.kind.name}, message={self.message!r})"


class DomainError(BaseAppError):
    """Exception raised when a business rule is violated."""

    pass


class ValidationError(DomainError):
    """Exception raised when a field fails validation."""

    def __init__(self, field: str, message: str):
        super().__init__(f"Validation error: {field} - {message}")
        self.field = field
        self.message = message


class EntityNotFoundError(DomainError):
    """Exception raised when an entity lookup finds nothing."""

    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(f"Entity not found: {entity_type} with id {entity_id}")
        self.entity_type = entity_type
        self.entity_id = entity_id


class RepositoryError(BaseAppError):
    """Exception raised for project/task storage errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class GitError(BaseAppError):
    """Exception raised for git-related errors."""

    pass
