"""Shared data types for fileutil."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeVar, cast

__all__ = [
    "DirectoryCreationError",
    "FileUtilError",
    "MkdirErrorKind",
    "MkdirResult",
    "PathAlreadyExistsError",
]

T = TypeVar("T")


class MkdirErrorKind(Enum):
    """Reasons a directory creation can fail."""

    ALREADY_EXISTS = "already_exists"
    CREATION_FAILED = "creation_failed"


class FileUtilError(Exception):
    """Base error for fileutil operations."""

    kind: MkdirErrorKind | None = None

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class PathAlreadyExistsError(FileUtilError):
    """The target path is already occupied by a file or directory."""

    kind = MkdirErrorKind.ALREADY_EXISTS

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path already exists: {path.absolute()}", path)


class DirectoryCreationError(FileUtilError):
    """The directory could not be created."""

    kind = MkdirErrorKind.CREATION_FAILED

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to create directory: {path.absolute()}", path)


@dataclass
class MkdirResult:
    """Result of a directory creation.

    Attributes:
        success: True if the directory was created.
        path: The created directory (None on failure).
        error: The failure (None on success).
    """

    success: bool
    path: Path | None
    error: FileUtilError | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if self.success and self.path is None:
            raise ValueError("success=True requires a path")
        if not self.success and self.error is None:
            raise ValueError("success=False requires an error")

    @classmethod
    def ok(cls, path: Path) -> MkdirResult:
        """Create a successful result for the given path."""
        return cls(success=True, path=path)

    @classmethod
    def failed(cls, error: FileUtilError) -> MkdirResult:
        """Create a failed result carrying the given error."""
        return cls(success=False, path=None, error=error)

    @property
    def error_kind(self) -> MkdirErrorKind | None:
        """Kind of the failure, or None on success."""
        return self.error.kind if self.error is not None else None

    def get(self) -> Path:
        """Return the created path.

        Raises:
            FileUtilError: The carried error if the result is a failure.
        """
        if self.error is not None:
            raise self.error
        return cast(Path, self.path)

    def get_or_else(self, default: T) -> Path | T:
        """Return the created path, or ``default`` on failure."""
        return self.path if self.success and self.path is not None else default
