"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the filesystem
capability and the two operations built on top of it. Designing to
interfaces enables:
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from fileutil.types import MkdirResult


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts the primitives the operations depend on. Implementations
    report failure through return values instead of raising.
    """

    def list_dir(self, path: Path) -> list[Path] | None:
        """List the immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Child paths in platform order, or None if the path is not
            a directory or cannot be listed.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if any entry occupies the path, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def remove(self, path: Path) -> bool:
        """Remove a single entry (file, link or empty directory).

        Args:
            path: Path to remove.

        Returns:
            True if removed, False if the removal failed.
        """
        ...

    def make_dirs(self, path: Path) -> bool:
        """Create a directory and any missing parents.

        Args:
            path: Directory to create.

        Returns:
            True if created, False if the creation failed.
        """
        ...


@runtime_checkable
class PathRemoverProtocol(Protocol):
    """Protocol for recursive path deletion."""

    def delete(self, path: Path) -> bool:
        """Delete a path and everything below it.

        Args:
            path: File or directory to delete.

        Returns:
            True if the path no longer exists afterwards.
        """
        ...


@runtime_checkable
class DirectoryCreatorProtocol(Protocol):
    """Protocol for guarded directory creation."""

    def mkdir(self, parent: Path, name: str) -> MkdirResult:
        """Create the sub-directory ``name`` below ``parent``.

        Args:
            parent: Parent directory (created if missing).
            name: Name of the new directory.

        Returns:
            MkdirResult with the created path or the failure.
        """
        ...
