"""Recursive deletion of files and directory trees."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fileutil.filesystem import RealFileSystem
from fileutil.protocols import FileSystem

logger = logging.getLogger(__name__)


class PathRemover:
    """Deletes a path together with everything below it."""

    def __init__(self, filesystem: FileSystem | None = None) -> None:
        """Initialize the remover.

        Args:
            filesystem: Filesystem implementation. Defaults to RealFileSystem.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.fs = filesystem or RealFileSystem()

    @classmethod
    def create(cls, filesystem: FileSystem) -> PathRemover:
        """Create a remover bound to the given filesystem."""
        return cls(filesystem=filesystem)

    @classmethod
    def create_default(cls) -> PathRemover:
        """Create a remover operating on the real filesystem."""
        return cls()

    def delete(self, path: Path | str | os.PathLike[str]) -> bool:
        """Delete a path, recursing into directories first.

        Children are deleted depth-first in whatever order the platform
        lists them. A path that does not exist counts as deleted.

        The result only reflects the removal of ``path`` itself. A child
        that cannot be removed surfaces solely by leaving its parent
        non-empty, which then makes the parent's removal fail.

        A symbolic link is removed as a single entry: a link to a directory
        is never descended into, and a dangling link is removed as well.

        Args:
            path: File or directory to delete.

        Returns:
            True if the path no longer exists, False if removing it failed.
        """
        path = Path(path)

        for child in self.fs.list_dir(path) or []:
            self.delete(child)

        if not self.fs.exists(path):
            return True

        removed = self.fs.remove(path)
        if not removed:
            logger.debug("Failed to delete %s", path)
        return removed


def delete(path: Path | str | os.PathLike[str]) -> bool:
    """Delete a path on the real filesystem.

    See `PathRemover.delete`.
    """
    return PathRemover.create_default().delete(path)
