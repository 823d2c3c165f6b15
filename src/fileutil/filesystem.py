"""Filesystem abstraction for testability.

This module provides the filesystem capability the operations depend on.
The RealFileSystem implementation wraps standard library Path operations
and turns OSError into return values.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path operations.
    Satisfies the FileSystem protocol structurally.
    """

    def list_dir(self, path: Path) -> list[Path] | None:
        """List children of a real directory; symlinks are not followed."""
        if path.is_symlink() or not path.is_dir():
            return None
        try:
            return list(path.iterdir())
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return None

    def exists(self, path: Path) -> bool:
        """Check if a path exists, counting dangling symlinks."""
        return path.is_symlink() or path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def remove(self, path: Path) -> bool:
        """Remove a file, symlink or empty directory."""
        try:
            if path.is_dir() and not path.is_symlink():
                path.rmdir()
            else:
                path.unlink()
        except OSError as e:
            logger.debug("Cannot remove %s: %s", path, e)
            return False
        return True

    def make_dirs(self, path: Path) -> bool:
        """Create a directory including missing parents."""
        try:
            path.mkdir(parents=True)
        except OSError as e:
            logger.debug("Cannot create %s: %s", path, e)
            return False
        return path.is_dir()
