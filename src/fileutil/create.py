"""Guarded creation of a single sub-directory."""

from __future__ import annotations

import os
from pathlib import Path

from fileutil.filesystem import RealFileSystem
from fileutil.protocols import FileSystem
from fileutil.types import DirectoryCreationError, MkdirResult, PathAlreadyExistsError


def _is_single_segment(name: str) -> bool:
    """Check that name denotes exactly one entry directly below a parent."""
    return name not in ("", ".", "..") and Path(name).name == name


class DirectoryCreator:
    """Creates a named directory below a parent, refusing to reuse one."""

    def __init__(self, filesystem: FileSystem | None = None) -> None:
        """Initialize the creator.

        Args:
            filesystem: Filesystem implementation. Defaults to RealFileSystem.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.fs = filesystem or RealFileSystem()

    @classmethod
    def create(cls, filesystem: FileSystem) -> DirectoryCreator:
        """Create a directory creator bound to the given filesystem."""
        return cls(filesystem=filesystem)

    @classmethod
    def create_default(cls) -> DirectoryCreator:
        """Create a directory creator operating on the real filesystem."""
        return cls()

    def mkdir(self, parent: Path | str | os.PathLike[str], name: str) -> MkdirResult:
        """Create ``parent / name`` along with any missing ancestors.

        Failures are returned in the result, never raised.

        Args:
            parent: Parent directory. Need not exist yet.
            name: Name of the new directory.

        Returns:
            MkdirResult with the created path, or with a
            PathAlreadyExistsError if the target is already occupied, or a
            DirectoryCreationError if the directory could not be created or
            ``name`` is not a single path segment.
        """
        target = Path(parent) / name

        if not _is_single_segment(name):
            return MkdirResult.failed(DirectoryCreationError(target))

        if self.fs.exists(target):
            return MkdirResult.failed(PathAlreadyExistsError(target))

        if not self.fs.make_dirs(target):
            return MkdirResult.failed(DirectoryCreationError(target))

        return MkdirResult.ok(target)


def mkdir(parent: Path | str | os.PathLike[str], name: str) -> MkdirResult:
    """Create a sub-directory on the real filesystem.

    See `DirectoryCreator.mkdir`.
    """
    return DirectoryCreator.create_default().mkdir(parent, name)
