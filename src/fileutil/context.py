"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols rather than concrete implementations,
so test doubles can be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fileutil.protocols import DirectoryCreatorProtocol, FileSystem, PathRemoverProtocol


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from fileutil.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    remover: PathRemoverProtocol
    creator: DirectoryCreatorProtocol
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(filesystem: FileSystem | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        filesystem: Override the filesystem implementation (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from fileutil.create import DirectoryCreator
    from fileutil.remove import PathRemover

    fs = filesystem or _default_filesystem()

    return AppContext(
        remover=PathRemover.create(fs),
        creator=DirectoryCreator.create(fs),
        filesystem=fs,
    )
