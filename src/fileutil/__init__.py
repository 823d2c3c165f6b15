"""Recursive delete and guarded mkdir for filesystem paths."""

__version__ = "1.0.0"

from fileutil.create import DirectoryCreator, mkdir
from fileutil.protocols import DirectoryCreatorProtocol, FileSystem, PathRemoverProtocol
from fileutil.remove import PathRemover, delete
from fileutil.types import (
    DirectoryCreationError,
    FileUtilError,
    MkdirErrorKind,
    MkdirResult,
    PathAlreadyExistsError,
)

__all__ = [
    "__version__",
    "DirectoryCreationError",
    "DirectoryCreator",
    "DirectoryCreatorProtocol",
    "FileSystem",
    "FileUtilError",
    "MkdirErrorKind",
    "MkdirResult",
    "PathAlreadyExistsError",
    "PathRemover",
    "PathRemoverProtocol",
    "delete",
    "mkdir",
]
