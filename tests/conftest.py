"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fileutil.context import AppContext


@pytest.fixture
def test_root(tmp_path: Path) -> Path:
    """Create an empty root directory for a test."""
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def populated_tree(test_root: Path) -> Path:
    """Create a directory with a file and a sub-directory holding a file.

    Layout::

        tree/
            a.dummy
            sub/
                b.dummy
    """
    tree = test_root / "tree"
    (tree / "sub").mkdir(parents=True)
    (tree / "a.dummy").touch()
    (tree / "sub" / "b.dummy").touch()
    return tree


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    By default nothing exists and every operation succeeds.
    """
    fs = MagicMock()
    fs.list_dir.return_value = None
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.remove.return_value = True
    fs.make_dirs.return_value = True
    return fs


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def mock_app_context() -> AppContext:
    """Create a complete mock AppContext for CLI testing."""
    return AppContext(
        remover=MagicMock(),
        creator=MagicMock(),
        filesystem=MagicMock(),
    )
