"""Tests for CLI commands using context injection.

Commands accept a _context parameter for dependency injection, enabling unit
tests without touching the real filesystem. The CliRunner tests cover
argument parsing end to end.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from fileutil import __version__, cli
from fileutil.context import AppContext
from fileutil.types import (
    DirectoryCreationError,
    FileUtilError,
    MkdirResult,
    PathAlreadyExistsError,
)

runner = CliRunner()


class TestDeleteCommand:
    """Tests for the delete command."""

    def test_delete_success(self, mock_app_context: AppContext) -> None:
        """Test deleting paths that are removed."""
        # Arrange
        mock_app_context.remover.delete.return_value = True

        # Act
        cli.delete(paths=[Path("/fake/a"), Path("/fake/b")], _context=mock_app_context)

        # Assert
        assert mock_app_context.remover.delete.call_count == 2

    def test_delete_failure_exits(self, mock_app_context: AppContext) -> None:
        """Test a failed delete exits with code 1 after trying every path."""
        # Arrange
        mock_app_context.remover.delete.side_effect = [False, True]

        # Act & Assert
        with pytest.raises(typer.Exit) as exc_info:
            cli.delete(paths=[Path("/fake/a"), Path("/fake/b")], _context=mock_app_context)
        assert exc_info.value.exit_code == 1
        assert mock_app_context.remover.delete.call_count == 2


class TestMkdirCommand:
    """Tests for the mkdir command."""

    def test_mkdir_success(self, mock_app_context: AppContext) -> None:
        """Test creating a directory."""
        # Arrange
        mock_app_context.creator.mkdir.return_value = MkdirResult.ok(Path("/fake/new"))

        # Act
        cli.mkdir(parent=Path("/fake"), name="new", _context=mock_app_context)

        # Assert
        mock_app_context.creator.mkdir.assert_called_once_with(Path("/fake"), "new")

    def test_mkdir_already_exists(self, mock_app_context: AppContext) -> None:
        """Test an existing target exits with code 1."""
        # Arrange
        mock_app_context.creator.mkdir.return_value = MkdirResult.failed(
            PathAlreadyExistsError(Path("/fake/new"))
        )

        # Act & Assert
        with pytest.raises(typer.Exit) as exc_info:
            cli.mkdir(parent=Path("/fake"), name="new", _context=mock_app_context)
        assert exc_info.value.exit_code == 1

    def test_mkdir_creation_failed(self, mock_app_context: AppContext) -> None:
        """Test a failed creation exits with code 2."""
        # Arrange
        mock_app_context.creator.mkdir.return_value = MkdirResult.failed(
            DirectoryCreationError(Path("/fake/new"))
        )

        # Act & Assert
        with pytest.raises(typer.Exit) as exc_info:
            cli.mkdir(parent=Path("/fake"), name="new", _context=mock_app_context)
        assert exc_info.value.exit_code == 2


class TestCliRunner:
    """End-to-end tests through the Typer application."""

    def test_version(self) -> None:
        """Test --version prints the version."""
        result = runner.invoke(cli.app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_delete_tree(self, populated_tree: Path) -> None:
        """Test deleting a populated tree from the command line."""
        result = runner.invoke(cli.app, ["delete", str(populated_tree)])

        assert result.exit_code == 0
        assert not populated_tree.exists()

    def test_delete_missing_path(self, test_root: Path) -> None:
        """Test deleting a missing path is reported as success."""
        result = runner.invoke(cli.app, ["delete", str(test_root / "missing")])

        assert result.exit_code == 0

    def test_mkdir_twice(self, test_root: Path) -> None:
        """Test the second mkdir of the same name fails."""
        first = runner.invoke(cli.app, ["mkdir", str(test_root), "new"])
        second = runner.invoke(cli.app, ["mkdir", str(test_root), "new"])

        assert first.exit_code == 0
        assert second.exit_code == 1
        assert (test_root / "new").is_dir()

    def test_verbose_flag(self, test_root: Path) -> None:
        """Test --verbose is accepted before a command."""
        result = runner.invoke(cli.app, ["--verbose", "mkdir", str(test_root), "loud"])

        assert result.exit_code == 0
        assert (test_root / "loud").is_dir()



def test_mkdir_untyped_error_exits(mock_app_context: AppContext) -> None:
    """Test a failure without an error kind falls back to exit code 1."""
    mock_app_context.creator.mkdir.return_value = MkdirResult.failed(
        FileUtilError("boom", Path("/fake/new"))
    )

    with pytest.raises(typer.Exit) as exc_info:
        cli.mkdir(parent=Path("/fake"), name="new", _context=mock_app_context)
    assert exc_info.value.exit_code == 1
