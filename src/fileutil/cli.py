"""CLI commands using Typer."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fileutil import __version__
from fileutil.console import ConsoleOutput
from fileutil.context import create_context
from fileutil.logging_config import setup_logging
from fileutil.types import MkdirErrorKind

app = typer.Typer(
    name="fileutil",
    help="Recursive delete and guarded mkdir",
    no_args_is_help=True,
)

console = Console()
output = ConsoleOutput(console)

EXIT_CODES = {
    MkdirErrorKind.ALREADY_EXISTS: 1,
    MkdirErrorKind.CREATION_FAILED: 2,
}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fileutil v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log filesystem failures")
    ] = False,
) -> None:
    """Recursive delete and guarded mkdir."""
    setup_logging(verbose)


@app.command("delete")
def delete(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to delete")],
    _context=None,
) -> None:
    """Delete files and directory trees."""
    ctx = _context or create_context()

    failed = 0
    for path in paths:
        if ctx.remover.delete(path):
            output.show_success(f"Deleted {path}")
        else:
            output.show_error(f"Failed to delete {path}")
            failed += 1

    if failed:
        raise typer.Exit(1)


@app.command("mkdir")
def mkdir(
    parent: Annotated[Path, typer.Argument(help="Parent directory")],
    name: Annotated[str, typer.Argument(help="Name of the new directory")],
    _context=None,
) -> None:
    """Create a new directory below PARENT."""
    ctx = _context or create_context()

    result = ctx.creator.mkdir(parent, name)
    if result.success:
        output.show_success(f"Created {result.path}")
        return

    output.show_error(str(result.error))
    raise typer.Exit(EXIT_CODES.get(result.error_kind, 1))


if __name__ == "__main__":
    app()
