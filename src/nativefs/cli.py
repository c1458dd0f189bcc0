"""CLI commands using Typer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from nativefs.context import AppContext

import typer

from nativefs import __version__
from nativefs.console import LOG_LEVEL_ENV, Output, configure_logging
from nativefs.context import create_context
from nativefs.errors import FsError
from nativefs.filters import exclude_filter

app = typer.Typer(
    name="nativefs",
    help="File operations over native filesystem calls, without retry queues",
    no_args_is_help=True,
)

output = Output()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"nativefs v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", envvar=LOG_LEVEL_ENV, help="Logging level"),
    ] = "WARNING",
) -> None:
    """File operations over native filesystem calls."""
    configure_logging(log_level)


def _fail(e: FsError) -> typer.Exit:
    """Report an operation error and build the exit to raise."""
    output.show_error(str(e))
    return typer.Exit(1)


# ============================================================================
# Tree Commands
# ============================================================================


@app.command()
def copy(
    src: Annotated[str, typer.Argument(help="Source file or directory")],
    dest: Annotated[str, typer.Argument(help="Destination path")],
    no_overwrite: Annotated[
        bool, typer.Option("--no-overwrite", help="Keep existing destination files")
    ] = False,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-e", help="Glob of path components to skip (repeatable)"),
    ] = None,
    _context=None,
) -> None:
    """Copy a file or directory tree."""
    ctx: AppContext = _context or create_context()
    path_filter = exclude_filter(*exclude, root=src) if exclude else None

    try:
        ctx.ops.copy_sync(src, dest, overwrite=not no_overwrite, filter=path_filter)
    except FsError as e:
        raise _fail(e) from e
    output.show_success(f"Copied {src} -> {dest}")


@app.command()
def move(
    src: Annotated[str, typer.Argument(help="Source file or directory")],
    dest: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Move a file or directory, across devices if needed."""
    ctx: AppContext = _context or create_context()

    try:
        ctx.ops.move_sync(src, dest)
    except FsError as e:
        raise _fail(e) from e
    output.show_success(f"Moved {src} -> {dest}")


@app.command()
def remove(
    paths: Annotated[list[str], typer.Argument(help="Paths to delete")],
    _context=None,
) -> None:
    """Recursively delete paths. Missing paths are ignored."""
    ctx: AppContext = _context or create_context()

    for path in paths:
        try:
            ctx.ops.remove_sync(path)
        except FsError as e:
            raise _fail(e) from e
        output.show_success(f"Removed {path}")


@app.command("ensure-dir")
def ensure_dir(
    paths: Annotated[list[str], typer.Argument(help="Directories to create")],
    _context=None,
) -> None:
    """Create directories and any missing parents."""
    ctx: AppContext = _context or create_context()

    for path in paths:
        try:
            ctx.ops.ensure_dir_sync(path)
        except FsError as e:
            raise _fail(e) from e
        output.show_success(f"Ensured {path}")


# ============================================================================
# Query Commands
# ============================================================================


@app.command()
def exists(
    path: Annotated[str, typer.Argument(help="Path to check")],
    _context=None,
) -> None:
    """Exit 0 if a path exists, 1 if it does not."""
    ctx: AppContext = _context or create_context()

    try:
        found = ctx.ops.path_exists_sync(path)
    except FsError as e:
        raise _fail(e) from e

    output.console.print("yes" if found else "no")
    if not found:
        raise typer.Exit(1)


@app.command("read-json")
def read_json(
    path: Annotated[str, typer.Argument(help="JSON file to read")],
    _context=None,
) -> None:
    """Parse a JSON file and pretty-print it."""
    ctx: AppContext = _context or create_context()

    try:
        data = ctx.ops.read_json_sync(path)
    except FsError as e:
        raise _fail(e) from e
    output.show_json(data)


if __name__ == "__main__":
    app()
