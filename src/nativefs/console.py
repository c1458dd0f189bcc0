"""Rich console output for the CLI."""

from __future__ import annotations

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "NATIVEFS_LOG_LEVEL"


class Output:
    """Non-interactive CLI output."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console for regular output.
            err_console: Console for errors (stderr by default).
        """
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]\u2713[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.err_console.print(f"[red]\u2717[/red] {message}")

    def show_json(self, data: Any) -> None:
        """Pretty-print a parsed JSON value."""
        self.console.print_json(json.dumps(data))


def configure_logging(level: str) -> None:
    """Route nativefs log records through Rich on stderr.

    Only the package logger is touched; the root logger is left alone.

    Args:
        level: Logging level name, e.g. "DEBUG" or "warning".
    """
    logger = logging.getLogger("nativefs")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
