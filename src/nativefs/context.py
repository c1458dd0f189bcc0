"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations, so test doubles can be injected without
inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nativefs.api import FileOperations

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from nativefs.protocols import FileSystem


@dataclass
class AppContext:
    """Container for CLI dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    ops: FileOperations


def create_context(
    filesystem: FileSystem | None = None,
    executor: Executor | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        filesystem: Override the primitive adapter (for testing).
        executor: Executor for suspending operations.

    Returns:
        Configured AppContext with all dependencies.
    """
    return AppContext(ops=FileOperations.create(filesystem=filesystem, executor=executor))
