"""Public file-operations facade.

FileOperations binds the composite operations to a pair of primitive
adapters. Each operation has a blocking ``*_sync`` form and a suspending
form; both run the same step generator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nativefs.copier import copy_steps
from nativefs.filesystem import ExecutorFileSystem, RealFileSystem
from nativefs.mover import move_steps
from nativefs.operations import (
    ensure_dir_steps,
    path_exists_steps,
    read_json_steps,
    read_text_steps,
    remove_steps,
    write_text_steps,
)
from nativefs.runner import run_async, run_sync
from nativefs.types import CopyOptions

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from nativefs.protocols import AsyncFileSystem, FileSystem
    from nativefs.types import FilterFn, StrPath


class FileOperations:
    """Ergonomic file operations over narrow primitive adapters.

    Holds no mutable state; one instance may serve any number of
    concurrent calls on disjoint paths.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory methods `create()` or `create_default()` for production.
    """

    def __init__(self, filesystem: FileSystem, async_filesystem: AsyncFileSystem) -> None:
        """Initialize with required adapters.

        Args:
            filesystem: Blocking primitives for the ``*_sync`` methods.
            async_filesystem: Suspending primitives for the async methods.
        """
        self.fs = filesystem
        self.afs = async_filesystem

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        executor: Executor | None = None,
    ) -> FileOperations:
        """Factory method wiring the async adapter over the blocking one.

        Args:
            filesystem: Blocking primitives (RealFileSystem if not provided).
            executor: Executor for async calls (loop default if not provided).

        Returns:
            Configured FileOperations instance.
        """
        fs = filesystem or RealFileSystem()
        return cls(filesystem=fs, async_filesystem=ExecutorFileSystem(fs, executor))

    @classmethod
    def create_default(cls) -> FileOperations:
        """Create an instance backed by the real filesystem."""
        return cls.create()

    # ------------------------------------------------------------------
    # Blocking forms
    # ------------------------------------------------------------------

    def ensure_dir_sync(self, path: StrPath) -> None:
        """Create a directory and any missing parents."""
        run_sync(ensure_dir_steps(path), self.fs)

    def path_exists_sync(self, path: StrPath) -> bool:
        """Check whether a path exists."""
        return run_sync(path_exists_steps(path), self.fs)

    def copy_sync(
        self,
        src: StrPath,
        dest: StrPath,
        *,
        overwrite: bool = True,
        filter: FilterFn | None = None,
    ) -> None:
        """Copy a file or directory tree.

        Args:
            src: Source file or directory.
            dest: Destination path.
            overwrite: Replace existing destination files.
            filter: Predicate over source paths; False excludes the path
                and its subtree.
        """
        options = CopyOptions(overwrite=overwrite, filter=filter)
        run_sync(copy_steps(src, dest, options), self.fs)

    def remove_sync(self, path: StrPath) -> None:
        """Recursively delete a path; a missing path is a no-op."""
        run_sync(remove_steps(path), self.fs)

    def move_sync(self, src: StrPath, dest: StrPath) -> None:
        """Move a file or directory, copying across devices if needed."""
        run_sync(move_steps(src, dest), self.fs)

    def read_json_sync(self, path: StrPath) -> Any:
        """Read a JSON file, ignoring a leading byte-order mark.

        Raises:
            FsError: If the file cannot be read.
            JsonParseError: If the content is not valid JSON.
        """
        return run_sync(read_json_steps(path), self.fs)

    def read_text_sync(self, path: StrPath, encoding: str = "utf-8") -> str:
        """Read a whole file as text."""
        return run_sync(read_text_steps(path, encoding), self.fs)

    def write_text_sync(self, path: StrPath, content: str, encoding: str = "utf-8") -> None:
        """Write text to a file, creating missing parent directories."""
        run_sync(write_text_steps(path, content, encoding), self.fs)

    # ------------------------------------------------------------------
    # Suspending forms
    # ------------------------------------------------------------------

    async def ensure_dir(self, path: StrPath) -> None:
        """Create a directory and any missing parents."""
        await run_async(ensure_dir_steps(path), self.afs)

    async def path_exists(self, path: StrPath) -> bool:
        """Check whether a path exists."""
        return await run_async(path_exists_steps(path), self.afs)

    async def copy(
        self,
        src: StrPath,
        dest: StrPath,
        *,
        overwrite: bool = True,
        filter: FilterFn | None = None,
    ) -> None:
        """Copy a file or directory tree. See :meth:`copy_sync`."""
        options = CopyOptions(overwrite=overwrite, filter=filter)
        await run_async(copy_steps(src, dest, options), self.afs)

    async def remove(self, path: StrPath) -> None:
        """Recursively delete a path; a missing path is a no-op."""
        await run_async(remove_steps(path), self.afs)

    async def move(self, src: StrPath, dest: StrPath) -> None:
        """Move a file or directory, copying across devices if needed."""
        await run_async(move_steps(src, dest), self.afs)

    async def read_json(self, path: StrPath) -> Any:
        """Read a JSON file, ignoring a leading byte-order mark."""
        return await run_async(read_json_steps(path), self.afs)


_default = FileOperations.create_default()

ensure_dir = _default.ensure_dir
ensure_dir_sync = _default.ensure_dir_sync
path_exists = _default.path_exists
path_exists_sync = _default.path_exists_sync
copy = _default.copy
copy_sync = _default.copy_sync
remove = _default.remove
remove_sync = _default.remove_sync
move = _default.move
move_sync = _default.move_sync
read_json = _default.read_json
read_json_sync = _default.read_json_sync
