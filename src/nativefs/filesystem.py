"""Primitive filesystem adapters.

RealFileSystem wraps ``os`` and ``shutil`` calls and translates their
``OSError`` failures into tagged :class:`~nativefs.errors.FsError` values.
ExecutorFileSystem exposes the same primitives as coroutines by running each
blocking call on an executor.
"""

from __future__ import annotations

import asyncio
import functools
import os
import shutil
from stat import S_ISDIR, S_ISREG
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from nativefs.errors import translate_os_errors
from nativefs.types import DirEntry, PathStatus

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from nativefs.protocols import FileSystem
    from nativefs.types import StrPath

T = TypeVar("T")


def _entry_kind(entry: os.DirEntry[str]) -> str:
    if entry.is_dir():
        return "dir"
    if entry.is_file():
        return "file"
    return "other"


def _is_real_dir(path: StrPath) -> bool:
    return os.path.isdir(path) and not os.path.islink(path)


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def stat(self, path: StrPath) -> PathStatus:
        """Get the status of a path, following symlinks."""
        with translate_os_errors(path):
            st = os.stat(path)
        return PathStatus(
            is_dir=S_ISDIR(st.st_mode),
            is_file=S_ISREG(st.st_mode),
            size=st.st_size,
        )

    def list_dir(self, path: StrPath) -> list[DirEntry]:
        """List a directory with typed entries.

        The listing is materialized before the directory handle is closed.
        """
        with translate_os_errors(path), os.scandir(path) as it:
            return [DirEntry(name=entry.name, kind=_entry_kind(entry)) for entry in it]

    def make_dir(self, path: StrPath, recursive: bool = False) -> None:
        """Create a directory."""
        with translate_os_errors(path):
            if recursive:
                os.makedirs(path, exist_ok=True)
            else:
                os.mkdir(path)

    def copy_file(self, src: StrPath, dest: StrPath) -> None:
        """Copy file content only; mode and ownership are not preserved.

        Copying a file onto itself is a no-op.
        """
        with translate_os_errors(src, dest):
            try:
                shutil.copyfile(src, dest)
            except shutil.SameFileError:
                pass

    def rename(self, src: StrPath, dest: StrPath) -> None:
        """Rename a path, replacing an existing destination file."""
        with translate_os_errors(src, dest):
            os.replace(src, dest)

    def delete(self, path: StrPath, recursive: bool = False, force: bool = False) -> None:
        """Delete a file or directory.

        With ``force``, a path that is missing or runs through a file is
        treated as already gone.
        """
        with translate_os_errors(path):
            try:
                if _is_real_dir(path):
                    if recursive:
                        shutil.rmtree(path)
                    else:
                        os.rmdir(path)
                else:
                    os.unlink(path)
            except (FileNotFoundError, NotADirectoryError):
                if not force:
                    raise

    def check_access(self, path: StrPath) -> None:
        """Check that a path is reachable."""
        with translate_os_errors(path):
            os.stat(path)

    def read_bytes(self, path: StrPath) -> bytes:
        """Read a whole file."""
        with translate_os_errors(path), open(path, "rb") as f:
            return f.read()

    def write_bytes(self, path: StrPath, content: bytes) -> None:
        """Write a whole file."""
        with translate_os_errors(path), open(path, "wb") as f:
            f.write(content)


class ExecutorFileSystem:
    """Suspending filesystem implementation.

    Runs each primitive of a blocking FileSystem on an executor, so a
    coroutine suspends at exactly one primitive call at a time.
    Satisfies the AsyncFileSystem protocol structurally.
    """

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        executor: Executor | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            filesystem: Blocking primitives to run. Defaults to RealFileSystem.
            executor: Executor for blocking calls. None uses the event
                loop's default executor.
        """
        self.fs = filesystem or RealFileSystem()
        self.executor = executor

    async def _run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, functools.partial(fn, *args, **kwargs))

    async def stat(self, path: StrPath) -> PathStatus:
        return await self._run(self.fs.stat, path)

    async def list_dir(self, path: StrPath) -> list[DirEntry]:
        return await self._run(self.fs.list_dir, path)

    async def make_dir(self, path: StrPath, recursive: bool = False) -> None:
        await self._run(self.fs.make_dir, path, recursive=recursive)

    async def copy_file(self, src: StrPath, dest: StrPath) -> None:
        await self._run(self.fs.copy_file, src, dest)

    async def rename(self, src: StrPath, dest: StrPath) -> None:
        await self._run(self.fs.rename, src, dest)

    async def delete(self, path: StrPath, recursive: bool = False, force: bool = False) -> None:
        await self._run(self.fs.delete, path, recursive=recursive, force=force)

    async def check_access(self, path: StrPath) -> None:
        await self._run(self.fs.check_access, path)

    async def read_bytes(self, path: StrPath) -> bytes:
        return await self._run(self.fs.read_bytes, path)

    async def write_bytes(self, path: StrPath, content: bytes) -> None:
        await self._run(self.fs.write_bytes, path, content)
