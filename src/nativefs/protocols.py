"""Protocol definitions for the primitive filesystem adapter.

The composite operations (copy, move, remove, ...) depend only on these
narrow interfaces, never on ``os`` or ``shutil`` directly. Designing to
interfaces enables:
- One traversal algorithm for blocking and suspending callers
- Easy substitution of test doubles
- Clear contracts for alternate backends

All concrete implementations satisfy these protocols structurally (duck typing).
Every primitive raises :class:`nativefs.errors.FsError` on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nativefs.types import DirEntry, PathStatus, StrPath


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for blocking filesystem primitives.

    Each primitive is assumed atomic at the single-file or single-entry
    level. Implementations must not retry internally.
    """

    def stat(self, path: StrPath) -> PathStatus:
        """Get the status of a path, following symlinks.

        Args:
            path: Path to inspect.

        Returns:
            PathStatus for the path.

        Raises:
            FsError: NOT_FOUND if the path does not exist.
        """
        ...

    def list_dir(self, path: StrPath) -> list[DirEntry]:
        """List a directory with typed entries.

        Args:
            path: Directory to list.

        Returns:
            Entries in unspecified order.
        """
        ...

    def make_dir(self, path: StrPath, recursive: bool = False) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            recursive: Create missing parents and tolerate an existing
                directory.
        """
        ...

    def copy_file(self, src: StrPath, dest: StrPath) -> None:
        """Copy one file's content, replacing any existing destination file.

        Args:
            src: Source file.
            dest: Destination file.
        """
        ...

    def rename(self, src: StrPath, dest: StrPath) -> None:
        """Rename a path.

        Args:
            src: Existing path.
            dest: New path.

        Raises:
            FsError: CROSS_DEVICE if src and dest are on different devices.
        """
        ...

    def delete(self, path: StrPath, recursive: bool = False, force: bool = False) -> None:
        """Delete a file or directory.

        Args:
            path: Path to delete.
            recursive: Delete directory contents too.
            force: Treat a missing path as success.
        """
        ...

    def check_access(self, path: StrPath) -> None:
        """Check that a path is reachable.

        Args:
            path: Path to check.

        Raises:
            FsError: NOT_FOUND or NOT_A_DIRECTORY if unreachable.
        """
        ...

    def read_bytes(self, path: StrPath) -> bytes:
        """Read a whole file.

        Args:
            path: File to read.

        Returns:
            File content.
        """
        ...

    def write_bytes(self, path: StrPath, content: bytes) -> None:
        """Write a whole file, replacing any existing content.

        Args:
            path: File to write.
            content: Bytes to write.
        """
        ...


@runtime_checkable
class AsyncFileSystem(Protocol):
    """Protocol for suspending filesystem primitives.

    Same methods and semantics as :class:`FileSystem`, as coroutines.
    """

    async def stat(self, path: StrPath) -> PathStatus: ...

    async def list_dir(self, path: StrPath) -> list[DirEntry]: ...

    async def make_dir(self, path: StrPath, recursive: bool = False) -> None: ...

    async def copy_file(self, src: StrPath, dest: StrPath) -> None: ...

    async def rename(self, src: StrPath, dest: StrPath) -> None: ...

    async def delete(self, path: StrPath, recursive: bool = False, force: bool = False) -> None: ...

    async def check_access(self, path: StrPath) -> None: ...

    async def read_bytes(self, path: StrPath) -> bytes: ...

    async def write_bytes(self, path: StrPath, content: bytes) -> None: ...
