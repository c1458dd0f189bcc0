"""Tagged filesystem errors.

The adapter layer translates every ``OSError`` raised by the operating system
into an :class:`FsError` carrying an :class:`FsErrorKind`. Callers inspect the
kind by name instead of matching on errno values or message text.
"""

from __future__ import annotations

import errno
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

__all__ = [
    "FsError",
    "FsErrorKind",
    "JsonParseError",
    "classify_errno",
    "translate_os_errors",
]


class FsErrorKind(Enum):
    """Classification of a failed filesystem primitive."""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    NOT_EMPTY = "not_empty"
    CROSS_DEVICE = "cross_device"
    PARSE_FAILURE = "parse_failure"
    UNCLASSIFIED = "unclassified"


_ERRNO_KINDS: dict[int, FsErrorKind] = {
    errno.ENOENT: FsErrorKind.NOT_FOUND,
    errno.ENOTDIR: FsErrorKind.NOT_A_DIRECTORY,
    errno.EISDIR: FsErrorKind.IS_A_DIRECTORY,
    errno.EACCES: FsErrorKind.PERMISSION_DENIED,
    errno.EPERM: FsErrorKind.PERMISSION_DENIED,
    errno.EEXIST: FsErrorKind.ALREADY_EXISTS,
    errno.ENOTEMPTY: FsErrorKind.NOT_EMPTY,
    errno.EXDEV: FsErrorKind.CROSS_DEVICE,
}


def classify_errno(code: int | None) -> FsErrorKind:
    """Map an errno value to an error kind.

    Args:
        code: The ``errno`` attribute of an ``OSError`` (may be None).

    Returns:
        The matching kind, or UNCLASSIFIED for anything not in the table.
    """
    if code is None:
        return FsErrorKind.UNCLASSIFIED
    return _ERRNO_KINDS.get(code, FsErrorKind.UNCLASSIFIED)


class FsError(Exception):
    """A filesystem primitive failed.

    Attributes:
        kind: Classification of the failure.
        path: Path the primitive operated on.
        dest: Second path for two-path primitives (copy, rename).
        errno: Underlying errno value, if any.
    """

    def __init__(
        self,
        kind: FsErrorKind,
        message: str,
        path: str | None = None,
        dest: str | None = None,
        errno: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path
        self.dest = dest
        self.errno = errno

    @classmethod
    def from_os_error(
        cls, exc: OSError, path: object = None, dest: object = None
    ) -> FsError:
        """Build a tagged error from an ``OSError``.

        Paths recorded on the ``OSError`` win over the ones passed in, since
        shutil may fail on a nested entry rather than the top-level argument.
        """
        err_path = exc.filename if exc.filename is not None else path
        err_dest = exc.filename2 if exc.filename2 is not None else dest
        kind = classify_errno(exc.errno)
        message = exc.strerror or str(exc)
        if err_path is not None:
            message = f"{message}: {err_path}"
        if err_dest is not None:
            message = f"{message} -> {err_dest}"
        return cls(
            kind,
            message,
            path=None if err_path is None else str(err_path),
            dest=None if err_dest is None else str(err_dest),
            errno=exc.errno,
        )


class JsonParseError(FsError, ValueError):
    """A file was read but its content is not valid JSON."""

    def __init__(self, message: str, path: str | None = None, lineno: int = 0, colno: int = 0) -> None:
        super().__init__(FsErrorKind.PARSE_FAILURE, message, path=path)
        self.lineno = lineno
        self.colno = colno


@contextmanager
def translate_os_errors(path: object = None, dest: object = None) -> Iterator[None]:
    """Re-raise any ``OSError`` in the block as an :class:`FsError`."""
    try:
        yield
    except OSError as e:
        raise FsError.from_os_error(e, path, dest) from e
