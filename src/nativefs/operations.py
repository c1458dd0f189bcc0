"""Thin composite operations: existence probe, ensure-dir, remove, JSON read."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

from nativefs.errors import FsError, FsErrorKind, JsonParseError
from nativefs.runner import call

if TYPE_CHECKING:
    from nativefs.runner import Steps
    from nativefs.types import StrPath

BOM = "\ufeff"

# Access failures that mean "not there" rather than "cannot tell".
MISSING_KINDS = frozenset({FsErrorKind.NOT_FOUND, FsErrorKind.NOT_A_DIRECTORY})


def path_exists_steps(path: StrPath) -> Steps[bool]:
    """Check whether a path exists.

    NOT_FOUND and NOT_A_DIRECTORY become False; any other failure, such as
    PERMISSION_DENIED, propagates.
    """
    try:
        yield call("check_access", path)
    except FsError as e:
        if e.kind in MISSING_KINDS:
            return False
        raise
    return True


def ensure_dir_steps(path: StrPath) -> Steps[None]:
    """Create a directory and any missing parents. Idempotent."""
    yield call("make_dir", path, recursive=True)


def ensure_parent_steps(path: StrPath) -> Steps[None]:
    """Create the parent directory chain of a path."""
    parent = os.path.dirname(os.fspath(path))
    if parent:
        yield call("make_dir", parent, recursive=True)


def remove_steps(path: StrPath) -> Steps[None]:
    """Recursively delete a path; a missing path is a no-op."""
    yield call("delete", path, recursive=True, force=True)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json_text(text: str, path: str | None = None) -> Any:
    """Strip one leading byte-order mark and parse JSON text.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected.

    Raises:
        JsonParseError: If the text is not valid JSON.
    """
    if text.startswith(BOM):
        text = text[len(BOM):]
    where = f" in {path}" if path else ""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonParseError(
            f"Invalid JSON{where}: {e.msg} (line {e.lineno}, column {e.colno})",
            path=path,
            lineno=e.lineno,
            colno=e.colno,
        ) from e
    except ValueError as e:
        raise JsonParseError(f"Invalid JSON{where}: {e}", path=path) from e


def read_json_steps(path: StrPath) -> Steps[Any]:
    """Read and parse a JSON file.

    A missing file surfaces as FsError(NOT_FOUND); malformed content as
    JsonParseError.
    """
    raw = yield call("read_bytes", path)
    name = os.fspath(path)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise JsonParseError(f"Invalid JSON in {name}: not UTF-8 ({e.reason})", path=name) from e
    return parse_json_text(text, name)


def read_text_steps(path: StrPath, encoding: str = "utf-8") -> Steps[str]:
    """Read a whole file as text."""
    raw = yield call("read_bytes", path)
    return raw.decode(encoding)


def write_text_steps(path: StrPath, content: str, encoding: str = "utf-8") -> Steps[None]:
    """Write text to a file, creating missing parent directories."""
    yield from ensure_parent_steps(path)
    yield call("write_bytes", path, content.encode(encoding))
