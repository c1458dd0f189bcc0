"""Native filesystem operations without retry queues."""

__version__ = "0.1.0"

from nativefs.api import (
    FileOperations,
    copy,
    copy_sync,
    ensure_dir,
    ensure_dir_sync,
    move,
    move_sync,
    path_exists,
    path_exists_sync,
    read_json,
    read_json_sync,
    remove,
    remove_sync,
)
from nativefs.errors import FsError, FsErrorKind, JsonParseError

# Export protocol interfaces for type hints and dependency injection
from nativefs.protocols import AsyncFileSystem, FileSystem

__all__ = [
    "__version__",
    "AsyncFileSystem",
    "FileOperations",
    "FileSystem",
    "FsError",
    "FsErrorKind",
    "JsonParseError",
    "copy",
    "copy_sync",
    "ensure_dir",
    "ensure_dir_sync",
    "move",
    "move_sync",
    "path_exists",
    "path_exists_sync",
    "read_json",
    "read_json_sync",
    "remove",
    "remove_sync",
]
