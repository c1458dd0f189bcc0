"""Shared data types for nativefs."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

__all__ = ["CopyOptions", "DirEntry", "FilterFn", "PathStatus", "StrPath"]

StrPath = str | os.PathLike[str]

# Receives the source-side path as a string; False excludes it.
FilterFn = Callable[[str], bool]


@dataclass(frozen=True)
class PathStatus:
    """Result of a stat call (symlinks followed).

    Attributes:
        is_dir: True if the path is a directory.
        is_file: True if the path is a regular file.
        size: Size in bytes as reported by the OS.
    """

    is_dir: bool
    is_file: bool
    size: int = 0


@dataclass(frozen=True)
class DirEntry:
    """A typed directory listing entry."""

    name: str
    kind: str

    def is_dir(self) -> bool:
        return self.kind == "dir"

    def is_file(self) -> bool:
        return self.kind == "file"


class CopyOptions(BaseModel):
    """Options for a copy operation.

    Attributes:
        overwrite: Replace existing destination files. When False, an
            existing destination file is left untouched and skipped.
        filter: Predicate over source paths. Returning False excludes the
            path and, for a directory, its whole subtree.
    """

    model_config = ConfigDict(frozen=True)

    overwrite: bool = True
    filter: Callable[[str], bool] | None = None

    def accepts(self, path: str) -> bool:
        """Check whether the filter lets a source path through."""
        return self.filter is None or bool(self.filter(path))
