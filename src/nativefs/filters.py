"""Ready-made filter predicates for copy operations."""

from __future__ import annotations

import fnmatch
import os
from pathlib import PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nativefs.types import FilterFn, StrPath


def exclude_filter(*patterns: str, root: StrPath | None = None) -> FilterFn:
    """Build a filter that rejects paths with a component matching a pattern.

    Patterns are ``fnmatch`` globs matched against each path component, so
    ``node_modules`` excludes that directory at any depth and ``*.log``
    excludes every log file.

    Args:
        *patterns: Glob patterns to exclude.
        root: Copy source. When given, only components below it are matched
            and the root itself is always accepted.

    Returns:
        Predicate returning False for excluded paths.

    Example:
        >>> keep = exclude_filter("node_modules", "*.log")
        >>> keep("src/app.js"), keep("src/node_modules/x.js"), keep("run.log")
        (True, False, False)
    """
    excluded = tuple(patterns)
    base = os.path.normpath(os.fspath(root)) if root is not None else None

    def accept(path: str) -> bool:
        path = os.path.normpath(path)
        if base is not None:
            if path == base:
                return True
            path = os.path.relpath(path, base)
        parts = PurePath(path).parts
        return not any(
            fnmatch.fnmatchcase(part, pattern) for part in parts for pattern in excluded
        )

    return accept
