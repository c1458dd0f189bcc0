"""Recursive copy engine.

Copies a file or a whole directory tree, honoring a filter predicate and an
overwrite policy. Entries inside a tree are handled one at a time, so a
traversal holds at most one directory listing and one file copy in flight.
There is no queue and no deferred retry: every primitive either succeeds or
its failure aborts the copy.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from nativefs.operations import ensure_parent_steps, path_exists_steps
from nativefs.runner import call
from nativefs.types import CopyOptions

if TYPE_CHECKING:
    from nativefs.runner import Steps
    from nativefs.types import DirEntry, PathStatus, StrPath

logger = logging.getLogger(__name__)


def copy_steps(src: StrPath, dest: StrPath, options: CopyOptions | None = None) -> Steps[None]:
    """Copy a file or directory.

    Args:
        src: Source file or directory.
        dest: Destination path. For a directory source, this becomes the
            copy of ``src`` itself (not a parent to copy into).
        options: Overwrite policy and filter. Defaults to overwrite with no
            filter.

    Raises:
        FsError: If the source is missing, a parent directory cannot be
            created, or any entry fails to copy.
    """
    options = options or CopyOptions()
    src_str = os.fspath(src)

    if not options.accepts(src_str):
        logger.debug("Filter rejected %s; nothing copied", src_str)
        return

    status: PathStatus = yield call("stat", src)
    if status.is_dir:
        yield from copy_dir_steps(src_str, os.fspath(dest), options)
    else:
        yield from copy_file_steps(src_str, os.fspath(dest), options.overwrite)


def copy_file_steps(src: str, dest: str, overwrite: bool = True) -> Steps[None]:
    """Copy one file, creating the destination's parent chain first."""
    yield from ensure_parent_steps(dest)
    if not overwrite:
        exists = yield from path_exists_steps(dest)
        if exists:
            logger.debug("Skipping %s; %s exists and overwrite is off", src, dest)
            return
    yield call("copy_file", src, dest)


def copy_dir_steps(src: str, dest: str, options: CopyOptions) -> Steps[None]:
    """Replicate the tree at ``src`` under ``dest``.

    The destination directory is created before any child is materialized,
    even if every child is filtered out. Each descendant's source path is
    re-checked against the filter; a rejected directory is skipped without
    being listed.
    """
    yield call("make_dir", dest, recursive=True)
    entries: list[DirEntry] = yield call("list_dir", src)

    for entry in entries:
        src_path = os.path.join(src, entry.name)
        dest_path = os.path.join(dest, entry.name)

        if not options.accepts(src_path):
            logger.debug("Filter rejected %s", src_path)
            continue

        if entry.is_dir():
            yield from copy_dir_steps(src_path, dest_path, options)
            continue

        if not options.overwrite:
            exists = yield from path_exists_steps(dest_path)
            if exists:
                logger.debug("Skipping %s; %s exists and overwrite is off", src_path, dest_path)
                continue
        yield call("copy_file", src_path, dest_path)
