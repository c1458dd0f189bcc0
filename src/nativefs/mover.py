"""Move orchestration with a cross-device fallback."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from nativefs.copier import copy_dir_steps, copy_file_steps
from nativefs.errors import FsError, FsErrorKind
from nativefs.runner import call
from nativefs.types import CopyOptions

if TYPE_CHECKING:
    from nativefs.runner import Steps
    from nativefs.types import PathStatus, StrPath

logger = logging.getLogger(__name__)


def move_steps(src: StrPath, dest: StrPath) -> Steps[None]:
    """Move a file or directory.

    Tries a single rename first. If the rename fails with CROSS_DEVICE, the
    source is copied (overwrite on, no filter) and then force-deleted. Any
    other rename failure propagates unchanged.

    If the fallback copy fails partway, whatever was already copied stays
    at ``dest`` and the source is left in place.
    """
    try:
        yield call("rename", src, dest)
        return
    except FsError as e:
        if e.kind is not FsErrorKind.CROSS_DEVICE:
            raise

    src_str, dest_str = os.fspath(src), os.fspath(dest)
    logger.debug("Cross-device rename %s -> %s; copying then deleting", src_str, dest_str)

    try:
        status: PathStatus = yield call("stat", src_str)
        if status.is_dir:
            yield from copy_dir_steps(src_str, dest_str, CopyOptions(overwrite=True))
        else:
            yield from copy_file_steps(src_str, dest_str, overwrite=True)
    except FsError:
        logger.warning(
            "Cross-device move %s -> %s failed during copy; %s may hold partial data",
            src_str,
            dest_str,
            dest_str,
        )
        raise

    yield call("delete", src_str, recursive=True, force=True)
