"""Shared test fixtures."""

from __future__ import annotations

import errno
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from nativefs.api import FileOperations
from nativefs.errors import FsError, FsErrorKind
from nativefs.filesystem import RealFileSystem


class CrossDeviceFileSystem(RealFileSystem):
    """RealFileSystem whose rename always fails as if across devices."""

    def rename(self, src: Any, dest: Any) -> None:
        raise FsError(
            FsErrorKind.CROSS_DEVICE,
            f"Invalid cross-device link: {src} -> {dest}",
            path=str(src),
            dest=str(dest),
            errno=errno.EXDEV,
        )


def make_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (with parents) under root from a relpath -> text map."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    return root


def list_files(root: Path) -> dict[str, str]:
    """Map every file under root (relative POSIX path) to its text."""
    return {
        p.relative_to(root).as_posix(): p.read_text()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def ops() -> FileOperations:
    """FileOperations over the real filesystem."""
    return FileOperations.create()


@pytest.fixture
def cross_device_ops() -> FileOperations:
    """FileOperations whose renames always fail with CROSS_DEVICE."""
    return FileOperations.create(filesystem=CrossDeviceFileSystem())


@pytest.fixture
def recording_fs() -> MagicMock:
    """A real filesystem adapter wrapped to record primitive calls."""
    return MagicMock(wraps=RealFileSystem())


@pytest.fixture
def build_tree() -> Callable[[Path, dict[str, str]], Path]:
    """Factory creating a file tree from a relpath -> text map."""
    return make_tree


@pytest.fixture
def read_tree() -> Callable[[Path], dict[str, str]]:
    """Reader mapping every file under a root to its text."""
    return list_files


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A small source tree with nested and excluded content."""
    return make_tree(
        tmp_path / "src",
        {
            "a.txt": "file a",
            "sub/b.txt": "file b",
            "sub/deeper/c.txt": "file c",
            "node_modules/pkg/index.js": "excluded",
            "debug.log": "log line",
        },
    )
