"""Tests for move orchestration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from nativefs.api import FileOperations
from nativefs.errors import FsError, FsErrorKind
from nativefs.filesystem import RealFileSystem
from nativefs.mover import move_steps
from nativefs.runner import run_sync


def _cross_device(src: object, dest: object) -> None:
    raise FsError(FsErrorKind.CROSS_DEVICE, "Invalid cross-device link", path=str(src))


class TestMoveSameDevice:
    """Tests for moves satisfied by a single rename."""

    def test_moves_file(self, ops: FileOperations, tmp_path: Path) -> None:
        """Test a file is relocated and the source is gone."""
        src = tmp_path / "move-src.txt"
        dest = tmp_path / "move-dest.txt"
        src.write_text("move me")

        ops.move_sync(src, dest)

        assert not src.exists()
        assert dest.read_text() == "move me"

    def test_moves_directory(self, ops: FileOperations, tmp_path: Path) -> None:
        """Test a directory is relocated with its content."""
        src = tmp_path / "move-dir-src"
        src.mkdir()
        (src / "file.txt").write_text("dir move")
        dest = tmp_path / "move-dir-dest"

        ops.move_sync(src, dest)

        assert not src.exists()
        assert (dest / "file.txt").read_text() == "dir move"

    def test_uses_single_rename(self, recording_fs: MagicMock, tmp_path: Path) -> None:
        """Test no copy or delete happens when rename succeeds."""
        src = tmp_path / "a.txt"
        src.write_text("a")

        run_sync(move_steps(src, tmp_path / "b.txt"), recording_fs)

        recording_fs.rename.assert_called_once()
        recording_fs.copy_file.assert_not_called()
        recording_fs.delete.assert_not_called()

    def test_missing_source_propagates(self, ops: FileOperations, tmp_path: Path) -> None:
        """Test a rename failure other than CROSS_DEVICE propagates."""
        with pytest.raises(FsError) as exc_info:
            ops.move_sync(tmp_path / "missing", tmp_path / "dest")

        assert exc_info.value.kind is FsErrorKind.NOT_FOUND

    def test_non_empty_destination_propagates(
        self, ops: FileOperations, tmp_path: Path
    ) -> None:
        """Test moving onto a non-empty directory fails and leaves both intact."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.txt").write_text("a")
        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "b.txt").write_text("b")

        with pytest.raises(FsError) as exc_info:
            ops.move_sync(src, dest)

        assert exc_info.value.kind is not FsErrorKind.CROSS_DEVICE
        assert (src / "a.txt").read_text() == "a"
        assert (dest / "b.txt").read_text() == "b"


class TestMoveCrossDevice:
    """Tests for the copy-then-delete fallback."""

    def test_file_fallback(self, cross_device_ops: FileOperations, tmp_path: Path) -> None:
        """Test a file is copied into a new parent chain and the source removed."""
        src = tmp_path / "src.txt"
        src.write_text("across devices")
        dest = tmp_path / "other" / "volume" / "dest.txt"

        cross_device_ops.move_sync(src, dest)

        assert not src.exists()
        assert dest.read_text() == "across devices"

    def test_directory_fallback(
        self,
        cross_device_ops: FileOperations,
        sample_tree: Path,
        tmp_path: Path,
        read_tree: Callable[[Path], dict[str, str]],
    ) -> None:
        """Test a whole tree is copied unfiltered and the source removed."""
        expected = read_tree(sample_tree)
        dest = tmp_path / "moved"

        cross_device_ops.move_sync(sample_tree, dest)

        assert not sample_tree.exists()
        assert read_tree(dest) == expected

    def test_fallback_overwrites_existing_files(
        self, cross_device_ops: FileOperations, tmp_path: Path
    ) -> None:
        """Test the fallback copy always overwrites."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "f.txt").write_text("new")
        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "f.txt").write_text("old")

        cross_device_ops.move_sync(src, dest)

        assert (dest / "f.txt").read_text() == "new"

    def test_source_already_gone_after_copy(self, tmp_path: Path) -> None:
        """Test the force delete tolerates a source removed concurrently."""
        fs = MagicMock(wraps=RealFileSystem())
        fs.rename.side_effect = _cross_device
        src = tmp_path / "src.txt"
        src.write_text("data")
        dest = tmp_path / "dest.txt"

        real_copy = RealFileSystem().copy_file

        def copy_then_vanish(a: str, b: str) -> None:
            real_copy(a, b)
            Path(a).unlink()

        fs.copy_file.side_effect = copy_then_vanish

        run_sync(move_steps(src, dest), fs)

        assert dest.read_text() == "data"
        fs.delete.assert_called_once_with(str(src), recursive=True, force=True)

    def test_copy_failure_keeps_source_and_logs(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a failed fallback copy propagates, keeps the source, and warns."""
        fs = MagicMock(wraps=RealFileSystem())
        fs.rename.side_effect = _cross_device
        fs.copy_file.side_effect = FsError(FsErrorKind.UNCLASSIFIED, "disk full")
        src = tmp_path / "src"
        src.mkdir()
        (src / "f.txt").write_text("data")
        dest = tmp_path / "dest"

        with caplog.at_level(logging.WARNING, logger="nativefs.mover"):
            with pytest.raises(FsError) as exc_info:
                run_sync(move_steps(src, dest), fs)

        assert exc_info.value.kind is FsErrorKind.UNCLASSIFIED
        assert (src / "f.txt").read_text() == "data"
        fs.delete.assert_not_called()
        assert "may hold partial data" in caplog.text

    @pytest.mark.asyncio
    async def test_async_fallback(
        self, cross_device_ops: FileOperations, tmp_path: Path
    ) -> None:
        """Test the suspending form takes the same fallback path."""
        src = tmp_path / "src"
        (src / "nested").mkdir(parents=True)
        (src / "nested" / "f.txt").write_text("async")
        dest = tmp_path / "dest"

        await cross_device_ops.move(src, dest)

        assert not src.exists()
        assert (dest / "nested" / "f.txt").read_text() == "async"
