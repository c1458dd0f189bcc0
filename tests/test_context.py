"""Tests for context module."""

from __future__ import annotations

from unittest.mock import MagicMock

from nativefs.api import FileOperations
from nativefs.context import AppContext, create_context
from nativefs.filesystem import RealFileSystem


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_create_with_ops(self) -> None:
        """Test creating context with an injected facade."""
        ops = MagicMock()
        ctx = AppContext(ops=ops)
        assert ctx.ops is ops


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_create_context_default(self) -> None:
        """Test creating context with default parameters."""
        ctx = create_context()
        assert isinstance(ctx.ops, FileOperations)
        assert isinstance(ctx.ops.fs, RealFileSystem)

    def test_create_context_wires_dependencies(self) -> None:
        """Test both facade adapters share the injected filesystem."""
        filesystem = MagicMock()
        ctx = create_context(filesystem=filesystem)
        assert ctx.ops.fs is filesystem
        assert ctx.ops.afs.fs is filesystem
