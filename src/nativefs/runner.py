"""Drive composite operations against blocking or suspending primitives.

Composite operations are written once, as generators that yield a
:class:`Call` for every primitive they need and receive its result back.
``run_sync`` performs each call on a FileSystem; ``run_async`` awaits each
call on an AsyncFileSystem. A failing primitive is thrown back into the
generator at the yield point, so error classification happens inside the
operation exactly as if the call had been made inline.
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from nativefs.protocols import AsyncFileSystem, FileSystem

__all__ = ["Call", "Steps", "call", "run_async", "run_sync"]

T = TypeVar("T")


@dataclass(frozen=True)
class Call:
    """A request for one primitive filesystem operation.

    Attributes:
        op: Name of the primitive method on the adapter.
        args: Positional arguments.
        kwargs: Keyword arguments.
    """

    op: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


Steps = Generator[Call, Any, T]


def call(op: str, *args: Any, **kwargs: Any) -> Call:
    """Build a Call for the named primitive."""
    return Call(op, args, kwargs)


def run_sync(steps: Steps[T], fs: FileSystem) -> T:
    """Run an operation to completion on blocking primitives.

    Args:
        steps: Operation generator.
        fs: Blocking filesystem adapter.

    Returns:
        The operation's return value.
    """
    try:
        request = next(steps)
        while True:
            try:
                result = getattr(fs, request.op)(*request.args, **request.kwargs)
            except Exception as e:
                request = steps.throw(e)
            else:
                request = steps.send(result)
    except StopIteration as stop:
        return stop.value


async def run_async(steps: Steps[T], afs: AsyncFileSystem) -> T:
    """Run an operation to completion on suspending primitives.

    Args:
        steps: Operation generator.
        afs: Suspending filesystem adapter.

    Returns:
        The operation's return value.
    """
    try:
        request = next(steps)
        while True:
            try:
                result = await getattr(afs, request.op)(*request.args, **request.kwargs)
            except Exception as e:
                request = steps.throw(e)
            else:
                request = steps.send(result)
    except StopIteration as stop:
        return stop.value
