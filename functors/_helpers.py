"""Internal helpers for functors.

Awaitable detection and sharing used by Lazy.
These are not part of the public API."""

from __future__ import annotations

import asyncio
import inspect
import typing
from collections.abc import Awaitable, Callable


def is_awaitable(value: object) -> typing.TypeGuard[Awaitable[typing.Any]]:
    """True for coroutines, futures, tasks and anything defining __await__."""
    return inspect.isawaitable(value)


async def then[T, R](pending: Awaitable[T], fn: Callable[[T], R | Awaitable[R]]) -> R:
    """
    Await `pending`, apply `fn`, await the outcome too if it is awaitable.

    Continuation semantics of a promise: a function returning an awaitable
    does not produce a nested awaitable.
    """
    value = await pending
    result = fn(value)
    if is_awaitable(result):
        return await result
    return typing.cast(R, result)


class SharedAwaitable[T]:
    """
    Awaitable that runs the wrapped awaitable at most once.

    A coroutine can only be awaited once; this wrapper schedules it as a task
    on the running loop the first time it is awaited and hands the same future
    to every awaiter afterwards, so concurrent and repeated awaits all observe
    one execution and one outcome (value or exception).
    """

    __slots__ = ("_awaitable", "_future")

    def __init__(self, awaitable: Awaitable[T], /) -> None:
        self._awaitable = awaitable
        self._future: asyncio.Future[T] | None = None

    def __await__(self) -> typing.Generator[typing.Any, None, T]:
        if self._future is None:
            self._future = asyncio.ensure_future(self._awaitable)
        return self._future.__await__()

    def __repr__(self) -> str:
        state = "pending" if self._future is None or not self._future.done() else "done"
        return f"SharedAwaitable({state})"


__all__ = (
    "is_awaitable",
    "then",
    "SharedAwaitable",
)
