"""
Bridges to kungfu.

Functions for moving values between the functors containers and the kungfu
types (Result, Option, LazyCoroResult) used by async pipelines.

    Result[T, E]         <-> Either[E, T]   (Ok is right, Error is left)
    Option[T]            <-> Maybe[T]       (Nothing is None)
    LazyCoroResult[T, E]  -> Lazy[Either[E, T]] (evaluates to an awaitable)
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from .either import Either, Left, Right, left, right
from .lazy import Lazy
from .maybe import Maybe


def from_result[T, E](result: Result[T, E]) -> Either[E, T]:
    """
    Convert a kungfu Result into an Either.

    Example:
        from_result(Ok(5)).unwrap()     # 5, right side
        from_result(Error("x")).is_left()  # True
    """
    match result:
        case Ok(value):
            return right(value)
        case Error(err):
            return left(err)
        case _ as unreachable:
            assert_never(unreachable)


def to_result[L, R](either: Either[L, R]) -> Result[R, L]:
    """Convert an Either into a kungfu Result. Dual of from_result()."""
    match either:
        case Right(value):
            return Ok(value)
        case Left(err):
            return Error(err)
        case _ as unreachable:
            assert_never(unreachable)


def from_option[T](option: Option[T]) -> Maybe[T]:
    """Convert a kungfu Option into a Maybe. Nothing becomes an empty Maybe."""
    match option:
        case Some(value):
            return Maybe(value)
        case _:
            return Maybe(None)


def to_option[T](value: Maybe[T]) -> Option[T]:
    """
    Convert a Maybe into a kungfu Option.

    NOTE: Nested Maybes are not flattened; call flat() first if needed.
    """
    if value.is_empty():
        return Nothing()
    return Some(value.unwrap())


def from_lazy_coro_result[T, E](
    interp: LazyCoroResult[T, E],
) -> Lazy[Either[E, T]]:
    """
    Defer a kungfu LazyCoroResult behind a Lazy.

    Nothing runs until the Lazy is evaluated; the awaited outcome is an
    Either and is shared by every awaiter.

    Example:
        user = from_lazy_coro_result(fetch_user(42)).map(lambda e: e.right(render))
        (await user.evaluate()).left(report)
    """

    async def run() -> Either[E, T]:
        return from_result(await interp())

    return Lazy(run)


__all__ = (
    "from_result",
    "to_result",
    "from_option",
    "to_option",
    "from_lazy_coro_result",
)
