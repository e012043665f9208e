"""Lazy - deferred, memoized computation

Lazy wraps a zero-argument computation and runs it only when evaluated,
caching whatever it returned. The computation may be synchronous or return an
awaitable; mapping works the same way for both, switching to awaiting
composition as soon as a step produces an awaitable.

The evaluated flag and the cache slot are the only mutable state in the
library. They are written once, under a lock."""

from __future__ import annotations

import logging
import threading
import typing
from collections.abc import Awaitable, Callable

from .._helpers import SharedAwaitable, is_awaitable, then
from .._types import Computation

logger = logging.getLogger(__name__)


class Lazy[T]:
    """
    Deferred computation evaluated at most once.

    Example:
        def double() -> int:
            print("Doubling...")
            return 21 * 2

        lazy_double = lazy(double)
        lazy_double.evaluate()  # prints "Doubling...", returns 42
        lazy_double.evaluate()  # returns 42, computation not called again

        lazy_triple = lazy_double.map(lambda value: value * 3)
        lazy_triple.evaluate()  # prints "Doubling..." (new chain), returns 126

    Async computations:

        emails = (
            lazy(lambda: client.get("/users"))
            .map(lambda response: response.json())
            .map(lambda users: [user["email"] for user in users])
        )
        result = await emails.evaluate()

    Failure policy:
    - A computation that raises synchronously leaves the Lazy unevaluated;
      the exception propagates and the next evaluate() runs it again.
    - An async computation is cached as a shared awaitable as soon as it is
      created; if it fails, every await re-raises the same exception.

    NOTE: The shared awaitable is not a coroutine. `await` it (gather works
          too); for asyncio.run or asyncio.create_task wrap it first:

              async def main():
                  return await emails.evaluate()

              asyncio.run(main())
    """

    __slots__ = ("_computation", "_evaluated", "_value", "_lock")

    def __init__(self, computation: Computation[T], /) -> None:
        """Create Lazy from a zero-argument fn. The fn is not called."""
        self._computation = computation
        self._evaluated = False
        self._value: T | Awaitable[T] | None = None
        self._lock = threading.RLock()

    @staticmethod
    def create[V](computation: Computation[V]) -> Lazy[V]:
        """Create a Lazy. Same as `lazy(computation)`."""
        return Lazy(computation)

    @property
    def evaluated(self) -> bool:
        """Whether the computation has already run and been cached."""
        return self._evaluated

    def map[R](self, fn: Callable[[T], R | Awaitable[R]], /) -> Lazy[R]:
        """
        Defer `fn` until evaluation.

        The new Lazy runs this Lazy's computation (not its cache) and then
        `fn`. If the computation produced an awaitable, `fn` is chained as a
        continuation and the result is awaitable too. Nothing runs now.
        """
        computation = self._computation

        def run() -> R | Awaitable[R]:
            result = computation()
            if is_awaitable(result):
                return then(result, fn)
            return fn(typing.cast("T", result))

        return Lazy(run)

    def evaluate(self) -> T | Awaitable[T]:
        """
        Run the computation on first call, return the cached value afterwards.

        Awaitable results are cached as a shared awaitable: concurrent and
        repeated awaiters observe one underlying execution.
        """
        if self._evaluated:
            logger.debug("%r: returning cached value", self)
            return typing.cast("T | Awaitable[T]", self._value)

        with self._lock:
            if not self._evaluated:
                logger.debug("%r: running computation", self)
                value = self._computation()
                if is_awaitable(value):
                    logger.debug("%r: computation returned an awaitable, sharing it", self)
                    value = SharedAwaitable(value)
                self._value = value
                self._evaluated = True

        return typing.cast("T | Awaitable[T]", self._value)

    def unwrap(self) -> T | Awaitable[T]:
        """Alias for evaluate()."""
        return self.evaluate()

    # Protocol methods

    def __call__(self) -> T | Awaitable[T]:
        return self.evaluate()

    def __repr__(self) -> str:
        return f"Lazy(evaluated={self._evaluated})"


def lazy[T](computation: Computation[T]) -> Lazy[T]:
    """
    Defer a zero-argument computation.

    **When to use:** Expensive or effectful work that may never be needed,
    or that must run at most once no matter how many consumers ask for it.
    """
    return Lazy(computation)


__all__ = (
    "Lazy",
    "lazy",
)
