"""
Lifting exception-raising code into Either.
"""

from __future__ import annotations

from .._types import Thunk
from .monad import Either, left, right


def catching[T](thunk: Thunk[T]) -> Either[Exception, T]:
    """
    Run `thunk`, return `right(result)` or `left(exc)` for the exception it raised.

    **When to use:** Bridge between exception-based code and Either pipelines.

    Example:
        from functors import catching
        import json

        catching(lambda: json.loads(raw)).right(render).left(report)

    NOTE: Catches Exception subclasses only. KeyboardInterrupt and friends
          keep propagating.
    """
    try:
        return right(thunk())
    except Exception as exc:
        return left(exc)


__all__ = ("catching",)
