"""
Maybe - optional value
======================

A Maybe wraps a value that may be absent. Absence means `None` and nothing
else: 0, "", False and empty collections are all present values.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._types import Mapper, Thunk


@dataclass(frozen=True, slots=True)
class Maybe[T]:
    """
    Container that may or may not hold a value of type T.

    Example:
        port = (
            maybe(os.environ.get("PORT"))
            .map(int)
            .map_empty(lambda: 3000)
            .unwrap()
        )

    A Maybe may hold another Maybe; `flat()` removes one level of nesting and
    `flat_map()` flattens on both sides of the mapping.
    """

    value: T | None

    @staticmethod
    def create[V](value: V | None) -> Maybe[V]:
        """Create a Maybe. Same as `maybe(value)`."""
        return Maybe(value)

    def is_present(self) -> bool:
        return self.value is not None

    def is_empty(self) -> bool:
        return self.value is None

    def map[R](self, fn: Mapper[T, R], /) -> Maybe[R]:
        """
        Apply `fn` to the value if it is present and wrap the result.

        An empty Maybe stays empty and `fn` is not called.
        """
        if self.value is not None:
            return Maybe(fn(self.value))
        return Maybe(None)

    def map_empty[R](self, fn: Thunk[R], /) -> Maybe[T | R]:
        """
        Call `fn` with no arguments if the Maybe is empty and wrap the result.

        A present value is kept and `fn` is not called.
        """
        if self.value is None:
            return Maybe(fn())
        return Maybe(self.value)

    def unwrap(self) -> T | None:
        """Return the wrapped value, or None when empty."""
        return self.value

    def flat(self) -> Maybe[typing.Any]:
        """
        Remove one level of nesting.

        If the wrapped value is itself a Maybe, that inner Maybe is returned
        as is; otherwise this Maybe is returned. `maybe(maybe(maybe(1))).flat()`
        is still nested once.
        """
        if isinstance(self.value, Maybe):
            return self.value
        return self

    def flat_map[R](self, fn: Mapper[typing.Any, R | Maybe[R]], /) -> Maybe[R]:
        """
        Flatten, map, flatten again.

        `fn` receives the innermost-by-one value and may return either a raw
        value or a Maybe; the result is never a Maybe of a Maybe made by `fn`.

        Example:
            maybe("value").flat_map(lambda v: maybe(v.upper())).unwrap()  # "VALUE"
            maybe(maybe("value")).flat_map(str.upper).unwrap()            # "VALUE"
        """
        return self.flat().map(fn).flat()

    def __repr__(self) -> str:
        return f"Maybe({self.value!r})"


def maybe[T](value: T | None) -> Maybe[T]:
    """
    Wrap a possibly-None value.

    **When to use:** Environment variables, dict lookups, optional fields -
    anywhere a value can be missing and you want to keep chaining.
    """
    return Maybe(value)


__all__ = (
    "Maybe",
    "maybe",
)
