"""
History - append-only value history
===================================

Every transformation appends a value; rollback and reset walk back without
touching the original. Steps are stored as a persistent linked sequence, so
every History derived from another shares its older steps.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._types import Mapper


@dataclass(frozen=True, slots=True, eq=False)
class _Step[T]:
    """One element of a history, pointing at the element before it."""

    value: T
    previous: _Step[T] | None
    depth: int


class History[T]:
    """
    Immutable history of values of one type.

    The first value is the initial one, the last value is the current one.
    A History is never empty.

    Example:
        hs = history(10).map(lambda v: v + 5).map(lambda v: v * 2)
        hs.current()               # 30
        hs.rollback().current()    # 15
        hs.reset().current()       # 10
        hs.rollback(99).current()  # 10, clamped to the initial value
    """

    __slots__ = ("_head", "_initial")

    def __init__(self, head: _Step[T], initial: _Step[T], /) -> None:
        self._head = head
        self._initial = initial

    @staticmethod
    def create[V](initial: V) -> History[V]:
        """Start a history holding only `initial`."""
        step = _Step(initial, None, 0)
        return History(step, step)

    @staticmethod
    def of[V](value: V) -> History[V]:
        """Alias for create()."""
        return History.create(value)

    def current(self) -> T:
        """The most recently appended value."""
        return self._head.value

    def map(self, fn: Mapper[T, T], /) -> History[T]:
        """Append `fn(current())`. `fn` is called once, right away."""
        step = _Step(fn(self._head.value), self._head, self._head.depth + 1)
        return History(step, self._initial)

    def reset(self) -> History[T]:
        """A history holding only the initial value."""
        return History(self._initial, self._initial)

    def rollback(self, steps: int = 1) -> History[T]:
        """
        Drop the last `steps` values.

        Rolling back as far as the initial value or past it gives the same
        result as reset(). Zero or negative steps drop nothing.
        """
        if steps >= len(self):
            return self.reset()

        head = self._head
        for _ in range(max(steps, 0)):
            if head.previous is None:
                break
            head = head.previous
        return History(head, self._initial)

    def __len__(self) -> int:
        return self._head.depth + 1

    def __iter__(self) -> Iterator[T]:
        """Values from the initial one to the current one."""
        values: list[T] = []
        step: _Step[T] | None = self._head
        while step is not None:
            values.append(step.value)
            step = step.previous
        return reversed(values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"History({list(self)!r})"


def history[T](initial: T) -> History[T]:
    """Start a history holding only `initial`."""
    return History.create(initial)


__all__ = (
    "History",
    "history",
)
