"""Either - two-sided disjoint union

An Either holds exactly one value, either on the left side or on the right
side. Conventionally Left is the failure/alternate path and Right the
success/primary path, but the type itself doesn't care.

Operations never raise by themselves: a side-specific transform runs only on
its side and passes the other side through untouched, which lets callers
shape both branches in one fluent chain."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from .._types import Mapper


class Either[L, R](abc.ABC):
    """
    Either a `Left[L, R]` or a `Right[L, R]`.

    Program against this type; the two variants are the only implementations.

    Example:
        from functors import left, right

        def divide(numerator: float, denominator: float) -> Either[Exception, float]:
            if denominator == 0:
                return left(ZeroDivisionError("Division by zero is not possible."))
            return right(numerator / denominator)

        divide(10, 2).right(show_result).left(show_error)

    Pattern matching works on the variants:

        match divide(10, 0):
            case Right(value): ...
            case Left(error): ...
    """

    __slots__ = ()

    @abc.abstractmethod
    def left[T](self, fn: Mapper[L, T], /) -> Either[T, R]:
        """
        Transform the value **if this is the left side**.

        On the right side `fn` is not called and the right value is carried
        into a new Either unchanged.
        """

    @abc.abstractmethod
    def right[T](self, fn: Mapper[R, T], /) -> Either[L, T]:
        """
        Transform the value **if this is the right side**.

        On the left side `fn` is not called and the left value is carried
        into a new Either unchanged.
        """

    @abc.abstractmethod
    def is_left(self) -> bool:
        """True when the instance is on the left side."""

    @abc.abstractmethod
    def is_right(self) -> bool:
        """True when the instance is on the right side."""

    @abc.abstractmethod
    def unwrap(self) -> L | R:
        """
        Return the contained value, whichever side holds it.

        Check `is_left()`/`is_right()` first, or rely on earlier transforms
        having resolved both sides to one type.
        """


@dataclass(frozen=True, slots=True)
class Left[L, R](Either[L, R]):
    """Left side of an Either."""

    value: L

    @staticmethod
    def create[A, B](value: A) -> Either[A, B]:
        return Left(value)

    def left[T](self, fn: Mapper[L, T], /) -> Either[T, R]:
        return Left(fn(self.value))

    def right[T](self, fn: Mapper[R, T], /) -> Either[L, T]:
        _ = fn
        return Left(self.value)

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def unwrap(self) -> L:
        return self.value

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, slots=True)
class Right[L, R](Either[L, R]):
    """Right side of an Either."""

    value: R

    @staticmethod
    def create[A, B](value: B) -> Either[A, B]:
        return Right(value)

    def left[T](self, fn: Mapper[L, T], /) -> Either[T, R]:
        _ = fn
        return Right(self.value)

    def right[T](self, fn: Mapper[R, T], /) -> Either[L, T]:
        return Right(fn(self.value))

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def unwrap(self) -> R:
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


# Convenience constructors
def left[L, R](value: L) -> Either[L, R]:
    """Create the left side of an Either. Any value is accepted, None included."""
    return Left(value)


def right[L, R](value: R) -> Either[L, R]:
    """Create the right side of an Either. Any value is accepted, None included."""
    return Right(value)


__all__ = (
    "Either",
    "Left",
    "Right",
    "left",
    "right",
)
