"""
Core type definitions for functors.

Aliases shared by the containers.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Mapper = function that transforms a wrapped value
type Mapper[T, R] = Callable[[T], R]

# Thunk = zero-argument function producing a value on demand
type Thunk[T] = Callable[[], T]

# Computation = what Lazy stores: a thunk returning a value or an awaitable of it
type Computation[T] = Callable[[], T | Awaitable[T]]

__all__ = (
    "Mapper",
    "Thunk",
    "Computation",
)
