"""
Lazy
====

Deferred computation, synchronous or async, cached after first evaluation.
"""

from .monad import Lazy, lazy

__all__ = (
    "Lazy",
    "lazy",
)
