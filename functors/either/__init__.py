"""
Either
======

Two-sided disjoint union: a value that is definitively one of two shapes.
"""

from .monad import Either, Left, Right, left, right
from .lift import catching

__all__ = (
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "catching",
)
