"""
Maybe
=====

Optional value wrapper with mapping and one level of auto-flattening.
"""

from .monad import Maybe, maybe

__all__ = (
    "Maybe",
    "maybe",
)
