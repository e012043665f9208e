"""
History
=======

Immutable, append-only value history with rollback and reset.
"""

from .monad import History, history

__all__ = (
    "History",
    "history",
)
