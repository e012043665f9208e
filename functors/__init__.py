"""
Functors library: small generic containers for functional pipelines.

- Either[L, R]  - two-sided disjoint union (left / right)
- Maybe[T]      - optional value with one level of auto-flattening
- Lazy[T]       - deferred computation, sync or async, evaluated at most once
- History[T]    - immutable append-only value history with rollback

Containers are independent of each other. The `interop` module bridges them
to kungfu's Result, Option and LazyCoroResult.
"""

import logging

# Core types
from ._types import Computation, Mapper, Thunk

# Either
from . import either
from .either import Either, Left, Right, catching, left, right

# Maybe
from .maybe import Maybe, maybe

# Lazy
from .lazy import Lazy, lazy

# History
from .history import History, history

# kungfu bridges
from . import interop
from .interop import from_lazy_coro_result, from_option, from_result, to_option, to_result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Computation",
    "Mapper",
    "Thunk",
    # Either
    "either",
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "catching",
    # Maybe
    "Maybe",
    "maybe",
    # Lazy
    "Lazy",
    "lazy",
    # History
    "History",
    "history",
    # Interop
    "interop",
    "from_result",
    "to_result",
    "from_option",
    "to_option",
    "from_lazy_coro_result",
)
