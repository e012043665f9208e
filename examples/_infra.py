from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def verbose() -> None:  # pragma: no cover (examples only)
    """Show the library's debug records (Lazy evaluation events)."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
