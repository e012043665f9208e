from __future__ import annotations

from _infra import banner

from functors import history


def main() -> None:
    banner("04_history_undo: append, rollback, reset")

    doc = history("").map(lambda s: s + "Hello").map(lambda s: s + ", world").map(lambda s: s + "!")
    print(repr(doc.current()))
    print(repr(doc.rollback().current()))
    print(repr(doc.rollback(2).current()))
    print(repr(doc.rollback(10).current()))
    print(list(doc))


if __name__ == "__main__":
    main()
