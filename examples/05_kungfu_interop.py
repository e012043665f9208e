from __future__ import annotations

from _infra import banner, run

from kungfu import Error, LazyCoroResult, Ok, Result

from functors import from_lazy_coro_result, from_result, to_result


async def fetch_score(user_id: int) -> Result[int, str]:
    if user_id < 0:
        return Error("unknown user")
    return Ok(user_id * 10)


async def main() -> None:
    banner("05_kungfu_interop: Result <-> Either")

    print(from_result(Ok(1)).right(lambda v: v + 1))
    print(to_result(from_result(Error("boom")).left(str.upper)))

    score = from_lazy_coro_result(LazyCoroResult(lambda: fetch_score(4)))
    outcome = await score.evaluate()
    outcome.right(lambda v: print(f"score: {v}")).left(lambda e: print(f"error: {e}"))


if __name__ == "__main__":
    run(main)
