from __future__ import annotations

import asyncio

from _infra import banner, run, verbose

from functors import lazy


async def fetch_users() -> list[dict[str, str]]:
    print("fetching users...")
    await asyncio.sleep(0.01)
    return [{"email": "user1@email.com"}, {"email": "user2@email.com"}]


async def main() -> None:
    banner("03_lazy_async: deferred async chain, shared by concurrent awaiters")
    verbose()

    emails = lazy(fetch_users).map(lambda users: [u["email"] for u in users])
    print("nothing fetched yet")

    first, second = await asyncio.gather(emails.evaluate(), emails.evaluate())
    print(first)
    print(first is second)


if __name__ == "__main__":
    run(main)
