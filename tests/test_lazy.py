import asyncio
import re
import threading
import time
from unittest.mock import Mock

import pytest

from functors import Lazy, lazy


def init():
    return "44fee407li841ng-la41zy3879"


@pytest.fixture
def remove_numbers():
    return Mock(side_effect=lambda val: re.sub(r"\d", "", val))


@pytest.fixture
def to_upper():
    return Mock(side_effect=lambda val: val.upper())


def test_factories_create_lazy():
    assert isinstance(lazy(init), Lazy)
    assert isinstance(Lazy.create(init), Lazy)


def test_factory_does_not_run_computation():
    computation = Mock(return_value=1)
    lz = lazy(computation)
    computation.assert_not_called()
    assert lz.evaluated is False


def test_map_defers_mapping_functions(remove_numbers, to_upper):
    lz = lazy(init).map(remove_numbers).map(to_upper)

    remove_numbers.assert_not_called()
    to_upper.assert_not_called()

    lz.evaluate()

    remove_numbers.assert_called_once()
    to_upper.assert_called_once()


def test_evaluate_returns_computed_value(remove_numbers, to_upper):
    lz = lazy(init).map(remove_numbers).map(to_upper)
    assert lz.evaluate() == "FEELING-LAZY"


def test_evaluate_runs_chain_once(remove_numbers, to_upper):
    lz = lazy(init).map(remove_numbers).map(to_upper)

    assert lz.evaluate() == "FEELING-LAZY"
    assert lz.evaluate() == "FEELING-LAZY"
    assert remove_numbers.call_count == 1
    assert to_upper.call_count == 1
    assert lz.evaluated is True


def test_evaluate_returns_identical_cached_object():
    lz = lazy(lambda: object())
    assert lz.evaluate() is lz.evaluate()


def test_unwrap_and_call_are_evaluate_aliases():
    computation = Mock(return_value=42)
    lz = lazy(computation)
    assert lz.unwrap() == 42
    assert lz() == 42
    assert lz.evaluate() == 42
    computation.assert_called_once()


def test_map_triples():
    assert lazy(lambda: 42).map(lambda x: x * 3).evaluate() == 126


def test_mapped_lazy_runs_its_own_chain():
    computation = Mock(return_value=21)
    base = lazy(computation)
    doubled = base.map(lambda v: v * 2)

    assert base.evaluate() == 21
    assert doubled.evaluate() == 42
    assert computation.call_count == 2


def test_steps_run_in_composition_order():
    calls = []

    def step(name):
        def fn(value):
            calls.append(name)
            return value + [name]
        return fn

    lz = lazy(lambda: []).map(step("a")).map(step("b")).map(step("c"))
    assert lz.evaluate() == ["a", "b", "c"]
    assert calls == ["a", "b", "c"]


def test_failing_computation_runs_again():
    attempts = Mock(side_effect=[RuntimeError("first"), "ok"])
    lz = lazy(attempts)

    with pytest.raises(RuntimeError):
        lz.evaluate()
    assert lz.evaluated is False

    assert lz.evaluate() == "ok"
    assert attempts.call_count == 2


def test_threads_share_one_evaluation():
    calls = Mock()
    barrier = threading.Barrier(8)

    def computation():
        calls()
        time.sleep(0.01)
        return "value"

    lz = lazy(computation)
    results = []

    def worker():
        barrier.wait()
        results.append(lz.evaluate())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == ["value"] * 8
    calls.assert_called_once()


# Асинхронные вычисления


DATA = {
    "users": [
        {"email": "user1@email.com"},
        {"email": "user2@email.com"},
        {"email": "user3@email.com"},
    ],
}


async def fetch():
    await asyncio.sleep(0)
    return DATA


async def to_json(payload):
    await asyncio.sleep(0)
    return payload


@pytest.mark.asyncio
async def test_evaluate_resolves_async_chain():
    lz = (
        lazy(fetch)
        .map(to_json)
        .map(lambda data: data["users"])
        .map(lambda users: [u["email"] for u in users])
    )

    emails = await lz.evaluate()

    assert emails == [
        "user1@email.com",
        "user2@email.com",
        "user3@email.com",
    ]


@pytest.mark.asyncio
async def test_sync_computation_with_async_mapper():
    lz = lazy(lambda: 2).map(to_json).map(lambda v: v + 1)
    assert await lz.evaluate() == 3


@pytest.mark.asyncio
async def test_async_value_is_awaitable_many_times():
    calls = Mock()

    async def computation():
        calls()
        return 7

    lz = lazy(computation).map(lambda v: v * 2)

    assert await lz.evaluate() == 14
    assert await lz.evaluate() == 14
    calls.assert_called_once()


@pytest.mark.asyncio
async def test_concurrent_awaiters_share_one_execution():
    calls = Mock()

    async def computation():
        calls()
        await asyncio.sleep(0.01)
        return "done"

    lz = lazy(computation)
    pending = lz.evaluate()
    assert lz.evaluate() is pending

    results = await asyncio.gather(lz.evaluate(), lz.evaluate(), lz.evaluate())

    assert results == ["done", "done", "done"]
    calls.assert_called_once()


@pytest.mark.asyncio
async def test_async_failure_is_cached():
    calls = Mock()

    async def computation():
        calls()
        raise ValueError("rejected")

    lz = lazy(computation)

    with pytest.raises(ValueError):
        await lz.evaluate()
    with pytest.raises(ValueError):
        await lz.evaluate()
    calls.assert_called_once()


def test_async_value_runs_under_asyncio_run_via_wrapper():
    calls = Mock()

    async def computation():
        calls()
        return "ready"

    lz = lazy(computation)

    async def main():
        return await lz.evaluate()

    assert asyncio.run(main()) == "ready"
    assert asyncio.run(main()) == "ready"
    calls.assert_called_once()
