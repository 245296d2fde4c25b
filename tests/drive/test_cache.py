import asyncio

import pytest

from tgdrive.drive import ExpiringCache

from ..helpers.fixtures import FakeClock, cache, clock


def test_get_set(cache: ExpiringCache, clock: FakeClock):
    assert cache.get("a") == (None, False)

    cache.set("a", 1, 10)
    cache.set_default("b", 2)

    assert cache.get("a") == (1, True)
    assert cache.get("b") == (2, True)
    assert len(cache) == 2

    clock.advance(10)

    assert cache.get("a") == (None, False)
    assert cache.get("b") == (2, True)

    clock.advance(cache.default_ttl)

    assert cache.get("b") == (None, False)


def test_none_is_a_value(cache: ExpiringCache):
    cache.set("a", None, 10)

    assert cache.get("a") == (None, True)


def test_set_replaces(cache: ExpiringCache, clock: FakeClock):
    cache.set("a", 1, 10)
    clock.advance(5)
    cache.set("a", 2, 10)
    clock.advance(8)

    assert cache.get("a") == (2, True)


def test_add(cache: ExpiringCache, clock: FakeClock):
    assert cache.add("a", 1, 10)
    assert not cache.add("a", 2, 10)
    assert cache.get("a") == (1, True)

    clock.advance(10)

    assert cache.add("a", 3, 10)
    assert cache.get("a") == (3, True)


def test_delete(cache: ExpiringCache):
    cache.set("a", 1, 10)
    cache.delete("a")
    cache.delete("missing")

    assert cache.get("a") == (None, False)
    assert len(cache) == 0


def test_sweep(cache: ExpiringCache, clock: FakeClock):
    cache.set("a", 1, 10)
    cache.set("b", 1, 20)
    cache.set("c", 1, 30)

    clock.advance(20)

    assert len(cache) == 3
    assert cache.sweep() == 2
    assert len(cache) == 1
    assert cache.get("c") == (1, True)


@pytest.mark.asyncio
async def test_sweeper(clock: FakeClock):
    cache = ExpiringCache(sweep_interval=0.01, clock=clock)

    cache.set("a", 1, 10)
    cache.set("b", 1, 100)
    clock.advance(50)

    async with cache:
        await asyncio.sleep(0.1)
        assert len(cache) == 1

    assert cache._sweeper is None


@pytest.mark.asyncio
async def test_stop_without_start(cache: ExpiringCache):
    await cache.stop()

    cache.start()
    cache.start()

    await cache.stop()
