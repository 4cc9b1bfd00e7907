"""Tests for the recent-search list and its store."""

from bandwatch.services.cache.redis_client import KeyValueStore
from bandwatch.services.recent_searches import RecentSearches


async def test_starts_empty(recent_searches):
    assert await recent_searches.get_all() == []


async def test_most_recent_first(recent_searches):
    await recent_searches.add("AAPL")
    await recent_searches.add("MSFT")

    assert await recent_searches.get_all() == ["MSFT", "AAPL"]


async def test_re_adding_moves_to_front(recent_searches):
    for ticker in ["AAPL", "MSFT", "TSLA"]:
        await recent_searches.add(ticker)

    result = await recent_searches.add("AAPL")

    assert result == ["AAPL", "TSLA", "MSFT"]


async def test_capacity(recent_searches):
    for ticker in ["A", "B", "C", "D", "E", "F"]:
        await recent_searches.add(ticker)

    assert await recent_searches.get_all() == ["F", "E", "D", "C", "B"]


async def test_remove(recent_searches):
    for ticker in ["AAPL", "MSFT"]:
        await recent_searches.add(ticker)

    assert await recent_searches.remove("AAPL") == ["MSFT"]
    assert await recent_searches.remove("UNKNOWN") == ["MSFT"]


async def test_clear(recent_searches):
    await recent_searches.add("AAPL")
    await recent_searches.clear()

    assert await recent_searches.get_all() == []


async def test_persists_through_store(memory_store):
    await RecentSearches(memory_store, capacity=5, key="shared").add("AAPL")

    reloaded = RecentSearches(memory_store, capacity=5, key="shared")
    assert await reloaded.get_all() == ["AAPL"]


async def test_ignores_corrupt_value(memory_store):
    await memory_store.set_json("bad", {"not": "a list"})

    assert await RecentSearches(memory_store, key="bad").get_all() == []


async def test_store_round_trip():
    store = KeyValueStore()
    await store.set_json("k", ["x", 1])

    assert await store.get_json("k") == ["x", 1]
    await store.delete("k")
    assert await store.get_json("k") is None
