"""
Recent Searches

Bounded, most-recent-first list of analyzed tickers.
"""

from typing import Optional

from bandwatch.core.config import settings
from bandwatch.services.cache.redis_client import KeyValueStore, get_store


class RecentSearches:
    """
    Most-recent-first ticker list with a fixed capacity.

    Adding a ticker already in the list moves it to the front.
    """

    def __init__(
        self,
        store: KeyValueStore,
        capacity: Optional[int] = None,
        key: Optional[str] = None,
    ):
        self.store = store
        self.capacity = capacity or settings.recent_search_capacity
        self.key = key or settings.recent_search_key

    async def get_all(self) -> list[str]:
        saved = await self.store.get_json(self.key)
        if not isinstance(saved, list):
            return []
        return [t for t in saved if isinstance(t, str)][: self.capacity]

    async def add(self, ticker: str) -> list[str]:
        current = await self.get_all()
        updated = [ticker] + [t for t in current if t != ticker]
        updated = updated[: self.capacity]
        await self.store.set_json(self.key, updated)
        return updated

    async def remove(self, ticker: str) -> list[str]:
        current = await self.get_all()
        updated = [t for t in current if t != ticker]
        await self.store.set_json(self.key, updated)
        return updated

    async def clear(self) -> None:
        await self.store.delete(self.key)


# Singleton instance
_recent_searches: Optional[RecentSearches] = None


def get_recent_searches() -> RecentSearches:
    """Get the recent searches singleton."""
    global _recent_searches
    if _recent_searches is None:
        _recent_searches = RecentSearches(get_store())
    return _recent_searches
