"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta
from typing import Callable, Optional

import pytest

from bandwatch.schemas.indicators import IndicatorPoint
from bandwatch.schemas.market import DataSource, PricePoint, PriceSeries
from bandwatch.services.base import TickerNotFoundError
from bandwatch.services.cache.redis_client import KeyValueStore
from bandwatch.services.data_ingestion.interface import DataProviderInterface
from bandwatch.services.recent_searches import RecentSearches

START_DATE = date(2024, 1, 1)


def build_points(prices: list[float], start: date = START_DATE) -> list[PricePoint]:
    return [
        PricePoint(date=start + timedelta(days=i), price=price)
        for i, price in enumerate(prices)
    ]


class FakeProvider(DataProviderInterface):
    """In-memory provider keyed by symbol. Unknown symbols raise NotFound."""

    def __init__(self, data: Optional[dict[str, list[PricePoint]]] = None, error: Exception = None):
        self.data = data or {}
        self.error = error
        self.calls: list[str] = []

    @property
    def source(self) -> DataSource:
        return DataSource.MOCK

    async def fetch_daily_series(self, ticker: str) -> PriceSeries:
        self.calls.append(ticker)
        if self.error:
            raise self.error
        if ticker not in self.data:
            raise TickerNotFoundError("FakeProvider", f"Unknown symbol {ticker}")
        return PriceSeries(symbol=ticker, source=DataSource.MOCK, points=self.data[ticker])


@pytest.fixture
def make_points() -> Callable[..., list[PricePoint]]:
    """Factory for consecutive-day price points."""
    return build_points


@pytest.fixture
def make_indicator() -> Callable[..., IndicatorPoint]:
    """Factory for a hand-built indicator point."""

    def _make(price, moving_average, upper_band, lower_band, day: int = 0) -> IndicatorPoint:
        return IndicatorPoint(
            date=START_DATE + timedelta(days=day),
            price=price,
            moving_average=moving_average,
            upper_band=upper_band,
            lower_band=lower_band,
        )

    return _make


@pytest.fixture
def flat_series() -> list[PricePoint]:
    """25 identical closes of 100.00."""
    return build_points([100.0] * 25)


@pytest.fixture
def sell_off_series() -> list[PricePoint]:
    """20 closes at 100 followed by a drop to 80."""
    return build_points([100.0] * 20 + [80.0])


@pytest.fixture
def memory_store() -> KeyValueStore:
    """Key-value store without Redis."""
    return KeyValueStore()


@pytest.fixture
def recent_searches(memory_store) -> RecentSearches:
    return RecentSearches(memory_store, capacity=5, key="test_recent")
