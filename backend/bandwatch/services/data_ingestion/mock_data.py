"""
Mock Data Generator

Generates deterministic mock daily closes for development and testing.
"""

import random
from datetime import date, timedelta
from typing import Optional

from bandwatch.core.config import settings
from bandwatch.schemas.market import DataSource, PricePoint, PriceSeries
from bandwatch.services.data_ingestion.interface import DataProviderInterface


# Base prices for common symbols
SYMBOL_BASE_PRICES = {
    "AAPL": 190.0,
    "MSFT": 410.0,
    "GOOGL": 150.0,
    "AMZN": 180.0,
    "TSLA": 200.0,
    "005930.KS": 72000.0,
}


def get_base_price(symbol: str, rng: random.Random) -> float:
    """Get base price for a symbol."""
    return SYMBOL_BASE_PRICES.get(symbol, 50.0 + rng.random() * 450)


def trading_days(count: int, end: date) -> list[date]:
    """The `count` most recent weekdays up to and including `end`."""
    days: list[date] = []
    current = end
    while len(days) < count:
        if current.weekday() < 5:
            days.append(current)
        current -= timedelta(days=1)
    days.reverse()
    return days


def generate_mock_series(
    symbol: str,
    lookback: int,
    end_date: Optional[date] = None,
    daily_volatility: float = 0.015,
) -> PriceSeries:
    """
    Generate a random-walk closing series.

    Seeded by symbol, so the same symbol and end date always give the
    same series.
    """
    rng = random.Random(symbol)
    price = get_base_price(symbol, rng)

    points = []
    for day in trading_days(lookback, end_date or date.today()):
        price = max(0.01, price * (1 + rng.gauss(0, daily_volatility)))
        points.append(PricePoint(date=day, price=round(price, 2)))

    return PriceSeries(symbol=symbol, source=DataSource.MOCK, points=points)


class MockProvider(DataProviderInterface):
    """Offline provider backed by generate_mock_series."""

    def __init__(self, lookback: Optional[int] = None, end_date: Optional[date] = None):
        self.lookback = lookback or settings.lookback_days
        self.end_date = end_date

    @property
    def source(self) -> DataSource:
        return DataSource.MOCK

    async def fetch_daily_series(self, ticker: str) -> PriceSeries:
        return generate_mock_series(ticker, self.lookback, self.end_date)
