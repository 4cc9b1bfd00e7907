"""
Data Ingestion Service Implementation

Fetches a daily closing series through the configured provider and
normalizes it: ascending dates, one point per date, bounded length.
"""

import logging
import re
from typing import Optional

from bandwatch.core.config import settings
from bandwatch.schemas.market import DataSource, PricePoint, PriceSeries
from bandwatch.services.base import TickerNotFoundError, ValidationError
from bandwatch.services.data_ingestion.interface import (
    DataIngestionServiceInterface,
    DataProviderInterface,
)

logger = logging.getLogger(__name__)

TICKER_PATTERN = re.compile(r"^[A-Z0-9.\-^=]{1,20}$")


def normalize_ticker(ticker: str) -> str:
    """Upper-case and validate a ticker symbol."""
    symbol = (ticker or "").strip().upper()
    if not symbol:
        raise ValidationError("DataIngestionService", "Ticker symbol is required")
    if not TICKER_PATTERN.match(symbol):
        raise ValidationError(
            "DataIngestionService",
            f"Invalid ticker symbol: {ticker!r}",
            {"ticker": ticker},
        )
    return symbol


def normalize_points(points: list[PricePoint], lookback: int) -> list[PricePoint]:
    """
    Sort ascending by date, keep the last value seen for a repeated date,
    and keep only the `lookback` most recent points.
    """
    by_date: dict = {}
    for point in points:
        by_date[point.date] = point
    ordered = [by_date[d] for d in sorted(by_date)]
    return ordered[-lookback:] if lookback > 0 else ordered


def create_provider(name: str) -> DataProviderInterface:
    """Build the provider adapter named in settings."""
    source = DataSource(name)

    if source == DataSource.ALPHA_VANTAGE:
        from bandwatch.services.data_ingestion.alpha_vantage_adapter import AlphaVantageProvider
        return AlphaVantageProvider()
    if source == DataSource.YAHOO:
        from bandwatch.services.data_ingestion.yahoo_adapter import YahooProvider
        return YahooProvider()

    from bandwatch.services.data_ingestion.mock_data import MockProvider
    return MockProvider()


class DataIngestionService(DataIngestionServiceInterface):
    """
    Data Ingestion Service.

    Single provider, no retries and no fallback: provider failures
    propagate to the caller as typed errors.
    """

    def __init__(
        self,
        provider: Optional[DataProviderInterface] = None,
        lookback: Optional[int] = None,
    ):
        self.provider = provider or create_provider(settings.data_provider)
        self.lookback = lookback or settings.lookback_days

    @property
    def name(self) -> str:
        return "DataIngestionService"

    async def execute(self, input_data: str) -> PriceSeries:
        """Fetch the most recent daily closes for a ticker."""
        symbol = normalize_ticker(input_data)

        series = await self.provider.fetch_daily_series(symbol)
        points = normalize_points(series.points, self.lookback)

        if not points:
            raise TickerNotFoundError(self.name, f"No data available for {symbol}")

        logger.info(
            f"Got {len(points)} daily closes for {symbol} from {series.source.value} "
            f"({points[0].date} .. {points[-1].date})"
        )

        return PriceSeries(symbol=symbol, source=series.source, points=points)

    async def health_check(self) -> bool:
        return await self.provider.health_check()


# Singleton instance
_data_ingestion_service: Optional[DataIngestionService] = None


def get_data_ingestion_service() -> DataIngestionService:
    """Get the data ingestion service singleton."""
    global _data_ingestion_service
    if _data_ingestion_service is None:
        _data_ingestion_service = DataIngestionService()
    return _data_ingestion_service
