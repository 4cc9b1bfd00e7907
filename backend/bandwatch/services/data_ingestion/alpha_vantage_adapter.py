"""
Alpha Vantage Data Adapter

Fetches daily closing prices from the Alpha Vantage TIME_SERIES_DAILY
endpoint.
"""

import asyncio
import logging
from datetime import date
from typing import Any, Optional

import aiohttp

from bandwatch.core.config import settings
from bandwatch.schemas.market import DataSource, PricePoint, PriceSeries
from bandwatch.services.base import (
    ProviderError,
    RateLimitError,
    TickerNotFoundError,
)
from bandwatch.services.data_ingestion.interface import DataProviderInterface

logger = logging.getLogger(__name__)

SERVICE_NAME = "AlphaVantage"
TIME_SERIES_KEY = "Time Series (Daily)"
CLOSE_KEY = "4. close"


def parse_daily_series(symbol: str, payload: dict[str, Any]) -> PriceSeries:
    """
    Convert a TIME_SERIES_DAILY payload into a PriceSeries.

    Raises:
        TickerNotFoundError: Unknown symbol or no time series in payload
        RateLimitError: Payload carries a quota notice instead of data
        ProviderError: Time series entries are malformed
    """
    if not isinstance(payload, dict):
        raise ProviderError(SERVICE_NAME, f"Unexpected payload type for {symbol}")

    if "Error Message" in payload:
        raise TickerNotFoundError(
            SERVICE_NAME,
            f"Unknown symbol {symbol}",
            {"provider_message": payload["Error Message"]},
        )

    # Quota notices come back with HTTP 200
    for key in ("Note", "Information"):
        if key in payload and TIME_SERIES_KEY not in payload:
            raise RateLimitError(
                SERVICE_NAME,
                "Request limit reached",
                {"provider_message": payload[key]},
            )

    series = payload.get(TIME_SERIES_KEY)
    if not series:
        raise TickerNotFoundError(SERVICE_NAME, f"No daily data for {symbol}")

    points = []
    for day, values in series.items():
        try:
            points.append(
                PricePoint(
                    date=date.fromisoformat(day),
                    price=float(values[CLOSE_KEY]),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(
                SERVICE_NAME,
                f"Malformed entry for {symbol} on {day}",
                {"error": str(e)},
            ) from e

    points.sort(key=lambda p: p.date)

    return PriceSeries(symbol=symbol, source=DataSource.ALPHA_VANTAGE, points=points)


class AlphaVantageProvider(DataProviderInterface):
    """Alpha Vantage daily time series over aiohttp."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.alpha_vantage_api_key
        self.base_url = base_url or settings.alpha_vantage_base_url
        self.timeout = timeout or settings.request_timeout_seconds

        if not self.api_key:
            logger.warning("ALPHA_VANTAGE_API_KEY not set - requests will be rejected")

    @property
    def source(self) -> DataSource:
        return DataSource.ALPHA_VANTAGE

    async def fetch_daily_series(self, ticker: str) -> PriceSeries:
        params = {
            "function": "TIME_SERIES_DAILY",
            "symbol": ticker,
            "outputsize": "full",
            "apikey": self.api_key or "",
        }

        logger.info(f"Fetching {ticker} from Alpha Vantage...")

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.base_url, params=params) as response:
                    if response.status != 200:
                        raise ProviderError(
                            SERVICE_NAME,
                            f"HTTP {response.status} fetching {ticker}",
                            {"status": response.status},
                        )
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Alpha Vantage request failed for {ticker}: {e}")
            raise ProviderError(SERVICE_NAME, f"Request failed for {ticker}") from e
        except ValueError as e:
            raise ProviderError(SERVICE_NAME, f"Invalid JSON for {ticker}") from e

        return parse_daily_series(ticker, payload)

    async def health_check(self) -> bool:
        return bool(self.api_key)
