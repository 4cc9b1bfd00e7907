"""
Yahoo Finance Data Adapter

Fetches daily closing prices from Yahoo Finance.
Symbols are passed through as-is (e.g. "AAPL", "005930.KS", "RELIANCE.NS").
"""

import logging
from typing import Optional

import yfinance as yf

from bandwatch.core.config import settings
from bandwatch.schemas.market import DataSource, PricePoint, PriceSeries
from bandwatch.services.base import ProviderError, TickerNotFoundError
from bandwatch.services.data_ingestion.interface import DataProviderInterface

logger = logging.getLogger(__name__)

SERVICE_NAME = "YahooFinance"


def history_period(lookback: int) -> str:
    """Smallest yfinance period covering `lookback` trading days."""
    # 252 trading days per year
    if lookback <= 252:
        return "1y"
    elif lookback <= 504:
        return "2y"
    elif lookback <= 1260:
        return "5y"
    return "max"


class YahooProvider(DataProviderInterface):
    """Yahoo Finance daily history via yfinance."""

    def __init__(self, lookback: Optional[int] = None):
        self.lookback = lookback or settings.lookback_days

    @property
    def source(self) -> DataSource:
        return DataSource.YAHOO

    async def fetch_daily_series(self, ticker: str) -> PriceSeries:
        logger.info(f"Fetching {ticker} from Yahoo Finance...")

        try:
            hist = yf.Ticker(ticker).history(
                period=history_period(self.lookback), interval="1d"
            )
        except Exception as e:
            logger.error(f"Error fetching {ticker} from Yahoo Finance: {e}")
            raise ProviderError(SERVICE_NAME, f"Request failed for {ticker}") from e

        if hist is None or hist.empty:
            logger.warning(f"No data returned for {ticker}")
            raise TickerNotFoundError(SERVICE_NAME, f"No daily data for {ticker}")

        try:
            points = [
                PricePoint(date=idx.date(), price=float(row["Close"]))
                for idx, row in hist.iterrows()
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(SERVICE_NAME, f"Malformed history for {ticker}") from e

        return PriceSeries(symbol=ticker, source=DataSource.YAHOO, points=points)

    async def health_check(self) -> bool:
        try:
            return not yf.Ticker("SPY").history(period="5d").empty
        except Exception:
            return False
