"""
Data Ingestion Service Interface

Defines the contract for the data ingestion layer and for the
provider adapters behind it.
"""

from abc import ABC, abstractmethod

from bandwatch.services.base import BaseService
from bandwatch.schemas.market import DataSource, PriceSeries


class DataProviderInterface(ABC):
    """
    Daily closing-price provider.

    Adapters raise TickerNotFoundError when the ticker is unknown or has no
    data, and ProviderError (or RateLimitError) on transport, quota or
    payload failures. Adapters never retry.
    """

    @property
    @abstractmethod
    def source(self) -> DataSource:
        pass

    @abstractmethod
    async def fetch_daily_series(self, ticker: str) -> PriceSeries:
        """Fetch the daily closing-price history for a ticker."""
        pass

    async def health_check(self) -> bool:
        return True


class DataIngestionServiceInterface(BaseService[str, PriceSeries]):
    """
    Data Ingestion Service Contract.

    INPUT: ticker symbol (any case, surrounding whitespace allowed)

    OUTPUT: PriceSeries
        - ascending by date, unique dates
        - at most `lookback_days` most recent observations
    """

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @abstractmethod
    async def execute(self, input_data: str) -> PriceSeries:
        """Fetch and normalize the daily series for a ticker."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check connectivity to the configured provider."""
        pass
