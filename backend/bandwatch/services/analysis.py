"""
Stock Analysis Service

Pipeline: ticker -> PriceSeries -> IndicatorPoints -> Recommendation.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bandwatch.core.config import settings
from bandwatch.schemas.indicators import StockAnalysis
from bandwatch.services.base import ValidationError
from bandwatch.services.data_ingestion import (
    DataIngestionServiceInterface,
    get_data_ingestion_service,
)
from bandwatch.services.indicators import compute_indicators
from bandwatch.services.recent_searches import RecentSearches, get_recent_searches
from bandwatch.services.signals import evaluate_signal

logger = logging.getLogger(__name__)


class StockAnalysisService:
    """
    Runs the full analysis for one ticker.

    Successful analyses are recorded in the recent-search list; failed
    fetches are not.
    """

    name = "StockAnalysisService"

    def __init__(
        self,
        ingestion: Optional[DataIngestionServiceInterface] = None,
        recent_searches: Optional[RecentSearches] = None,
    ):
        self.ingestion = ingestion or get_data_ingestion_service()
        self.recent_searches = recent_searches or get_recent_searches()

    async def analyze(
        self, ticker: str, window_size: Optional[int] = None
    ) -> StockAnalysis:
        """
        Fetch, annotate and evaluate a ticker.

        Raises:
            ValidationError: Blank/invalid ticker or window below 1
            TickerNotFoundError: Provider has no data for the ticker
            ProviderError: Transport, quota or payload failure
        """
        window = settings.bollinger_window if window_size is None else window_size
        if window < 1:
            raise ValidationError(self.name, f"Window must be at least 1, got {window}")

        series = await self.ingestion.execute(ticker)
        indicators = compute_indicators(series.points, window)
        recommendation = evaluate_signal(indicators)

        if recommendation:
            logger.info(
                f"{series.symbol}: {recommendation.signal.value} "
                f"(strength {recommendation.strength})"
            )

        await self.recent_searches.add(series.symbol)

        return StockAnalysis(
            symbol=series.symbol,
            source=series.source,
            window_size=window,
            indicators=indicators,
            recommendation=recommendation,
            generated_at=datetime.now(timezone.utc),
        )


# Singleton instance
_analysis_service: Optional[StockAnalysisService] = None


def get_analysis_service() -> StockAnalysisService:
    """Get the analysis service singleton."""
    global _analysis_service
    if _analysis_service is None:
        _analysis_service = StockAnalysisService()
    return _analysis_service
