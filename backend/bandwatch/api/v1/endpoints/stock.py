"""
Stock Analysis API Endpoints

Bollinger Band analysis and buy-signal recommendation for a ticker.
"""

import logging
from typing import NoReturn

from fastapi import APIRouter, HTTPException, Query

from bandwatch.core.config import settings
from bandwatch.schemas.indicators import IndicatorPoint, StockAnalysis
from bandwatch.services.analysis import get_analysis_service
from bandwatch.services.base import (
    ProviderError,
    RateLimitError,
    ServiceError,
    TickerNotFoundError,
    ValidationError,
)
from bandwatch.services.data_ingestion import get_data_ingestion_service
from bandwatch.services.indicators import compute_indicators

logger = logging.getLogger(__name__)

router = APIRouter()


def raise_http_error(ticker: str, error: ServiceError) -> NoReturn:
    """Translate a service error into the matching HTTP status."""
    if isinstance(error, ValidationError):
        raise HTTPException(status_code=400, detail=error.message)
    if isinstance(error, TickerNotFoundError):
        raise HTTPException(status_code=404, detail=f"No data found for {ticker}")
    if isinstance(error, RateLimitError):
        raise HTTPException(status_code=429, detail="Data provider request limit reached")
    if isinstance(error, ProviderError):
        logger.error(f"Provider failure for {ticker}: {error}")
        raise HTTPException(status_code=502, detail=f"Failed to fetch data for {ticker}")

    logger.error(f"Analysis failed for {ticker}: {error}")
    raise HTTPException(status_code=500, detail="Failed to process stock data")


@router.get("/{ticker}", response_model=StockAnalysis)
async def get_stock_analysis(
    ticker: str,
    window: int = Query(default=settings.bollinger_window, ge=1, le=250),
):
    """
    Get Bollinger Band analysis for a ticker.

    Returns:
        - Daily closes with moving average and upper/lower bands
        - Buy signal, strength and reasons
        - Suggested entry, target and stop-loss prices
    """
    service = get_analysis_service()
    try:
        return await service.analyze(ticker, window)
    except ServiceError as e:
        raise_http_error(ticker, e)


@router.get("/{ticker}/indicators", response_model=list[IndicatorPoint])
async def get_stock_indicators(
    ticker: str,
    window: int = Query(default=settings.bollinger_window, ge=1, le=250),
):
    """Get the Bollinger Band series only, without a recommendation."""
    service = get_data_ingestion_service()
    try:
        series = await service.execute(ticker)
    except ServiceError as e:
        raise_http_error(ticker, e)

    return compute_indicators(series.points, window)
