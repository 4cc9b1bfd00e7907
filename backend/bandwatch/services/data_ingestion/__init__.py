"""
Data Ingestion Service

CONTRACT:
    Input:  ticker symbol
    Output: PriceSeries

RESPONSIBILITIES:
    - Fetch daily closes from Alpha Vantage or Yahoo Finance
    - Normalize to ascending, de-duplicated, bounded series
    - Surface unknown tickers and provider failures as typed errors
"""

from bandwatch.services.data_ingestion.interface import (
    DataIngestionServiceInterface,
    DataProviderInterface,
)
from bandwatch.services.data_ingestion.service import (
    DataIngestionService,
    get_data_ingestion_service,
)

__all__ = [
    "DataIngestionServiceInterface",
    "DataProviderInterface",
    "DataIngestionService",
    "get_data_ingestion_service",
]
