"""
BandWatch Schema Contracts

This module defines all JSON contracts between system components.
"""

from bandwatch.schemas.market import (
    DataSource,
    PricePoint,
    PriceSeries,
)
from bandwatch.schemas.indicators import (
    IndicatorPoint,
    Recommendation,
    SignalLabel,
    StockAnalysis,
)

__all__ = [
    # Market
    "DataSource",
    "PricePoint",
    "PriceSeries",
    # Indicators
    "IndicatorPoint",
    "Recommendation",
    "SignalLabel",
    "StockAnalysis",
]
