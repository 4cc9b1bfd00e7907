"""
CONTRACT 1: Data Ingestion Layer

Input: ticker symbol
Output: PriceSeries

Daily closing prices fetched from an external provider
(Alpha Vantage, Yahoo Finance) and normalized into a standard format.
"""

import datetime as dt
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class DataSource(str, Enum):
    ALPHA_VANTAGE = "alpha_vantage"
    YAHOO = "yahoo"
    MOCK = "mock"


# =============================================================================
# OUTPUT: PriceSeries
# =============================================================================


class PricePoint(BaseModel):
    """Single daily close."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    price: float = Field(..., ge=0, description="Closing price")


class PriceSeries(BaseModel):
    """
    Daily closing-price history for one symbol.
    Sent by: Data Ingestion Service
    Received by: Indicator Engine

    Points are ascending by date with unique dates.
    """

    symbol: str
    source: DataSource
    points: list[PricePoint]
