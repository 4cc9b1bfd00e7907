"""
Indicator Engine Service

CONTRACT:
    Input:  PriceSeries (daily closes)
    Output: list[IndicatorPoint]

RESPONSIBILITIES:
    - Rolling moving average over an expanding-then-trailing window
    - Population standard deviation over the same window
    - Upper/lower Bollinger Bands at 2 standard deviations

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from bandwatch.services.indicators.interface import IndicatorServiceInterface
from bandwatch.services.indicators.service import (
    IndicatorService,
    compute_indicators,
    get_indicator_service,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "compute_indicators",
    "get_indicator_service",
]
