"""
Indicator Engine Service Implementation

Annotates a daily price series with Bollinger Bands.
Pure Python/NumPy calculations.
"""

from typing import Optional, Sequence
import numpy as np

from bandwatch.core.config import settings
from bandwatch.schemas.market import PricePoint, PriceSeries
from bandwatch.schemas.indicators import IndicatorPoint
from bandwatch.services.indicators.interface import IndicatorServiceInterface
from bandwatch.services.indicators.calculations import bollinger_bands

DEFAULT_WINDOW = 20
BAND_WIDTH_STD = 2.0


def compute_indicators(
    series: Sequence[PricePoint], window_size: int = DEFAULT_WINDOW
) -> list[IndicatorPoint]:
    """
    Compute Bollinger Bands for every point of a price series.

    Args:
        series: Daily closes, ascending by date with unique dates
        window_size: Trailing window length; earlier points use an
            expanding window

    Returns:
        One IndicatorPoint per input point, in input order, with the
        average and bands rounded to 2 decimals

    Raises:
        ValueError: If window_size is not a positive integer
    """
    if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 1:
        raise ValueError(f"window_size must be a positive integer, got {window_size!r}")

    if not series:
        return []

    closes = np.array([p.price for p in series], dtype=float)
    upper, middle, lower = bollinger_bands(closes, window_size, BAND_WIDTH_STD)

    return [
        IndicatorPoint(
            date=point.date,
            price=point.price,
            moving_average=round(float(middle[i]), 2),
            upper_band=round(float(upper[i]), 2),
            lower_band=round(float(lower[i]), 2),
        )
        for i, point in enumerate(series)
    ]


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Stateless: the same series always yields the same output.
    """

    def __init__(self, window_size: Optional[int] = None):
        self.window_size = window_size or settings.bollinger_window

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: PriceSeries) -> list[IndicatorPoint]:
        """Calculate indicators for the series."""
        return compute_indicators(input_data.points, self.window_size)

    async def health_check(self) -> bool:
        return True


# Singleton instance
_indicator_service: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get the indicator service singleton."""
    global _indicator_service
    if _indicator_service is None:
        _indicator_service = IndicatorService()
    return _indicator_service
