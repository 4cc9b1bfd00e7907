"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from bandwatch.services.base import BaseService
from bandwatch.schemas.market import PriceSeries
from bandwatch.schemas.indicators import IndicatorPoint


class IndicatorServiceInterface(BaseService[PriceSeries, list[IndicatorPoint]]):
    """
    Indicator Engine Service Contract.

    INPUT: PriceSeries
        - points: daily closes, ascending by date

    OUTPUT: list[IndicatorPoint]
        - One point per input point, same order
        - Moving average with upper/lower Bollinger Bands
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: PriceSeries) -> list[IndicatorPoint]:
        """Calculate Bollinger Bands for the series."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
