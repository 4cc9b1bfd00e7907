"""
CONTRACT 2: Indicator Engine and Signal Evaluator

Input: PriceSeries (daily closes)
Output: list[IndicatorPoint] -> Recommendation

All math is deterministic. Values are rounded to 2 decimals when these
models are built; the calculations behind them run at full precision.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from bandwatch.schemas.market import DataSource, PricePoint


# =============================================================================
# ENUMS
# =============================================================================


class SignalLabel(str, Enum):
    NONE = "no buy signal"
    WEAK = "weak buy signal"
    MODERATE = "moderate buy signal"
    STRONG = "strong buy signal"

    @classmethod
    def from_strength(cls, strength: int) -> "SignalLabel":
        """Map an accumulated strength score to its label."""
        if strength <= 0:
            return cls.NONE
        if strength == 1:
            return cls.WEAK
        if strength == 2:
            return cls.MODERATE
        return cls.STRONG


# =============================================================================
# OUTPUT: Indicator series
# =============================================================================


class IndicatorPoint(PricePoint):
    """PricePoint annotated with Bollinger Bands."""

    moving_average: float
    upper_band: float
    lower_band: float


# =============================================================================
# OUTPUT: Recommendation
# =============================================================================


class Recommendation(BaseModel):
    """
    Buy-signal recommendation derived from the last indicator points.
    Sent by: Signal Evaluator
    Received by: API / UI
    """

    signal: SignalLabel
    strength: int = Field(..., ge=0, description="Number of triggered rule points")
    reasons: list[str] = Field(default_factory=list)

    recommended_buy_price: float
    target_price: float
    stop_loss: float
    band_width_percent: float = Field(..., description="(upper - lower) / MA, in %")

    # Snapshot of the last point
    current_price: float
    moving_average: float
    upper_band: float
    lower_band: float


class StockAnalysis(BaseModel):
    """Complete analysis for one ticker."""

    symbol: str
    source: DataSource
    window_size: int = Field(..., ge=1)
    indicators: list[IndicatorPoint]
    recommendation: Optional[Recommendation] = None
    generated_at: datetime
