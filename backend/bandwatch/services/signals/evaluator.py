"""
Bollinger Band Buy-Signal Evaluator

Scores the latest indicator point against a fixed rule set and derives
entry, target and stop prices.
"""

from typing import Optional, Sequence

from bandwatch.schemas.indicators import IndicatorPoint, Recommendation, SignalLabel
from bandwatch.services.indicators.calculations import (
    band_width_percent,
    percent_from_band,
)

# Rule thresholds
NEAR_LOWER_BAND_PERCENT = 1.0
DOWNTREND_APPROACH_PERCENT = 3.0
WIDE_BAND_PERCENT = 5.0

# Price multipliers
OVERSOLD_TARGET_MULTIPLIER = 1.02
WAIT_ENTRY_MULTIPLIER = 1.01
STOP_LOSS_MULTIPLIER = 0.98

REASON_OVERSOLD = "current price below lower band: oversold"
REASON_NEAR_LOWER = "price very close to lower band"
REASON_WIDE_BAND = "wide band: high volatility"
REASON_DOWNTREND = "approaching lower band on a downtrend"


def evaluate_signal(
    indicator_series: Sequence[IndicatorPoint],
) -> Optional[Recommendation]:
    """
    Evaluate the buy signal for the most recent indicator point.

    The entry rules are exclusive: a price below the lower band wins over a
    price near it, which wins over waiting above it. Volatility and
    downtrend rules add to the score independently.

    Args:
        indicator_series: Indicator points ascending by date. The last point
            is evaluated; the one before it, if any, gives the trend.

    Returns:
        Recommendation, or None for an empty series
    """
    if not indicator_series:
        return None

    latest = indicator_series[-1]
    previous = indicator_series[-2] if len(indicator_series) > 1 else None

    price = latest.price
    lower = latest.lower_band
    middle = latest.moving_average

    width = band_width_percent(latest.upper_band, lower, middle)
    # Collapsed bands (zero deviation) and a non-positive lower band have no
    # meaningful distance: never "near" the band
    if latest.upper_band == lower:
        distance_to_lower = None
    else:
        distance_to_lower = percent_from_band(price, lower)

    strength = 0
    reasons: list[str] = []

    if price < lower:
        strength += 2
        reasons.append(REASON_OVERSOLD)
        buy_price = price
        target_price = price * OVERSOLD_TARGET_MULTIPLIER
    elif distance_to_lower is not None and distance_to_lower <= NEAR_LOWER_BAND_PERCENT:
        strength += 1
        reasons.append(REASON_NEAR_LOWER)
        buy_price = lower
        target_price = middle
    else:
        buy_price = max(0.0, lower * WAIT_ENTRY_MULTIPLIER)
        target_price = middle

    if width > WIDE_BAND_PERCENT:
        strength += 1
        reasons.append(REASON_WIDE_BAND)

    if (
        previous is not None
        and previous.price > price
        and distance_to_lower is not None
        and distance_to_lower <= DOWNTREND_APPROACH_PERCENT
    ):
        strength += 1
        reasons.append(REASON_DOWNTREND)

    return Recommendation(
        signal=SignalLabel.from_strength(strength),
        strength=strength,
        reasons=reasons,
        recommended_buy_price=round(buy_price, 2),
        target_price=round(target_price, 2),
        stop_loss=round(max(0.0, lower * STOP_LOSS_MULTIPLIER), 2),
        band_width_percent=round(width, 2),
        current_price=round(price, 2),
        moving_average=round(middle, 2),
        upper_band=round(latest.upper_band, 2),
        lower_band=round(lower, 2),
    )
