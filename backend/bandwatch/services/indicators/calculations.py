"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the rolling statistics behind
Bollinger Bands. All math is deterministic and runs at full float64
precision; rounding happens when results are packaged into schemas.
"""

from typing import Optional

import numpy as np


# =============================================================================
# ROLLING WINDOW
# =============================================================================


def window_bounds(index: int, period: int) -> tuple[int, int]:
    """
    Slice bounds of the trailing window ending at ``index``.

    The window expands from the start of the series until it holds
    ``period`` observations, then trails at a fixed width.
    """
    return max(0, index - period + 1), index + 1


def rolling_mean_std(
    data: np.ndarray, period: int
) -> tuple[np.ndarray, np.ndarray]:
    """
    Rolling mean and population standard deviation over an expanding-then-
    trailing window.

    Returns: (mean, std), both the same length as ``data``.
    """
    if period < 1:
        raise ValueError(f"period must be a positive integer, got {period}")

    n = len(data)
    mean = np.empty(n, dtype=float)
    std = np.empty(n, dtype=float)

    for i in range(n):
        start, end = window_bounds(i, period)
        window = data[start:end]
        mean[i] = np.mean(window)
        # ddof=0: divide by window count
        std[i] = np.std(window)

    return mean, std


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    closes: np.ndarray, period: int = 20, std_dev: float = 2.0
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Bollinger Bands.

    The first ``period - 1`` points use the observations available so far,
    so every point gets a value. A single-observation window has zero
    deviation and its bands collapse onto the average.

    Returns: (upper, middle, lower)
    """
    closes = np.asarray(closes, dtype=float)
    middle, std = rolling_mean_std(closes, period)

    upper = middle + (std_dev * std)
    lower = middle - (std_dev * std)

    return upper, middle, lower


def band_width_percent(upper: float, lower: float, middle: float) -> float:
    """Spread between the bands as a percentage of the middle band."""
    if middle == 0:
        return 0.0
    return (upper - lower) / middle * 100


def percent_from_band(price: float, band: float) -> Optional[float]:
    """
    Distance of ``price`` above ``band`` as a percentage of the band.

    Returns None when the band is zero or negative.
    """
    if band <= 0:
        return None
    return (price - band) / band * 100
