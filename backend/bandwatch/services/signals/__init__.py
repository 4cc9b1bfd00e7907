"""
Signal Evaluator

CONTRACT:
    Input:  list[IndicatorPoint]
    Output: Recommendation (None for an empty series)

Rule-based, deterministic. Reads only the last two points.
"""

from bandwatch.services.signals.evaluator import evaluate_signal

__all__ = ["evaluate_signal"]
