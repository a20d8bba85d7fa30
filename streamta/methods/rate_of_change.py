"""
Rate of Change over a fixed window.

Formula:
    roc = (value - value[period]) / value[period]

Warmup: the window starts filled with the seed, so until `period`
values have been pushed, value[period] is the seed (normally the first
observed value). A zero denominator yields NEUTRAL_VALUE instead of a
division fault.
"""

from __future__ import annotations

from ..config.constants import NEUTRAL_VALUE
from .base import Method
from .buffers import RingBuffer


class RateOfChange(Method[float, float]):
    """
    Rate of Change with O(1) updates using ring buffer.

    Unlike percentage ROC, output is a plain ratio (0.05 = +5%).

    Example:
        >>> roc = RateOfChange(2, 100.0)
        >>> roc.next(100.0)
        0.0
        >>> roc.next(110.0)
        0.1
        >>> roc.next(121.0)  # 121 vs 100 two calls ago
        0.21
    """

    __slots__ = ("period", "_window")

    def __init__(self, period: int, seed: float) -> None:
        """
        Args:
            period: Look-back length in [1, PERIOD_MAX).
            seed: Value standing in for history not yet observed.

        Raises:
            WrongMethodParametersError: If period is out of range.
        """
        self._check_period("period", period, 1)
        self.period = period
        self._window = RingBuffer(period, seed)

    def next(self, value: float) -> float:
        prev = self._window.push(value)
        if prev == 0.0:
            return NEUTRAL_VALUE
        return (value - prev) / prev
