"""
Seeded moving averages with O(1) updates.

Each average starts as if `period` copies of the seed had already been
observed, so output is defined from the first call (no NaN warmup).
Once `period` real values have been pushed, SMA and WMA match the plain
windowed formulas exactly; EMA/RMA seeded with the first value match
pandas ewm(adjust=False).
"""

from __future__ import annotations

from ..config.constants import PERIOD_MAX
from ..core.errors import WrongMethodParametersError
from ..methods.buffers import RingBuffer
from .base import MovingAverage


def _check_ma_period(method: str, period: int) -> None:
    if not isinstance(period, int) or not 2 <= period < PERIOD_MAX:
        raise WrongMethodParametersError(
            "period", period, method, f"must be an integer in [2, {PERIOD_MAX})"
        )


class SMA(MovingAverage):
    """
    Simple Moving Average using running sum technique:
        sma = (sum + new - oldest) / length
    """

    __slots__ = ("period", "_window", "_running_sum")

    def __init__(self, period: int, seed: float) -> None:
        _check_ma_period(type(self).__name__, period)
        self.period = period
        self._window = RingBuffer(period, seed)
        self._running_sum = seed * period

    def next(self, value: float) -> float:
        oldest = self._window.push(value)
        self._running_sum += value - oldest
        return self._running_sum / self.period


class EMA(MovingAverage):
    """
    Exponential Moving Average.

    Formula:
        alpha = 2 / (length + 1)
        ema = ema_prev + alpha * (close - ema_prev)
    """

    __slots__ = ("period", "_alpha", "_value")

    def __init__(self, period: int, seed: float) -> None:
        _check_ma_period(type(self).__name__, period)
        self.period = period
        self._alpha = self._smoothing(period)
        self._value = seed

    @staticmethod
    def _smoothing(period: int) -> float:
        return 2.0 / (period + 1)

    def next(self, value: float) -> float:
        self._value += self._alpha * (value - self._value)
        return self._value


class RMA(EMA):
    """Wilder's Moving Average: EMA with alpha = 1 / length."""

    __slots__ = ()

    @staticmethod
    def _smoothing(period: int) -> float:
        return 1.0 / period


class WMA(MovingAverage):
    """
    Weighted Moving Average with TRUE O(1) updates.

    Formula:
        wma = sum(weight[i] * close[i]) / sum(weights)
        where weight[i] = i + 1 (linear weights, most recent has highest weight)

    O(1) update technique:
        - New value enters with weight `length` (highest)
        - All existing values shift down, losing 1 from their weight
        - weighted_sum = weighted_sum - window_sum + new_value * length
        - The oldest value (weight 1) leaves with the shift
    """

    __slots__ = ("period", "_window", "_weight_divisor", "_weighted_sum", "_window_sum")

    def __init__(self, period: int, seed: float) -> None:
        _check_ma_period(type(self).__name__, period)
        self.period = period
        self._window = RingBuffer(period, seed)
        # Weight divisor = 1 + 2 + ... + length = length * (length + 1) / 2
        self._weight_divisor = period * (period + 1) // 2
        self._window_sum = seed * period
        self._weighted_sum = seed * self._weight_divisor

    def next(self, value: float) -> float:
        oldest = self._window.push(value)
        # Subtract window_sum BEFORE modification: every old value loses one weight
        self._weighted_sum += value * self.period - self._window_sum
        self._window_sum += value - oldest
        return self._weighted_sum / self._weight_divisor
