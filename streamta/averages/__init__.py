"""
Moving averages.

Indicators depend only on MovingAverageConstructor / MovingAverage;
MA is the stock constructor covering SMA, EMA, RMA and WMA.

Usage:
    from streamta.averages import MA, MAKind

    ma = MA(MAKind.EMA, 5).init(0.0)
    smoothed = ma.next(value)
"""

from .base import MovingAverage, MovingAverageConstructor
from .ma import MA, MAKind
from .methods import EMA, RMA, SMA, WMA

__all__ = [
    "MovingAverage",
    "MovingAverageConstructor",
    "MA",
    "MAKind",
    "EMA",
    "RMA",
    "SMA",
    "WMA",
]
