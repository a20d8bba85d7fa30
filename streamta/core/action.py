"""
Discrete signal values emitted by methods and indicators.
"""

from enum import Enum


class Action(float, Enum):
    """
    Signal value in [-1, 1].

    Members are floats, so they can be stored directly in an
    IndicatorResult's signal tuple and compared with plain numbers.
    """

    BUY_ALL = 1.0
    NONE = 0.0
    SELL_ALL = -1.0

    @classmethod
    def from_flags(cls, up: bool, down: bool) -> "Action":
        """BUY_ALL if up, SELL_ALL if down, NONE otherwise."""
        if up:
            return cls.BUY_ALL
        if down:
            return cls.SELL_ALL
        return cls.NONE
