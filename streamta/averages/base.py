"""
Moving-average contract consumed by indicators.

Indicators only ever see these two interfaces, so any averaging
strategy (including test doubles) can be plugged into a config field.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class MovingAverage(ABC):
    """Live moving-average state: one scalar in, current average out."""

    __slots__ = ()

    @abstractmethod
    def next(self, value: float) -> float:
        ...


class MovingAverageConstructor(ABC):
    """
    Configuration of a moving average (kind + period).

    Legal periods are [2, PERIOD_MAX); init() raises
    WrongMethodParametersError otherwise.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def ma_period(self) -> int:
        ...

    @abstractmethod
    def init(self, seed: float) -> MovingAverage:
        """Build a moving average that behaves as if it had seen only `seed`."""
        ...
