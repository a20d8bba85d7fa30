"""
Crossover detection between two aligned series.

Semantics (TradingView-aligned):
- cross above: prev_a <= prev_b AND curr_a > curr_b  -> BUY_ALL
- cross below: prev_a >= prev_b AND curr_a < curr_b  -> SELL_ALL

The first call has nothing to compare against and is always NONE.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.action import Action
from .base import Method


@dataclass(slots=True)
class Cross(Method[tuple[float, float], Action]):
    """
    Stateful crossover detector; remembers only the previous pair.

    Compare against a constant line by passing it as the second value:
        >>> cross = Cross()
        >>> cross.next((-1.0, 0.0))
        <Action.NONE: 0.0>
        >>> cross.next((0.5, 0.0))
        <Action.BUY_ALL: 1.0>
    """

    _prev: tuple[float, float] | None = field(default=None, init=False)

    def next(self, value: tuple[float, float]) -> Action:
        prev = self._prev
        self._prev = value
        if prev is None:
            return Action.NONE

        prev_a, prev_b = prev
        curr_a, curr_b = value
        return Action.from_flags(
            up=prev_a <= prev_b and curr_a > curr_b,
            down=prev_a >= prev_b and curr_a < curr_b,
        )
