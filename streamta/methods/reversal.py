"""
Reversal (pivot) detection with delayed confirmation.

A window of left + right + 1 values is kept. After every push the
candidate is the value at index `left`, i.e. the one pushed `right`
calls ago. It is a confirmed pivot when it is the EARLIEST index holding
the window extreme:

    top:     candidate >  every value before it
             candidate >= every value after it       -> BUY_ALL
    bottom:  candidate <  every value before it
             candidate <= every value after it       -> SELL_ALL

So a plateau reports its first bar, exactly once. Signals arrive
`right` calls after the pivot bar; the "right" side is real past input,
never look-ahead.
"""

from __future__ import annotations

from ..config.constants import PERIOD_MAX
from ..core.action import Action
from ..core.errors import WrongMethodParametersError
from .base import Method
from .buffers import RingBuffer


class ReversalSignal(Method[float, Action]):
    """
    Pivot detector over a scalar stream.

    Attributes:
        left: Values before the candidate that it must exceed.
        right: Values after the candidate; also the confirmation delay.

    Performance:
        - next(): O(left + right + 1) = O(window_size)
    """

    __slots__ = ("left", "right", "_window")

    def __init__(self, left: int, right: int, seed: float) -> None:
        """
        Args:
            left: Left limit, >= 1.
            right: Right limit, >= 1.
            seed: Value standing in for history not yet observed.

        Raises:
            WrongMethodParametersError: If a limit is < 1 or
                left + right >= PERIOD_MAX.
        """
        self._check_period("left", left, 1)
        self._check_period("right", right, 1)
        if left + right >= PERIOD_MAX:
            raise WrongMethodParametersError(
                "right", right, type(self).__name__,
                f"left + right must be < {PERIOD_MAX}, got {left} + {right}",
            )
        self.left = left
        self.right = right
        self._window = RingBuffer(left + right + 1, seed)

    def next(self, value: float) -> Action:
        self._window.push(value)
        window = self._window.to_array()
        pivot = window[self.left]
        before = window[: self.left]
        after = window[self.left + 1:]

        is_top = bool((before < pivot).all() and (after <= pivot).all())
        is_bottom = bool((before > pivot).all() and (after >= pivot).all())
        return Action.from_flags(up=is_top, down=is_bottom)
