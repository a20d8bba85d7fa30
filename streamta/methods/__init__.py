"""
Streaming methods: the reusable state machines indicators compose.

Usage:
    from streamta.methods import RateOfChange, Cross, ReversalSignal

    roc = RateOfChange(period=14, seed=first_close)
    cross = Cross()
    pivot = ReversalSignal(left=4, right=2, seed=0.0)

    for close in closes:
        r = roc.next(close)
        s1 = cross.next((r, 0.0))
        s2 = pivot.next(r)
"""

from .base import Method
from .buffers import RingBuffer
from .cross import Cross
from .rate_of_change import RateOfChange
from .reversal import ReversalSignal

__all__ = [
    "Method",
    "RingBuffer",
    "Cross",
    "RateOfChange",
    "ReversalSignal",
]
