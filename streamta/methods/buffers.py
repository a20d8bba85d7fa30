"""
Fixed-size window for O(1) hot-loop operations.

Methods and moving averages keep exactly as much history as their
horizon needs: a RingBuffer pre-filled with a seed value, so the window
is full from the first call and push() always returns the value that
fell out of it.

Performance Contract:
- RingBuffer.push(): O(1)
- RingBuffer.__getitem__(): O(1)
"""

from __future__ import annotations

import numpy as np


class RingBuffer:
    """
    Fixed-size circular buffer for O(1) push and index access.

    Elements are accessed by index where 0 is the oldest element
    and size-1 is the most recently pushed element.

    Example:
        >>> buf = RingBuffer(size=3, fill=0.0)
        >>> buf.push(1.0)  # evicts seed
        0.0
        >>> buf.push(2.0)
        0.0
        >>> buf.push(3.0)
        0.0
        >>> buf.push(4.0)  # evicts 1.0
        1.0
        >>> buf[0]  # oldest
        2.0
        >>> buf[2]  # newest
        4.0

    Attributes:
        size: Number of elements the buffer holds.
    """

    __slots__ = ("size", "_buffer", "_head")

    def __init__(self, size: int, fill: float) -> None:
        """
        Initialize ring buffer with every slot set to `fill`.

        Args:
            size: Number of elements (must be >= 1).
            fill: Seed value occupying the window until overwritten.

        Raises:
            ValueError: If size < 1.
        """
        if size < 1:
            raise ValueError(
                f"size must be >= 1, got {size}\n"
                f"\n"
                f"Fix: RingBuffer(size=5, fill=0.0)"
            )
        self.size = size
        self._buffer = np.full(size, fill, dtype=np.float64)
        self._head = 0  # Oldest element, next write position

    def push(self, value: float) -> float:
        """
        Overwrite the oldest value.

        Returns:
            The evicted value (pushed `size` calls ago, or the seed).
        """
        evicted = float(self._buffer[self._head])
        self._buffer[self._head] = value
        self._head = (self._head + 1) % self.size
        return evicted

    def newest(self) -> float:
        return float(self._buffer[self._head - 1])

    def __getitem__(self, idx: int) -> float:
        """
        Get element by logical index (0 = oldest, size-1 = newest).

        Raises:
            IndexError: If idx is out of range.
        """
        if idx < 0 or idx >= self.size:
            raise IndexError(
                f"Index {idx} out of range [0, {self.size})"
            )
        return float(self._buffer[(self._head + idx) % self.size])

    def __len__(self) -> int:
        return self.size

    def to_array(self) -> np.ndarray:
        """
        Return a copy of the buffer contents in logical order.

        Returns:
            numpy array with oldest element first, newest last.
        """
        return np.roll(self._buffer, -self._head)
