"""
Tests for RingBuffer.

Validates that:
1. The window starts full of the seed
2. push() returns the value that fell out of the window
3. Logical indexing runs oldest to newest
"""

import numpy as np
import pytest

from streamta.methods import RingBuffer


class TestRingBuffer:
    """Seeded fixed-size window."""

    def test_starts_filled_with_seed(self):
        """Every slot holds the seed before any push."""
        buf = RingBuffer(size=3, fill=7.0)

        assert len(buf) == 3
        assert list(buf.to_array()) == [7.0, 7.0, 7.0]

    def test_push_returns_evicted_value(self):
        """Seeds come out first, then pushed values in order."""
        buf = RingBuffer(size=3, fill=0.0)

        assert [buf.push(v) for v in (1.0, 2.0, 3.0)] == [0.0, 0.0, 0.0]
        assert buf.push(4.0) == 1.0
        assert buf.push(5.0) == 2.0

    def test_logical_order(self):
        """Index 0 is the oldest value, size-1 the newest."""
        buf = RingBuffer(size=3, fill=0.0)
        for v in (1.0, 2.0, 3.0, 4.0):
            buf.push(v)

        assert buf[0] == 2.0
        assert buf[2] == 4.0
        assert buf.newest() == 4.0
        np.testing.assert_array_equal(buf.to_array(), [2.0, 3.0, 4.0])

    def test_size_one(self):
        """A single slot evicts the previous push every time."""
        buf = RingBuffer(size=1, fill=9.0)

        assert buf.push(1.0) == 9.0
        assert buf.push(2.0) == 1.0
        assert buf.newest() == 2.0

    @pytest.mark.parametrize("idx", [-1, 3])
    def test_index_out_of_range_raises(self, idx):
        buf = RingBuffer(size=3, fill=0.0)
        with pytest.raises(IndexError, match="out of range"):
            buf[idx]

    def test_invalid_size_raises(self):
        with pytest.raises(ValueError, match="size must be >= 1"):
            RingBuffer(size=0, fill=0.0)
