"""
Tests for RateOfChange.

Validates that:
1. Output is (value - value[period]) / value[period]
2. The seed stands in for history during warmup
3. A zero denominator yields 0.0 instead of failing
4. Periods outside [1, PERIOD_MAX) are rejected
"""

import pytest

from streamta.config import PERIOD_MAX
from streamta.core import WrongMethodParametersError
from streamta.methods import RateOfChange


class TestRateOfChangeValues:
    """Output values."""

    def test_constant_series_is_zero(self):
        roc = RateOfChange(5, 42.0)
        assert all(roc.next(42.0) == 0.0 for _ in range(20))

    def test_all_zero_series_is_zero(self):
        """Every denominator is zero, every output neutral."""
        roc = RateOfChange(3, 0.0)
        assert all(roc.next(0.0) == 0.0 for _ in range(10))

    def test_warmup_compares_against_seed(self):
        """Until `period` values are pushed, the seed is value[period]."""
        roc = RateOfChange(3, 100.0)

        assert roc.next(110.0) == pytest.approx(0.1)
        assert roc.next(120.0) == pytest.approx(0.2)
        assert roc.next(150.0) == pytest.approx(0.5)
        # Now compares against the first pushed value
        assert roc.next(121.0) == pytest.approx(0.1)

    def test_zero_denominator_mid_series(self):
        roc = RateOfChange(1, 0.0)

        assert roc.next(5.0) == 0.0
        assert roc.next(10.0) == pytest.approx(1.0)
        assert roc.next(0.0) == pytest.approx(-1.0)
        assert roc.next(3.0) == 0.0

    def test_negative_change(self):
        roc = RateOfChange(1, 200.0)
        assert roc.next(150.0) == pytest.approx(-0.25)


class TestRateOfChangeParameters:
    """Construction errors."""

    @pytest.mark.parametrize("period", [0, PERIOD_MAX, 300, -1])
    def test_period_out_of_range_raises(self, period):
        with pytest.raises(WrongMethodParametersError) as exc_info:
            RateOfChange(period, 1.0)

        assert exc_info.value.parameter == "period"
        assert exc_info.value.method == "RateOfChange"
        assert exc_info.value.value == period

    @pytest.mark.parametrize("period", [1, PERIOD_MAX - 1])
    def test_period_bounds_accepted(self, period):
        assert RateOfChange(period, 1.0).period == period
