"""
MA: the default moving-average constructor used by indicator configs.

Textual form is "<kind>-<period>", e.g. "wma-10", so config tooling can
set an MA field from a single string.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..config.constants import parse_period
from ..core.errors import ParameterParseError
from .base import MovingAverage, MovingAverageConstructor
from .methods import EMA, RMA, SMA, WMA


class MAKind(str, Enum):
    """Supported moving-average kinds."""

    SMA = "sma"
    EMA = "ema"
    RMA = "rma"
    WMA = "wma"

    def __str__(self) -> str:
        return self.value


_FACTORY: dict[MAKind, Callable[[int, float], MovingAverage]] = {
    MAKind.SMA: SMA,
    MAKind.EMA: EMA,
    MAKind.RMA: RMA,
    MAKind.WMA: WMA,
}


@dataclass(frozen=True)
class MA(MovingAverageConstructor):
    """
    Moving-average kind + period.

    Example:
        >>> ma = MA.parse("WMA-10")
        >>> ma
        MA(kind=<MAKind.WMA: 'wma'>, period=10)
        >>> str(ma)
        'wma-10'
    """

    kind: MAKind
    period: int

    @property
    def ma_period(self) -> int:
        return self.period

    def init(self, seed: float) -> MovingAverage:
        """
        Raises:
            WrongMethodParametersError: If period is outside [2, PERIOD_MAX).
        """
        return _FACTORY[self.kind](self.period, seed)

    def __str__(self) -> str:
        return f"{self.kind}-{self.period}"

    @classmethod
    def parse(cls, text: str) -> MA:
        """
        Parse "<kind>-<period>", case-insensitively.

        Raises:
            ParameterParseError: If the kind is unknown or the period is
                not a representable integer.
        """
        kind_text, sep, period_text = text.strip().partition("-")
        if not sep:
            raise ParameterParseError("ma", text, "expected '<kind>-<period>', e.g. 'ema-5'")
        try:
            kind = MAKind(kind_text.lower())
        except ValueError:
            valid = ", ".join(k.value for k in MAKind)
            raise ParameterParseError("ma", text, f"kind must be one of {valid}") from None
        try:
            period = parse_period(period_text)
        except ValueError as e:
            raise ParameterParseError("ma", text, str(e)) from None
        return cls(kind, period)
