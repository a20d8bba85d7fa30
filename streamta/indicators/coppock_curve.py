"""
Coppock curve.

See: https://en.wikipedia.org/wiki/Coppock_curve

Components:
    roc_long = roc(source, period2)
    roc_short = roc(source, period3)
    main = ma1(roc_long + roc_short)
    signal_line = s3_ma(main)

2 values:
    main: Range is the same as the range of the source values' rate of change.
    signal_line: Smoothed main value, same range.

3 signals:
    1. main crosses the zero line: BUY_ALL upwards, SELL_ALL downwards.
    2. Reversal points of main: BUY_ALL on a top, SELL_ALL on a bottom,
       delayed by s2_right bars.
    3. main crosses signal_line: BUY_ALL upwards, SELL_ALL downwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

from ..averages.base import MovingAverage, MovingAverageConstructor
from ..averages.ma import MA, MAKind
from ..config.constants import NEUTRAL_VALUE, PERIOD_MAX, parse_period
from ..core.candles import OHLCV, Source
from ..core.indicator import IndicatorConfig, IndicatorInstance, IndicatorResult
from ..core.registry import register_indicator
from ..methods import Cross, RateOfChange, ReversalSignal


@register_indicator("CoppockCurve")
@dataclass
class CoppockCurve(IndicatorConfig):
    """
    Coppock curve configuration.

    Attributes:
        ma1: Main MA. Default WMA(10). Period in [2, PERIOD_MAX).
        s3_ma: Signal line MA. Default EMA(5). Period in [2, PERIOD_MAX).
        period2: Long rate of change period. Default 14.
            Range (period3, PERIOD_MAX).
        period3: Short rate of change period. Default 11. Range [1, period2).
        s2_left: Signal 2 reversal left limit. Default 4.
            Range [1, PERIOD_MAX - s2_right).
        s2_right: Signal 2 reversal right limit. Default 2.
            Range [1, PERIOD_MAX - s2_left).
        source: Bar field to read. Default close.
    """

    SIZE: ClassVar[tuple[int, int]] = (2, 3)
    PARAMETERS: ClassVar[dict[str, Callable[[str], Any]]] = {
        "ma1": MA.parse,
        "s3_ma": MA.parse,
        "period2": parse_period,
        "period3": parse_period,
        "s2_left": parse_period,
        "s2_right": parse_period,
        "source": Source.parse,
    }

    ma1: MovingAverageConstructor = field(default_factory=lambda: MA(MAKind.WMA, 10))
    s3_ma: MovingAverageConstructor = field(default_factory=lambda: MA(MAKind.EMA, 5))
    period2: int = 14
    period3: int = 11
    s2_left: int = 4
    s2_right: int = 2
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return (
            2 <= self.ma1.ma_period < PERIOD_MAX
            and 2 <= self.s3_ma.ma_period < PERIOD_MAX
            and 0 < self.period3 < self.period2 < PERIOD_MAX
            and self.s2_left > 0
            and self.s2_right > 0
            and self.s2_left + self.s2_right < PERIOD_MAX
            and isinstance(self.source, Source)
        )

    def _build(self, candle: OHLCV) -> CoppockCurveInstance:
        src = candle.source(self.source)
        return CoppockCurveInstance(
            self,
            roc1=self._construct("period2", RateOfChange, self.period2, src),
            roc2=self._construct("period3", RateOfChange, self.period3, src),
            ma1=self._construct("ma1", self.ma1.init, NEUTRAL_VALUE),
            ma2=self._construct("s3_ma", self.s3_ma.init, NEUTRAL_VALUE),
            pivot=self._construct(
                {"left": "s2_left", "right": "s2_right"},
                ReversalSignal, self.s2_left, self.s2_right, NEUTRAL_VALUE,
            ),
        )


class CoppockCurveInstance(IndicatorInstance[CoppockCurve]):
    """Live Coppock curve state."""

    __slots__ = ("_roc1", "_roc2", "_ma1", "_ma2", "_cross_zero", "_pivot", "_cross_signal")

    def __init__(
        self,
        cfg: CoppockCurve,
        *,
        roc1: RateOfChange,
        roc2: RateOfChange,
        ma1: MovingAverage,
        ma2: MovingAverage,
        pivot: ReversalSignal,
    ) -> None:
        super().__init__(cfg)
        self._roc1 = roc1
        self._roc2 = roc2
        self._ma1 = ma1
        self._ma2 = ma2
        self._cross_zero = Cross()
        self._pivot = pivot
        self._cross_signal = Cross()

    def next(self, candle: OHLCV) -> IndicatorResult:
        src = candle.source(self._cfg.source)
        roc1 = self._roc1.next(src)
        roc2 = self._roc2.next(src)
        main = self._ma1.next(roc1 + roc2)
        signal_line = self._ma2.next(main)

        signal1 = self._cross_zero.next((main, 0.0))
        signal2 = self._pivot.next(main)
        signal3 = self._cross_signal.next((main, signal_line))

        return IndicatorResult.new((main, signal_line), (signal1, signal2, signal3))
