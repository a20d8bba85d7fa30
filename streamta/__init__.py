"""
streamta: streaming technical analysis.

Indicators are split into a configuration (plain, validated parameters)
and an instance (live state advanced one bar at a time):

    from streamta import Candle, CoppockCurve

    cfg = CoppockCurve(period2=20)
    instance = cfg.init(first_candle)
    for candle in feed:
        result = instance.next(candle)
        main, signal_line = result.values
"""

from .averages import MA, MAKind, MovingAverage, MovingAverageConstructor
from .config import PERIOD_MAX, get_config
from .core import (
    Action,
    Candle,
    IndicatorConfig,
    IndicatorError,
    IndicatorInstance,
    IndicatorNotFoundError,
    IndicatorResult,
    OHLCV,
    ParameterParseError,
    Source,
    UnknownParameterError,
    WrongConfigError,
    WrongMethodParametersError,
    create_indicator_config,
    get_indicator_class,
    list_indicators,
    register_indicator,
)
from .indicators import (
    CoppockCurve,
    CoppockCurveInstance,
    dump_indicator_config,
    load_indicator_config,
    load_indicator_configs,
)

__version__ = "0.1.0"

__all__ = [
    "MA",
    "MAKind",
    "MovingAverage",
    "MovingAverageConstructor",
    "PERIOD_MAX",
    "get_config",
    "Action",
    "Candle",
    "IndicatorConfig",
    "IndicatorError",
    "IndicatorInstance",
    "IndicatorNotFoundError",
    "IndicatorResult",
    "OHLCV",
    "ParameterParseError",
    "Source",
    "UnknownParameterError",
    "WrongConfigError",
    "WrongMethodParametersError",
    "create_indicator_config",
    "get_indicator_class",
    "list_indicators",
    "register_indicator",
    "CoppockCurve",
    "CoppockCurveInstance",
    "dump_indicator_config",
    "load_indicator_config",
    "load_indicator_configs",
]
