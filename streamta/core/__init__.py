"""
Core protocol: bars, signals, errors, the Config/Instance contract and
the indicator registry.
"""

from .action import Action
from .candles import OHLCV, Candle, Source
from .errors import (
    IndicatorError,
    IndicatorNotFoundError,
    ParameterParseError,
    UnknownParameterError,
    WrongConfigError,
    WrongMethodParametersError,
)
from .indicator import IndicatorConfig, IndicatorInstance, IndicatorResult
from .registry import (
    INDICATOR_REGISTRY,
    create_indicator_config,
    get_indicator_class,
    list_indicators,
    register_indicator,
    unregister_indicator,
)

__all__ = [
    "Action",
    "Candle",
    "OHLCV",
    "Source",
    "IndicatorError",
    "IndicatorNotFoundError",
    "ParameterParseError",
    "UnknownParameterError",
    "WrongConfigError",
    "WrongMethodParametersError",
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorResult",
    "INDICATOR_REGISTRY",
    "create_indicator_config",
    "get_indicator_class",
    "list_indicators",
    "register_indicator",
    "unregister_indicator",
]
