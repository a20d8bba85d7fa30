"""Configuration module."""

from .config import Config, IndicatorsConfig, LogConfig, get_config
from .constants import NEUTRAL_VALUE, PERIOD_MAX, parse_period

__all__ = [
    "Config",
    "IndicatorsConfig",
    "LogConfig",
    "get_config",
    "NEUTRAL_VALUE",
    "PERIOD_MAX",
    "parse_period",
]
