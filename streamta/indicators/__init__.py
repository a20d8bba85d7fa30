"""
Composite indicators and their YAML config loader.

Importing this package registers every indicator with the registry.
"""

from .coppock_curve import CoppockCurve, CoppockCurveInstance
from .loader import (
    IndicatorConfigNotFoundError,
    config_from_dict,
    dump_indicator_config,
    list_indicator_configs,
    load_indicator_config,
    load_indicator_configs,
    save_indicator_config,
)

__all__ = [
    "CoppockCurve",
    "CoppockCurveInstance",
    "IndicatorConfigNotFoundError",
    "config_from_dict",
    "dump_indicator_config",
    "list_indicator_configs",
    "load_indicator_config",
    "load_indicator_configs",
    "save_indicator_config",
]
