"""
Indicator registry.

Provides:
- INDICATOR_REGISTRY: Global registry of config classes by name
- register_indicator: Decorator to register config classes
- get_indicator_class: Look up a config class by name
- create_indicator_config: Build a config from weakly-typed params
- list_indicators: List all registered indicator names

Configs are registered at import time via the @register_indicator
decorator and never after, so the registry is safe to read from
any thread.

Example:
    @register_indicator("CoppockCurve")
    @dataclass
    class CoppockCurve(IndicatorConfig):
        SIZE = (2, 3)
        PARAMETERS = {"period2": parse_period, ...}
        ...

    cfg = create_indicator_config("CoppockCurve", {"period2": 20})
"""

from __future__ import annotations

from typing import Any, Mapping

from .errors import IndicatorNotFoundError
from .indicator import IndicatorConfig

# Global registry: maps indicator name to config class
INDICATOR_REGISTRY: dict[str, type[IndicatorConfig]] = {}


def register_indicator(name: str):
    """
    Decorator to register an indicator config class.

    Sets the class NAME and validates its class attributes before
    registration.

    Raises:
        TypeError: If class doesn't inherit from IndicatorConfig or has a
            malformed SIZE / PARAMETERS.
        ValueError: If name is already registered.
    """

    def decorator(cls: type[IndicatorConfig]) -> type[IndicatorConfig]:
        if not isinstance(cls, type) or not issubclass(cls, IndicatorConfig):
            raise TypeError(
                f"Cannot register '{name}': class '{getattr(cls, '__name__', cls)}' "
                f"must inherit from IndicatorConfig\n"
                f"\n"
                f"Fix:\n"
                f"  @register_indicator('{name}')\n"
                f"  @dataclass\n"
                f"  class {getattr(cls, '__name__', 'MyIndicator')}(IndicatorConfig):\n"
                f"      ..."
            )

        size = cls.SIZE
        if (
            not isinstance(size, tuple)
            or len(size) != 2
            or not all(isinstance(n, int) and n >= 0 for n in size)
        ):
            raise TypeError(
                f"Cannot register '{name}': SIZE must be (value_count, signal_count), got {size!r}\n"
                f"\n"
                f"Fix: SIZE = (2, 3)"
            )

        if not isinstance(cls.PARAMETERS, dict) or not all(
            callable(parser) for parser in cls.PARAMETERS.values()
        ):
            raise TypeError(
                f"Cannot register '{name}': PARAMETERS must map field names to parsers\n"
                f"\n"
                f"Fix: PARAMETERS = {{'period': parse_period}}"
            )

        if name in INDICATOR_REGISTRY:
            existing_cls = INDICATOR_REGISTRY[name]
            raise ValueError(
                f"Cannot register '{name}': already registered to '{existing_cls.__name__}'\n"
                f"\n"
                f"Fix: Use a different name or unregister the existing class first."
            )

        cls.NAME = name
        INDICATOR_REGISTRY[name] = cls
        return cls

    return decorator


def unregister_indicator(name: str) -> None:
    """Remove an indicator from the registry (used by tests)."""
    INDICATOR_REGISTRY.pop(name, None)


def get_indicator_class(name: str) -> type[IndicatorConfig]:
    """
    Look up a registered config class.

    Raises:
        IndicatorNotFoundError: If name is not registered.
    """
    try:
        return INDICATOR_REGISTRY[name]
    except KeyError:
        raise IndicatorNotFoundError(name, INDICATOR_REGISTRY) from None


def create_indicator_config(
    name: str,
    params: Mapping[str, Any] | None = None,
) -> IndicatorConfig:
    """
    Build a config with defaults, then apply params through set().

    Values are stringified first, so YAML ints and strings are both fine.

    Raises:
        IndicatorNotFoundError: If name is not registered.
        ParameterParseError: If any param is unknown or unparsable.
    """
    cfg = get_indicator_class(name)()
    for key, value in (params or {}).items():
        cfg.set(key, str(value))
    return cfg


def list_indicators() -> list[str]:
    """Sorted names of all registered indicators."""
    return sorted(INDICATOR_REGISTRY)
