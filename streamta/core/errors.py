"""
Exception hierarchy for indicator configuration and construction.

Every error is raised before an instance exists: validation, string
parsing, and sub-method construction. Once an instance is built its
next() is total and never raises.
"""

from __future__ import annotations

from typing import Any, Iterable


class IndicatorError(Exception):
    """Base class for all indicator errors."""


class WrongConfigError(IndicatorError):
    """Raised by init() when the configuration fails validate()."""

    def __init__(self, indicator: str, config: Any):
        self.indicator = indicator
        self.config = config
        super().__init__(
            f"Invalid {indicator} configuration: {config!r}\n"
            f"\n"
            f"Fix: check periods are in range and ordered as documented on {indicator}"
        )


class ParameterParseError(IndicatorError):
    """Raised when a string cannot be converted to a parameter value."""

    def __init__(self, name: str, value: str, reason: str | None = None):
        self.name = name
        self.value = value
        self.reason = reason
        msg = f"Cannot parse parameter '{name}' from {value!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnknownParameterError(ParameterParseError):
    """Raised by set() for a field name the config does not have."""

    def __init__(self, name: str, value: str, allowed: Iterable[str] = ()):
        self.allowed = sorted(allowed)
        super().__init__(
            name, value, f"unknown parameter. Allowed: {', '.join(self.allowed)}"
        )


class WrongMethodParametersError(IndicatorError):
    """
    Raised when a method or moving average rejects its construction params.

    Indicator init() re-raises it with `parameter` set to the owning
    config field, so the message names what the user actually wrote.
    """

    def __init__(self, parameter: str, value: Any, method: str, reason: str = ""):
        self.parameter = parameter
        self.value = value
        self.method = method
        self.reason = reason
        msg = f"Invalid parameter '{parameter}' = {value!r} for {method}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class IndicatorNotFoundError(IndicatorError, KeyError):
    """Raised when an indicator name is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown indicator '{name}'. Available: {', '.join(self.available)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise quote the whole message
        return self.args[0]
