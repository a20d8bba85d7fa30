"""
Base class for streaming methods.

A method is a small state machine over a scalar (or pair) stream:
constructed once with its parameters and a seed, then fed one value
per next() call. Methods never look at anything but the value passed
to the current call and their own bounded window.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..config.constants import PERIOD_MAX
from ..core.errors import WrongMethodParametersError

In = TypeVar("In")
Out = TypeVar("Out")


class Method(ABC, Generic[In, Out]):
    """Base class for streaming methods."""

    __slots__ = ()

    @abstractmethod
    def next(self, value: In) -> Out:
        """Consume one value and return the current output."""
        ...

    @classmethod
    def _check_period(cls, parameter: str, value: Any, minimum: int) -> None:
        """Raise unless minimum <= value < PERIOD_MAX."""
        if not isinstance(value, int) or not minimum <= value < PERIOD_MAX:
            raise WrongMethodParametersError(
                parameter, value, cls.__name__,
                f"must be an integer in [{minimum}, {PERIOD_MAX})",
            )
