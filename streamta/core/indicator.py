"""
Config/Instance protocol shared by every indicator.

Provides:
- IndicatorResult: Fixed-shape values + signals emitted per bar
- IndicatorConfig: Validated parameter set that builds an instance
- IndicatorInstance: Live per-stream state driven bar by bar

Lifecycle:
    cfg = CoppockCurve(period2=20)        # plain value, may be mutated
    cfg.set("s2_left", "3")               # weakly-typed config tooling
    instance = cfg.init(first_candle)     # validate + build, atomic
    for candle in feed:
        result = instance.next(candle)    # O(1), never raises

init() copies the config into the instance, so mutating the caller's
config afterwards never affects a running instance. Instances are not
thread-safe; run one per worker. Independent instances share nothing.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Generic, TypeVar

from ..utils.logger import get_logger
from .candles import OHLCV
from .errors import (
    ParameterParseError,
    UnknownParameterError,
    WrongConfigError,
    WrongMethodParametersError,
)

C = TypeVar("C", bound="IndicatorConfig")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class IndicatorResult:
    """
    Output of one next() call.

    Attributes:
        values: Numeric series values, length = config.size()[0].
        signals: Signal values in [-1, 1], length = config.size()[1].
    """

    values: tuple[float, ...]
    signals: tuple[float, ...]

    @classmethod
    def new(cls, values: Sequence[float], signals: Sequence[float]) -> IndicatorResult:
        return cls(tuple(values), tuple(signals))

    def value(self, index: int) -> float:
        return self.values[index]

    def signal(self, index: int) -> float:
        return self.signals[index]

    @property
    def size(self) -> tuple[int, int]:
        return len(self.values), len(self.signals)


class IndicatorConfig(ABC):
    """
    Abstract base class for indicator configurations.

    Subclasses are dataclasses and must define class attributes and
    implement abstract methods:

    Class Attributes:
        NAME: Indicator name used by the registry and in errors.
        SIZE: (value_count, signal_count) of every result.
        PARAMETERS: Field name -> parser(str) dispatch table used by set().

    Abstract Methods:
        validate(): Structural check of the numeric fields.
        _build(candle): Construct the instance from an already
            validated copy of the config.
    """

    NAME: ClassVar[str] = ""
    SIZE: ClassVar[tuple[int, int]] = (0, 0)
    PARAMETERS: ClassVar[dict[str, Callable[[str], Any]]] = {}

    @abstractmethod
    def validate(self) -> bool:
        """True when every range/ordering constraint holds."""
        ...

    @abstractmethod
    def _build(self, candle: OHLCV) -> IndicatorInstance:
        """Build the instance; self is the instance's private copy."""
        ...

    def init(self, candle: OHLCV) -> IndicatorInstance:
        """
        Validate and build an instance bound to the first bar.

        Raises:
            WrongConfigError: If validate() is False.
            WrongMethodParametersError: If an owned method rejects its
                parameters despite validation; `parameter` names the
                config field responsible.
        """
        logger = get_logger()
        if not self.validate():
            logger.indicator("REJECTED", self.NAME, self.to_params())
            raise WrongConfigError(self.NAME, self)

        instance = copy.copy(self)._build(candle)
        logger.indicator("INIT", self.NAME, self.to_params())
        return instance

    def set(self, name: str, value: str) -> None:
        """
        Set one field from its string form.

        Raises:
            UnknownParameterError: If name is not a parameter.
            ParameterParseError: If value cannot be parsed for name.
        """
        parser = self.PARAMETERS.get(name)
        if parser is None:
            raise UnknownParameterError(name, value, self.PARAMETERS)

        try:
            parsed = parser(value)
        except ParameterParseError as e:
            raise ParameterParseError(name, value, e.reason) from e
        except (TypeError, ValueError) as e:
            raise ParameterParseError(name, value, str(e)) from e

        setattr(self, name, parsed)

    def size(self) -> tuple[int, int]:
        """(value_count, signal_count) of every result; needs no data."""
        return self.SIZE

    def to_params(self) -> dict[str, str]:
        """Every parameter in the string form set() accepts."""
        names = {f.name for f in fields(self)}
        return {name: str(getattr(self, name)) for name in self.PARAMETERS if name in names}

    @staticmethod
    def _construct(
        parameter: str | Mapping[str, str],
        factory: Callable[..., T],
        *args: Any,
    ) -> T:
        """
        Call factory, tagging construction errors with the config field name.

        parameter is either the field name, or a map from the method's own
        parameter names to field names when one method consumes several.
        """
        try:
            return factory(*args)
        except WrongMethodParametersError as e:
            if isinstance(parameter, Mapping):
                name = parameter.get(e.parameter, e.parameter)
            else:
                name = parameter
            raise WrongMethodParametersError(name, e.value, e.method, e.reason) from e


class IndicatorInstance(ABC, Generic[C]):
    """Abstract base class for live indicator state."""

    __slots__ = ("_cfg",)

    def __init__(self, cfg: C) -> None:
        self._cfg = cfg

    @property
    def config(self) -> C:
        """A copy of the configuration this instance was built from."""
        return copy.copy(self._cfg)

    @property
    def name(self) -> str:
        return self._cfg.NAME

    @abstractmethod
    def next(self, candle: OHLCV) -> IndicatorResult:
        """Advance by exactly one bar and return the current result."""
        ...
