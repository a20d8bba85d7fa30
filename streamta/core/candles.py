"""
Bar data and source selection.

Provides:
- Source: Which scalar an indicator reads from a bar
- OHLCV: Structural protocol the engine depends on
- Candle: Immutable default implementation of OHLCV

The engine only reads bars; it never mutates or retains them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from .errors import ParameterParseError


class Source(str, Enum):
    """Scalar projections of a bar."""

    CLOSE = "close"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    HL2 = "hl2"                      # (high + low) / 2
    TP = "tp"                        # Typical price: (high + low + close) / 3
    VOLUME = "volume"
    VOLUMED_PRICE = "volumed_price"  # tp * volume

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Source:
        """
        Parse a source token, case-insensitively.

        Raises:
            ParameterParseError: If text names no source.
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ParameterParseError("source", text, f"expected one of {valid}") from None


@runtime_checkable
class OHLCV(Protocol):
    """Read-only bar contract consumed by indicators."""

    @property
    def open(self) -> float: ...

    @property
    def high(self) -> float: ...

    @property
    def low(self) -> float: ...

    @property
    def close(self) -> float: ...

    @property
    def volume(self) -> float: ...

    def source(self, kind: Source) -> float: ...


@dataclass(frozen=True, slots=True)
class Candle:
    """
    Single OHLCV bar.

    Example:
        >>> bar = Candle(open=100.0, high=105.0, low=99.0, close=104.0, volume=1500.0)
        >>> bar.source(Source.CLOSE)
        104.0
        >>> bar.source(Source.HL2)
        102.0
    """

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    def tp(self) -> float:
        return (self.high + self.low + self.close) / 3.0

    def source(self, kind: Source) -> float:
        """Select one scalar from the bar."""
        if kind is Source.CLOSE:
            return self.close
        if kind is Source.OPEN:
            return self.open
        if kind is Source.HIGH:
            return self.high
        if kind is Source.LOW:
            return self.low
        if kind is Source.HL2:
            return (self.high + self.low) / 2.0
        if kind is Source.TP:
            return self.tp()
        if kind is Source.VOLUME:
            return self.volume
        return self.tp() * self.volume

    @classmethod
    def from_price(cls, price: float, volume: float = 0.0) -> Candle:
        """Flat bar where every price field equals `price`."""
        return cls(open=price, high=price, low=price, close=price, volume=volume)
