"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import numpy as np
import pytest

from streamta.config import Config
from streamta.core import Candle
from streamta.utils import setup_logger


@pytest.fixture
def prices() -> np.ndarray:
    """300 strictly positive random-walk closes, reproducible."""
    rng = np.random.default_rng(42)
    return 100.0 * np.exp(np.cumsum(rng.normal(0.0, 0.01, size=300)))


@pytest.fixture
def candles(prices: np.ndarray) -> list[Candle]:
    """Flat candles built from the prices fixture."""
    return [Candle.from_price(float(p), volume=1.0) for p in prices]


@pytest.fixture
def first_candle() -> Candle:
    return Candle(open=100.0, high=105.0, low=99.0, close=104.0, volume=1500.0)


@pytest.fixture
def clean_env(monkeypatch):
    """
    Unset every STREAMTA_* variable for the test and restore it afterwards,
    including values a .env file loaded during the test.
    """
    for name in (
        "STREAMTA_LOG_LEVEL",
        "STREAMTA_LOG_DIR",
        "STREAMTA_LOG_COLORS",
        "STREAMTA_INDICATOR_DIR",
    ):
        # setenv first so monkeypatch records the original state
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield monkeypatch
    Config._instance = None


@pytest.fixture
def debug_logger():
    """Console-only DEBUG logger without colors; reset afterwards."""
    logger = setup_logger(log_level="DEBUG", colors=False)
    yield logger
    setup_logger()
