"""
Tests for the indicator registry.
"""

from dataclasses import dataclass

import pytest

from streamta.core import (
    INDICATOR_REGISTRY,
    IndicatorConfig,
    IndicatorNotFoundError,
    ParameterParseError,
    create_indicator_config,
    get_indicator_class,
    list_indicators,
    register_indicator,
    unregister_indicator,
)
from streamta.averages import MA, MAKind
from streamta.indicators import CoppockCurve


class TestLookup:
    """Registered indicator lookup."""

    def test_coppock_is_registered(self):
        assert get_indicator_class("CoppockCurve") is CoppockCurve
        assert "CoppockCurve" in list_indicators()
        assert CoppockCurve.NAME == "CoppockCurve"

    def test_unknown_name_raises(self):
        with pytest.raises(IndicatorNotFoundError) as exc_info:
            get_indicator_class("Nope")

        assert exc_info.value.name == "Nope"
        assert "CoppockCurve" in exc_info.value.available
        assert "Unknown indicator 'Nope'" in str(exc_info.value)

    def test_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            get_indicator_class("Nope")

    def test_create_applies_params(self):
        cfg = create_indicator_config("CoppockCurve", {"period2": 20, "ma1": "ema-3"})

        assert cfg == CoppockCurve(period2=20, ma1=MA(MAKind.EMA, 3))

    def test_create_rejects_bad_param(self):
        with pytest.raises(ParameterParseError):
            create_indicator_config("CoppockCurve", {"period2": "twenty"})


class TestRegistration:
    """register_indicator decorator."""

    def test_register_and_unregister(self):
        @dataclass
        class Dummy(IndicatorConfig):
            SIZE = (1, 0)

            def validate(self):
                return True

            def _build(self, candle):
                raise NotImplementedError

        try:
            register_indicator("DummyForTest")(Dummy)
            assert get_indicator_class("DummyForTest") is Dummy
            assert Dummy.NAME == "DummyForTest"
        finally:
            unregister_indicator("DummyForTest")

        assert "DummyForTest" not in INDICATOR_REGISTRY

    def test_duplicate_name_raises(self):
        with pytest.raises(ValueError, match="already registered"):
            register_indicator("CoppockCurve")(CoppockCurve)

    def test_non_config_class_raises(self):
        with pytest.raises(TypeError, match="must inherit from IndicatorConfig"):
            register_indicator("NotAConfig")(dict)

    def test_malformed_size_raises(self):
        class BadSize(IndicatorConfig):
            SIZE = (1,)

            def validate(self):
                return True

            def _build(self, candle):
                raise NotImplementedError

        with pytest.raises(TypeError, match="SIZE"):
            register_indicator("BadSize")(BadSize)
        assert "BadSize" not in INDICATOR_REGISTRY
