"""
Tests for the Config/Instance protocol, exercised through CoppockCurve.

Validates that:
1. validate() checks every range and ordering constraint
2. init() rejects invalid configs with WrongConfigError
3. set() parses strings and distinguishes unknown from unparsable params
4. Instances own a private copy of their config
5. Method construction errors name the config field responsible
"""

from dataclasses import replace

import pytest

from streamta.averages import MA, MAKind
from streamta.config import PERIOD_MAX
from streamta.core import (
    IndicatorConfig,
    ParameterParseError,
    Source,
    UnknownParameterError,
    WrongConfigError,
    WrongMethodParametersError,
)
from streamta.indicators import CoppockCurve
from streamta.methods import ReversalSignal
from tests.doubles import FailingMAConstructor, IdentityMAConstructor

INVALID_FIELDS = [
    {"ma1": MA(MAKind.WMA, 1)},
    {"ma1": MA(MAKind.WMA, PERIOD_MAX)},
    {"s3_ma": MA(MAKind.EMA, 1)},
    {"s3_ma": MA(MAKind.EMA, PERIOD_MAX)},
    {"period2": 11, "period3": 11},
    {"period2": 10, "period3": 11},
    {"period3": 0},
    {"period2": PERIOD_MAX},
    {"s2_left": 0},
    {"s2_right": 0},
    {"s2_left": 200, "s2_right": 55},
    {"source": "close"},
]


class TestValidate:
    """Structural validation."""

    def test_defaults_are_valid(self):
        cfg = CoppockCurve()

        assert cfg.validate()
        assert cfg.ma1 == MA(MAKind.WMA, 10)
        assert cfg.s3_ma == MA(MAKind.EMA, 5)
        assert (cfg.period2, cfg.period3) == (14, 11)
        assert (cfg.s2_left, cfg.s2_right) == (4, 2)
        assert cfg.source is Source.CLOSE

    @pytest.mark.parametrize("changes", INVALID_FIELDS)
    def test_invalid_fields(self, changes):
        assert not replace(CoppockCurve(), **changes).validate()

    def test_boundary_values_are_valid(self):
        cfg = CoppockCurve(
            ma1=MA(MAKind.SMA, PERIOD_MAX - 1),
            s3_ma=MA(MAKind.RMA, 2),
            period2=PERIOD_MAX - 1,
            period3=1,
            s2_left=PERIOD_MAX - 2,
            s2_right=1,
        )
        assert cfg.validate()

    def test_size_needs_no_data(self):
        assert CoppockCurve().size() == (2, 3)


class TestInit:
    """init(): validate + build, atomically."""

    @pytest.mark.parametrize("changes", INVALID_FIELDS)
    def test_invalid_config_raises(self, changes, first_candle):
        cfg = replace(CoppockCurve(), **changes)

        with pytest.raises(WrongConfigError) as exc_info:
            cfg.init(first_candle)

        assert exc_info.value.indicator == "CoppockCurve"
        assert exc_info.value.config is cfg

    def test_instance_result_shape(self, first_candle):
        instance = CoppockCurve().init(first_candle)
        result = instance.next(first_candle)

        assert result.size == (2, 3)
        assert instance.name == "CoppockCurve"

    def test_instance_keeps_private_config(self, first_candle):
        """Mutating the caller's config never reaches a running instance."""
        cfg = CoppockCurve()
        instance = cfg.init(first_candle)

        cfg.period2 = 99
        cfg.set("source", "volume")

        assert instance.config.period2 == 14
        assert instance.config.source is Source.CLOSE

    def test_config_accessor_returns_copy(self, first_candle):
        instance = CoppockCurve().init(first_candle)

        view = instance.config
        view.period2 = 99

        assert instance.config.period2 == 14

    def test_method_error_names_config_field(self, first_candle):
        cfg = CoppockCurve(ma1=FailingMAConstructor())

        with pytest.raises(WrongMethodParametersError) as exc_info:
            cfg.init(first_candle)

        assert exc_info.value.parameter == "ma1"
        assert exc_info.value.method == "FailingMA"

    def test_method_error_in_signal_ma(self, first_candle):
        cfg = CoppockCurve(s3_ma=FailingMAConstructor())

        with pytest.raises(WrongMethodParametersError) as exc_info:
            cfg.init(first_candle)

        assert exc_info.value.parameter == "s3_ma"

    def test_construct_maps_method_parameters(self):
        """A method with several parameters reports the matching field."""
        with pytest.raises(WrongMethodParametersError) as exc_info:
            IndicatorConfig._construct(
                {"left": "s2_left", "right": "s2_right"},
                ReversalSignal, 200, 100, 0.0,
            )

        assert exc_info.value.parameter == "s2_right"
        assert exc_info.value.value == 100

    def test_custom_ma_constructor(self, first_candle):
        """Any MovingAverageConstructor plugs into an MA field."""
        cfg = CoppockCurve(ma1=IdentityMAConstructor(), s3_ma=IdentityMAConstructor())
        result = cfg.init(first_candle).next(first_candle)

        assert result.values == (0.0, 0.0)


class TestSet:
    """Weakly-typed parameter setting."""

    @pytest.mark.parametrize(
        "name, value, expected",
        [
            ("period2", "20", 20),
            ("period3", " 7 ", 7),
            ("s2_left", "3", 3),
            ("s2_right", "1", 1),
            ("ma1", "sma-7", MA(MAKind.SMA, 7)),
            ("s3_ma", "RMA-3", MA(MAKind.RMA, 3)),
            ("source", "HL2", Source.HL2),
        ],
    )
    def test_set_parses_value(self, name, value, expected):
        cfg = CoppockCurve()
        cfg.set(name, value)
        assert getattr(cfg, name) == expected

    def test_set_does_not_validate(self):
        """Representable but illegal values are accepted; init() rejects them."""
        cfg = CoppockCurve()
        cfg.set("period3", "200")

        assert cfg.period3 == 200
        assert not cfg.validate()

    @pytest.mark.parametrize(
        "name, value",
        [
            ("period2", "abc"),
            ("period2", "256"),
            ("period2", "-1"),
            ("period2", "1.5"),
            ("ma1", "xx-5"),
            ("source", "median"),
        ],
    )
    def test_unparsable_value_raises(self, name, value):
        cfg = CoppockCurve()
        before = getattr(cfg, name)

        with pytest.raises(ParameterParseError) as exc_info:
            cfg.set(name, value)

        assert not isinstance(exc_info.value, UnknownParameterError)
        assert exc_info.value.name == name
        assert exc_info.value.value == value
        assert getattr(cfg, name) == before

    def test_unknown_parameter_raises(self):
        with pytest.raises(UnknownParameterError) as exc_info:
            CoppockCurve().set("period1", "5")

        assert exc_info.value.name == "period1"
        assert "period2" in exc_info.value.allowed
        # Callers catching parse failures also catch unknown names
        assert isinstance(exc_info.value, ParameterParseError)


class TestToParams:
    """String form of every parameter."""

    def test_default_params(self):
        assert CoppockCurve().to_params() == {
            "ma1": "wma-10",
            "s3_ma": "ema-5",
            "period2": "14",
            "period3": "11",
            "s2_left": "4",
            "s2_right": "2",
            "source": "close",
        }

    def test_params_round_trip_through_set(self):
        cfg = CoppockCurve(
            ma1=MA(MAKind.SMA, 20),
            s3_ma=MA(MAKind.RMA, 9),
            period2=30,
            period3=12,
            s2_left=6,
            s2_right=3,
            source=Source.TP,
        )

        rebuilt = CoppockCurve()
        for name, value in cfg.to_params().items():
            rebuilt.set(name, value)

        assert rebuilt == cfg
