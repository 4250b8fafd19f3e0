"""
Error handling tests for the forex calculators.

Tests cover error classification, rejection of pathological inputs that
would otherwise produce NaN or infinite results, and logging of failures.
"""

import math

import pytest
from structlog.testing import capture_logs

from fx_calc.calculators import (
    compound_growth,
    margin,
    pip_difference,
    pivot_points,
    position_size,
    profit_loss,
)
from fx_calc.engine import ForexCalculator
from fx_calc.errors import (
    CalculationError,
    ConfigurationError,
    InputError,
    InvalidInputError,
    MissingInputError,
    RateUnavailableError,
    SystemFailureError,
    UnsupportedMethodError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_input_error_hierarchy(self):
        """Test that input errors are recoverable ValueErrors."""
        base_error = InputError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}
        assert isinstance(base_error, ValueError)

        invalid = InvalidInputError("bad lots", field="lots", value=0)
        assert isinstance(invalid, InputError)
        assert invalid.field == "lots"
        assert invalid.value == 0

        missing = MissingInputError("no open", field="open_price")
        assert missing.field == "open_price"

        unsupported = UnsupportedMethodError("no", method="x", supported=["a"])
        assert unsupported.supported == ["a"]

    def test_system_failure_hierarchy(self):
        """Test that system failures are not recoverable."""
        for error in (
            CalculationError("boom", calculator_name="margin"),
            ConfigurationError("bad config", errors=[]),
            RateUnavailableError("no rate", base="EUR", quote="USD"),
        ):
            assert isinstance(error, SystemFailureError)
            assert error.recoverable is False

    def test_error_context(self):
        """Test that context is carried on every error."""
        error = InvalidInputError("bad", field="balance", context={"form": "position"})
        assert error.context == {"form": "position"}


class TestPathologicalInputs:
    """Test that degenerate inputs raise instead of returning NaN or infinity."""

    def test_nan_price(self):
        with pytest.raises(InvalidInputError):
            pip_difference(math.nan, 1.1, "EUR/USD")

    def test_infinite_principal(self):
        with pytest.raises(InvalidInputError):
            compound_growth(math.inf, 5)

    def test_string_number_rejected(self):
        """Raw strings must be parsed before reaching a calculator."""
        with pytest.raises(InvalidInputError):
            pivot_points("110", 100, 108)

    def test_zero_stop(self):
        with pytest.raises(InvalidInputError):
            position_size(10000, 2, "percentage", 0, "pips", 1.1, "EUR/USD", "USD")

    def test_zero_leverage(self):
        with pytest.raises(InvalidInputError):
            margin("EUR/USD", 1000, 0)

    def test_zero_entry(self):
        with pytest.raises(InvalidInputError):
            profit_loss(0, 1.1, 1, "EUR/USD", "USD")

    def test_demark_without_open(self):
        with pytest.raises(MissingInputError):
            pivot_points(110, 100, 108, "demark")


class TestFailureLogging:
    """Test that the calculator logs rejected inputs."""

    def test_rejected_input_logged(self):
        with capture_logs() as logs:
            calculator = ForexCalculator()
            with pytest.raises(InvalidInputError):
                calculator.margin("EUR/USD", 1000, leverage=0, exchange_rate=1.1)

        rejected = [entry for entry in logs if entry["event"] == "Calculation rejected"]
        assert len(rejected) == 1
        assert rejected[0]["calculator"] == "margin"
        assert rejected[0]["error_type"] == "InvalidInputError"
        assert rejected[0]["log_level"] == "warning"

    def test_missing_rate_logged(self):
        with capture_logs() as logs:
            calculator = ForexCalculator()
            with pytest.raises(RateUnavailableError):
                calculator.profit_loss(1.1, 1.2, 1, "EUR/USD", account_currency="GBP")

        assert any(entry["event"] == "Exchange rate unavailable" and entry["log_level"] == "error"
                   for entry in logs)

    def test_malformed_pair_logged(self):
        with capture_logs() as logs:
            calculator = ForexCalculator()
            with pytest.raises(InvalidInputError) as exc_info:
                calculator.calculate("pip_value", {"pair": "EU", "position_units": 1000})

        assert exc_info.value.field == "pair"
        rejected = [entry for entry in logs if entry["event"] == "Calculation rejected"]
        assert len(rejected) == 1
        assert rejected[0]["calculator"] == "pip_value"
        assert rejected[0]["error_type"] == "ParseError"


class TestMalformedPairs:
    """Test that unparseable pair names are ordinary input errors."""

    def test_pair_with_trailing_letter(self):
        with pytest.raises(InputError) as exc_info:
            pip_difference(1.1, 1.2, "EURUSDX")
        assert isinstance(exc_info.value, InvalidInputError)
        assert exc_info.value.field == "pair"
        assert exc_info.value.recoverable is True

    def test_facade_rejects_short_pair(self):
        with pytest.raises(InputError):
            ForexCalculator().pip_difference(1.1, 1.2, "EURUSDX")
