"""Tests for Fibonacci retracement and extension levels"""

import pytest

from fx_calc.calculators.fibonacci import EXTENSION_LEVELS, RETRACEMENT_LEVELS, fibonacci_levels
from fx_calc.models.results import FibonacciLevel


class TestUptrend:
    """Levels measured down from the high"""

    def test_known_levels(self):
        """50% sits halfway and 100% at the low"""
        result = fibonacci_levels(100, 50, True)
        assert FibonacciLevel(level=50, price=75) in result.retracements
        assert FibonacciLevel(level=100, price=50) in result.retracements
        assert result.price_at(0) == 100

    def test_level_sets(self):
        """All retracement and extension ratios are present in order"""
        result = fibonacci_levels(1.2, 1.1, True)
        assert tuple(l.level for l in result.retracements) == RETRACEMENT_LEVELS
        assert tuple(l.level for l in result.extensions) == EXTENSION_LEVELS

    def test_extensions_above_high(self):
        """Uptrend extensions project above the high"""
        result = fibonacci_levels(100, 50, True)
        assert result.price_at(161.8) == pytest.approx(130.9)
        assert result.price_at(200) == pytest.approx(150)
        assert result.price_at(261.8) == pytest.approx(180.9)

    def test_retracements_descend(self):
        """Deeper retracements give lower prices"""
        prices = [l.price for l in fibonacci_levels(100, 50, True).retracements]
        assert prices == sorted(prices, reverse=True)


class TestDowntrend:
    """Levels measured up from the low"""

    def test_anchor_is_low(self):
        """0% sits at the low and 100% at the high"""
        result = fibonacci_levels(100, 50, False)
        assert result.price_at(0) == 50
        assert result.price_at(50) == 75
        assert result.price_at(100) == 100

    def test_extensions_below_low(self):
        """Downtrend extensions project below the low"""
        result = fibonacci_levels(100, 50, False)
        assert result.price_at(161.8) == pytest.approx(19.1)
        assert result.price_at(200) == pytest.approx(0)


class TestDegenerateInputs:
    """Inputs that are not rejected"""

    def test_flat_range(self):
        """Equal high and low collapse every level onto one price"""
        result = fibonacci_levels(1.1, 1.1, True)
        assert {l.price for l in result.retracements + result.extensions} == {1.1}

    def test_inverted_range_does_not_raise(self):
        """High below low produces mirrored levels without error"""
        result = fibonacci_levels(50, 100, True)
        assert result.price_at(100) == 100

    def test_unknown_level(self):
        """Levels outside the table return None"""
        assert fibonacci_levels(100, 50).price_at(12.5) is None
