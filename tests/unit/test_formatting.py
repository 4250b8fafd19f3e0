"""Unit tests for display formatting."""

import pytest

from fx_calc.utils.formatting import (
    format_currency,
    format_pip_value,
    format_price,
    get_currency_decimals,
    get_currency_symbol,
)


class TestCurrencyLookups:

    def test_known_symbol(self):
        assert get_currency_symbol("EUR") == "€"
        assert get_currency_symbol("INR") == "₹"

    def test_unknown_symbol_falls_back_to_code(self):
        assert get_currency_symbol("SEK") == "SEK"

    def test_decimals(self):
        assert get_currency_decimals("JPY") == 0
        assert get_currency_decimals("USD") == 2
        assert get_currency_decimals("SEK") == 2


class TestFormatCurrency:
    """Test amount formatting."""

    @pytest.mark.parametrize("amount,code,expected", [
        (1234.5, "USD", "$1,234.50"),
        (-5.5, "USD", "-$5.50"),
        (12345.67, "USD", "$12,346"),
        (1234.4, "JPY", "¥1,234"),
        (99.99, "GBP", "£99.99"),
        (10.0, "SEK", "SEK10.00"),
    ])
    def test_format(self, amount, code, expected):
        """Symbol, separators and decimals."""
        assert format_currency(amount, code) == expected

    def test_without_symbol(self):
        """Symbol can be omitted."""
        assert format_currency(1234.5, "EUR", show_symbol=False) == "1,234.50"

    def test_decimal_override(self):
        """Explicit decimals are honoured below 10,000."""
        assert format_currency(1.23449, "USD", decimal_places=4) == "$1.2345"


class TestFormatPipValue:
    """Test pip value formatting."""

    def test_regular_value(self):
        assert format_pip_value(10, "USD") == "$10.00"

    def test_tiny_value_keeps_precision(self):
        """Values below 0.01 get four decimals."""
        assert format_pip_value(0.005, "USD") == "$0.0050"

    def test_large_value(self):
        assert format_pip_value(25000, "JPY") == "¥25,000"


class TestFormatPrice:

    def test_price_digits(self):
        """One digit past the pip decimal."""
        assert format_price(1.1, 4) == "1.10000"
        assert format_price(110.5, 2) == "110.500"
