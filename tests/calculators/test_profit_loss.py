"""Tests for trade profit/loss"""

import pytest

from fx_calc.calculators.profit_loss import profit_loss
from fx_calc.errors import InvalidInputError, MissingInputError


class TestProfitLoss:
    """Test signed trade outcomes"""

    def test_long_winner(self, sample_trade):
        """50 pips on one standard lot is 500"""
        result = profit_loss(**sample_trade)
        assert result.pips == 50
        assert result.profit_loss == pytest.approx(500)
        assert result.pip_value == pytest.approx(10)
        assert result.roi_percent == pytest.approx(500 / 110000 * 100)

    def test_short_loser(self, sample_trade):
        """The same move is a loss for a short"""
        result = profit_loss(**{**sample_trade, "is_long": False})
        assert result.pips == -50
        assert result.profit_loss == pytest.approx(-500)
        assert result.roi_percent < 0

    def test_short_winner(self, sample_trade):
        """Shorts gain when the price falls"""
        result = profit_loss(**{**sample_trade, "exit_price": 1.0950, "is_long": False})
        assert result.pips == 50
        assert result.profit_loss == pytest.approx(500)

    def test_flat_trade(self, sample_trade):
        """Exit at entry is zero"""
        result = profit_loss(**{**sample_trade, "exit_price": 1.1000})
        assert result.pips == 0
        assert result.profit_loss == 0

    def test_jpy_pair_converted(self):
        """USD/JPY gains converted back to USD"""
        result = profit_loss(110.00, 110.50, 1, "USD/JPY", "USD", exchange_rate=1 / 110.5)
        assert result.pips == 50
        assert result.profit_loss == pytest.approx(50000 / 110.5)

    def test_jpy_pair_requires_rate(self):
        """P/L in a USD account is not reported in yen by default"""
        with pytest.raises(MissingInputError):
            profit_loss(110.00, 110.50, 1, "USD/JPY", "USD")

    def test_custom_lot_units(self, sample_trade):
        """Lot size can be overridden"""
        result = profit_loss(**sample_trade, lot_units=10000)
        assert result.profit_loss == pytest.approx(50)

    @pytest.mark.parametrize("field", ["entry_price", "lots"])
    def test_zero_denominators_rejected(self, sample_trade, field):
        """Zero entry or lots would make ROI undefined"""
        with pytest.raises(InvalidInputError) as exc_info:
            profit_loss(**{**sample_trade, field: 0})
        assert exc_info.value.field == field
