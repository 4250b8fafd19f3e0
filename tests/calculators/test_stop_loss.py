"""Tests for stop-loss / take-profit risk and reward"""

import pytest

from fx_calc.calculators.stop_loss import stop_loss_take_profit
from fx_calc.errors import InvalidInputError


class TestStopLossTakeProfit:
    """Test bracketed trade risk/reward"""

    def test_long_bracket(self):
        """50 pip stop and 100 pip target is 1:2"""
        result = stop_loss_take_profit(1.2000, 1.1950, 1.2100, 1, "EUR/USD", "USD")
        assert result.stop_loss_pips == 50
        assert result.take_profit_pips == 100
        assert result.risk_reward_ratio == pytest.approx(2.0)
        assert result.stop_loss_amount == pytest.approx(500)
        assert result.take_profit_amount == pytest.approx(1000)

    def test_short_bracket(self):
        """Shorts place the stop above and the target below"""
        result = stop_loss_take_profit(1.2000, 1.2050, 1.1900, 1, "EUR/USD", "USD", is_long=False)
        assert result.stop_loss_pips == 50
        assert result.take_profit_pips == 100
        assert result.risk_reward_ratio == pytest.approx(2.0)

    def test_mini_lot_amounts(self):
        """Amounts scale with the position"""
        result = stop_loss_take_profit(1.2000, 1.1950, 1.2100, 0.1, "EUR/USD", "USD")
        assert result.pip_value == pytest.approx(1)
        assert result.stop_loss_amount == pytest.approx(50)

    def test_stop_on_wrong_side(self):
        """A long stop above entry is rejected"""
        with pytest.raises(InvalidInputError) as exc_info:
            stop_loss_take_profit(1.2000, 1.2050, 1.2100, 1, "EUR/USD", "USD")
        assert exc_info.value.field == "stop_loss_price"

    def test_target_on_wrong_side(self):
        """A long target below entry is rejected"""
        with pytest.raises(InvalidInputError) as exc_info:
            stop_loss_take_profit(1.2000, 1.1950, 1.1900, 1, "EUR/USD", "USD")
        assert exc_info.value.field == "take_profit_price"

    def test_stop_at_entry(self):
        """A stop at entry would make the ratio undefined"""
        with pytest.raises(InvalidInputError):
            stop_loss_take_profit(1.2000, 1.2000, 1.2100, 1, "EUR/USD", "USD")
