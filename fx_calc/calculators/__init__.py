"""Forex calculators: pure functions of plain numeric inputs"""

from .compounding import compound_growth
from .fibonacci import fibonacci_levels
from .lots import calculate_total_units, format_lot_size
from .margin import margin, margin_by_leverage
from .pips import get_pip_unit, pip_difference, pip_value
from .pivot_points import PivotMethod, pivot_points
from .position_size import (
    RiskMode,
    StopLossMode,
    position_size,
    risk_amount_to_percent,
    risk_percent_to_amount,
    stop_pips_to_price,
    stop_price_to_pips,
)
from .profit_loss import profit_loss
from .stop_loss import stop_loss_take_profit

__all__ = [
    "compound_growth",
    "fibonacci_levels",
    "pip_difference",
    "pip_value",
    "get_pip_unit",
    "pivot_points",
    "PivotMethod",
    "position_size",
    "RiskMode",
    "StopLossMode",
    "risk_percent_to_amount",
    "risk_amount_to_percent",
    "stop_pips_to_price",
    "stop_price_to_pips",
    "profit_loss",
    "margin",
    "margin_by_leverage",
    "stop_loss_take_profit",
    "calculate_total_units",
    "format_lot_size",
]
