"""Trade profit/loss and return on investment"""

from typing import Optional

from ..data.reference import STANDARD_LOT_UNITS
from ..models.results import ProfitLossResult
from .guards import require_finite, require_positive
from .pips import PIP_PRECISION, PairLike, pip_value, resolve_pair, to_pips


def profit_loss(
    entry_price: float,
    exit_price: float,
    lots: float,
    pair: PairLike,
    account_currency: str,
    is_long: bool = True,
    exchange_rate: Optional[float] = None,
    lot_units: float = STANDARD_LOT_UNITS
) -> ProfitLossResult:
    """
    Calculate signed pips, profit/loss and ROI for a closed trade

    Longs gain when exit > entry, shorts when exit < entry.

    P/L = pips * pip_value
    ROI = P/L / (lots * lot_units * entry_price) * 100

    Args:
        entry_price: Entry price
        exit_price: Exit price
        lots: Position size in standard lots
        pair: Currency pair name or object
        account_currency: Currency P/L is reported in
        is_long: Trade direction
        exchange_rate: Quote to account currency rate (required when they differ)
        lot_units: Units per lot

    Returns:
        ProfitLossResult
    """
    entry_price = require_positive(entry_price, "entry_price")
    exit_price = require_finite(exit_price, "exit_price")
    lots = require_positive(lots, "lots")
    parsed = resolve_pair(pair)

    direction = 1 if is_long else -1
    pips = to_pips(direction * (exit_price - entry_price), parsed.pip_unit, PIP_PRECISION)

    units = lots * lot_units
    value_per_pip = pip_value(parsed, units, account_currency, exchange_rate).pip_value_account
    amount = pips * value_per_pip
    roi_percent = amount / (units * entry_price) * 100

    return ProfitLossResult(
        pips=pips,
        profit_loss=amount,
        roi_percent=roi_percent,
        pip_value=value_per_pip,
    )
