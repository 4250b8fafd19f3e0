"""Stop-loss / take-profit risk and reward"""

from typing import Optional

from ..data.reference import STANDARD_LOT_UNITS
from ..errors import InvalidInputError
from ..models.results import StopLossTakeProfitResult
from .guards import require_positive
from .pips import PIP_PRECISION, PairLike, pip_value, resolve_pair, to_pips


def stop_loss_take_profit(
    entry_price: float,
    stop_loss_price: float,
    take_profit_price: float,
    lots: float,
    pair: PairLike,
    account_currency: str,
    is_long: bool = True,
    exchange_rate: Optional[float] = None,
    lot_units: float = STANDARD_LOT_UNITS
) -> StopLossTakeProfitResult:
    """
    Calculate the risk, reward and risk/reward ratio of a bracketed trade

    Args:
        entry_price: Entry price
        stop_loss_price: Stop-loss price (below entry for longs)
        take_profit_price: Take-profit price (above entry for longs)
        lots: Position size in standard lots
        pair: Currency pair name or object
        account_currency: Currency amounts are reported in
        is_long: Trade direction
        exchange_rate: Quote to account currency rate (required when they differ)
        lot_units: Units per lot

    Returns:
        StopLossTakeProfitResult

    Raises:
        InvalidInputError: If stop or target sit on the wrong side of entry
    """
    entry_price = require_positive(entry_price, "entry_price")
    stop_loss_price = require_positive(stop_loss_price, "stop_loss_price")
    take_profit_price = require_positive(take_profit_price, "take_profit_price")
    lots = require_positive(lots, "lots")
    parsed = resolve_pair(pair)

    direction = 1 if is_long else -1
    if direction * (entry_price - stop_loss_price) <= 0:
        raise InvalidInputError(
            "Stop loss must be on the losing side of entry",
            field="stop_loss_price",
            value=stop_loss_price,
        )
    if direction * (take_profit_price - entry_price) <= 0:
        raise InvalidInputError(
            "Take profit must be on the winning side of entry",
            field="take_profit_price",
            value=take_profit_price,
        )

    stop_loss_pips = to_pips(abs(entry_price - stop_loss_price), parsed.pip_unit, PIP_PRECISION)
    take_profit_pips = to_pips(abs(take_profit_price - entry_price), parsed.pip_unit, PIP_PRECISION)
    value_per_pip = pip_value(parsed, lots * lot_units, account_currency, exchange_rate).pip_value_account

    return StopLossTakeProfitResult(
        stop_loss_pips=stop_loss_pips,
        take_profit_pips=take_profit_pips,
        stop_loss_amount=stop_loss_pips * value_per_pip,
        take_profit_amount=take_profit_pips * value_per_pip,
        risk_reward_ratio=take_profit_pips / stop_loss_pips,
        pip_value=value_per_pip,
    )
