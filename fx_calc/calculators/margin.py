"""Required margin and margin level"""

from typing import Optional, Sequence

from ..data.reference import LEVERAGE_OPTIONS
from ..models.results import MarginResult
from .guards import require_non_negative, require_positive
from .pips import PairLike, resolve_pair


def margin(
    pair: PairLike,
    position_units: float,
    leverage: float,
    exchange_rate: float = 1.0,
    account_balance: Optional[float] = None
) -> MarginResult:
    """
    Calculate the margin needed to hold a leveraged position

    position_value = position_units * exchange_rate
    required_margin = position_value / leverage
    margin_level = account_balance / required_margin * 100

    Args:
        pair: Currency pair name or object
        position_units: Position size in base currency units
        leverage: Leverage ratio (100 for 1:100)
        exchange_rate: Base to account currency rate
        account_balance: Equity used for the margin level

    Returns:
        MarginResult; margin_level_percent is None without a balance or
        when no margin is required
    """
    resolve_pair(pair)  # rejects malformed pair names; margin needs no pip scale
    position_units = require_non_negative(position_units, "position_units")
    leverage = require_positive(leverage, "leverage")
    exchange_rate = require_positive(exchange_rate, "exchange_rate")

    position_value = position_units * exchange_rate
    required_margin = position_value / leverage

    margin_level = None
    if account_balance is not None and required_margin > 0:
        margin_level = require_non_negative(account_balance, "account_balance") / required_margin * 100

    return MarginResult(
        position_value=position_value,
        required_margin=required_margin,
        margin_level_percent=margin_level,
        leverage=leverage,
    )


def margin_by_leverage(
    pair: PairLike,
    position_units: float,
    exchange_rate: float = 1.0,
    account_balance: Optional[float] = None,
    leverage_options: Sequence[float] = LEVERAGE_OPTIONS
) -> tuple[MarginResult, ...]:
    """Margin for the same position at each leverage option, lowest leverage first."""
    return tuple(
        margin(pair, position_units, leverage, exchange_rate, account_balance)
        for leverage in sorted(leverage_options)
    )
