"""
Position sizing from account risk and stop-loss distance.

Risk can be given as a percentage of the balance or a fixed amount, and
the stop as a pip distance or a price level. The conversion helpers at
the bottom switch between the two representations of each input the way
a form does when its mode toggles: they round to the displayed precision
at every step, so a round trip is not guaranteed to return the original
value.
"""

from enum import Enum
from typing import Optional, Union

from ..config.defaults import LotParams
from ..errors import UnsupportedMethodError
from ..models.results import PositionSizeResult
from .guards import require_finite, require_non_negative, require_positive
from .pips import PIP_PRECISION, PairLike, convert_to_account_currency, resolve_pair, to_pips


class RiskMode(Enum):
    """How the risk input is expressed."""
    PERCENTAGE = "percentage"
    AMOUNT = "amount"


class StopLossMode(Enum):
    """How the stop-loss input is expressed."""
    PIPS = "pips"
    PRICE = "price"


def parse_mode(value, enum_cls):
    """Coerce a mode name into enum_cls, rejecting unknown names."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        raise UnsupportedMethodError(
            f"Unknown {enum_cls.__name__}: {value}",
            method=str(value),
            supported=[m.value for m in enum_cls],
        )


def position_size(
    balance: float,
    risk: float,
    risk_mode: Union[str, RiskMode],
    stop_loss: float,
    stop_loss_mode: Union[str, StopLossMode],
    entry_price: float,
    pair: PairLike,
    account_currency: str,
    exchange_rate: Optional[float] = None,
    pip_decimal_places: Optional[int] = None,
    lots: Optional[LotParams] = None
) -> PositionSizeResult:
    """
    Size a position so that hitting the stop loses exactly the risk amount.

    units = risk_amount / (stop_loss_pips * pip_value_per_unit)

    Args:
        balance: Account balance in account currency
        risk: Risk as a percentage of balance or an absolute amount
        risk_mode: percentage or amount
        stop_loss: Stop distance in pips or stop price
        stop_loss_mode: pips or price
        entry_price: Planned entry price
        pair: Currency pair name or object
        account_currency: Account currency code
        exchange_rate: Quote to account currency rate (required when they differ)
        pip_decimal_places: Override of the pair's pip decimal place
        lots: Lot sizes used for the lot breakdown (defaults to LotParams())

    Returns:
        PositionSizeResult with units, lots and risk figures

    Raises:
        InvalidInputError: If the stop distance is zero or negative, or the
            exchange rate is not positive when a conversion is needed
    """
    balance = require_non_negative(balance, "balance")
    risk = require_non_negative(risk, "risk")
    stop_loss = require_finite(stop_loss, "stop_loss")
    entry_price = require_finite(entry_price, "entry_price")
    parsed = resolve_pair(pair, pip_decimal_places)

    if parse_mode(risk_mode, RiskMode) is RiskMode.PERCENTAGE:
        risk_amount = balance * risk / 100
    else:
        risk_amount = risk
    risk_percent = risk_amount / balance * 100 if balance > 0 else 0.0

    if parse_mode(stop_loss_mode, StopLossMode) is StopLossMode.PIPS:
        stop_loss_pips = stop_loss
    else:
        stop_loss_pips = to_pips(abs(entry_price - stop_loss), parsed.pip_unit, PIP_PRECISION)
    stop_loss_pips = require_positive(stop_loss_pips, "stop_loss_pips")

    pip_value_per_unit = convert_to_account_currency(
        parsed.pip_unit, parsed, account_currency, exchange_rate
    )
    units = risk_amount / (stop_loss_pips * pip_value_per_unit)
    lots = lots or LotParams()

    return PositionSizeResult(
        units=units,
        standard_lots=units / lots.standard,
        mini_lots=units / lots.mini,
        micro_lots=units / lots.micro,
        risk_amount=risk_amount,
        risk_percent=risk_percent,
        stop_loss_pips=stop_loss_pips,
        pip_value=units * pip_value_per_unit,
    )


def risk_percent_to_amount(balance: float, percent: float, decimals: int = 2) -> float:
    """Risk percentage of balance as an amount, rounded for display."""
    return round(balance * percent / 100, decimals)


def risk_amount_to_percent(balance: float, amount: float, decimals: int = 2) -> float:
    """Risk amount as a percentage of balance, rounded for display."""
    balance = require_positive(balance, "balance")
    return round(amount / balance * 100, decimals)


def stop_pips_to_price(
    entry_price: float,
    pips: float,
    pair: PairLike,
    is_long: bool = True,
    pip_decimal_places: Optional[int] = None
) -> float:
    """
    Stop price a given number of pips from entry.

    Long stops sit below the entry, short stops above. The price is
    rounded to one digit past the pip decimal.
    """
    parsed = resolve_pair(pair, pip_decimal_places)
    offset = pips * parsed.pip_unit
    price = entry_price - offset if is_long else entry_price + offset
    return round(price, parsed.pip_decimal_places + 1)


def stop_price_to_pips(
    entry_price: float,
    stop_price: float,
    pair: PairLike,
    decimals: int = 1,
    pip_decimal_places: Optional[int] = None
) -> float:
    """Distance from entry to stop in pips, rounded for display."""
    parsed = resolve_pair(pair, pip_decimal_places)
    return round(abs(entry_price - stop_price) / parsed.pip_unit, decimals)
