"""Pip scale, pip difference and pip value calculations."""

from typing import Optional, Union

from ..data.models import CurrencyPair
from ..data.parsers import parse_currency_pair
from ..data.reference import STANDARD_LOT_UNITS
from ..models.results import PipValueResult
from ..errors import MissingInputError
from .guards import require_finite, require_non_negative, require_positive

PairLike = Union[str, CurrencyPair]

PIP_PRECISION = 6


def resolve_pair(pair: PairLike, pip_decimal_places: Optional[int] = None) -> CurrencyPair:
    """Accept a pair name or CurrencyPair, applying an optional pip decimal override."""
    return parse_currency_pair(pair, pip_decimal_places=pip_decimal_places)


def get_pip_unit(pair: PairLike, pip_decimal_places: Optional[int] = None) -> float:
    """
    Price increment of one pip.

    0.01 when either leg is JPY, otherwise 0.0001, unless pip_decimal_places
    is given explicitly.
    """
    return resolve_pair(pair, pip_decimal_places).pip_unit


def to_pips(price_delta: float, pip_unit: float, precision: int = PIP_PRECISION) -> float:
    """Convert a price delta to pips, rounding away float noise."""
    return round(price_delta / pip_unit, precision)


def pip_difference(
    price_a: float,
    price_b: float,
    pair: PairLike,
    pip_decimal_places: Optional[int] = None,
    precision: int = PIP_PRECISION
) -> float:
    """
    Absolute distance between two prices in pips.

    pips = |price_a - price_b| / pip_unit

    Args:
        price_a: First price
        price_b: Second price
        pair: Currency pair name or object
        pip_decimal_places: Override of the pair's pip decimal place
        precision: Decimal places kept in the pip count

    Returns:
        Non-negative pip count
    """
    price_a = require_finite(price_a, "price_a")
    price_b = require_finite(price_b, "price_b")
    pip_unit = get_pip_unit(pair, pip_decimal_places)
    return to_pips(abs(price_a - price_b), pip_unit, precision)


def convert_to_account_currency(
    amount: float,
    pair: PairLike,
    account_currency: str,
    exchange_rate: Optional[float] = None
) -> float:
    """
    Convert a quote-currency amount into the account currency.

    No conversion when the quote currency is the account currency;
    otherwise direct multiplication by the supplied rate, which is then
    required.

    Raises:
        MissingInputError: If a conversion is needed and no rate is given
        InvalidInputError: If the rate is not positive
    """
    parsed = resolve_pair(pair)
    if parsed.quote == account_currency.upper():
        return amount
    if exchange_rate is None:
        raise MissingInputError(
            f"An exchange rate from {parsed.quote} to {account_currency.upper()} is required",
            field="exchange_rate",
        )
    return amount * require_positive(exchange_rate, "exchange_rate")


def pip_value(
    pair: PairLike,
    position_units: float,
    account_currency: str,
    exchange_rate: Optional[float] = None,
    pip_decimal_places: Optional[int] = None
) -> PipValueResult:
    """
    Value of one pip for a position.

    Args:
        pair: Currency pair name or object
        position_units: Position size in base currency units
        account_currency: Currency the value is reported in
        exchange_rate: Quote to account currency rate (required when they differ)
        pip_decimal_places: Override of the pair's pip decimal place

    Returns:
        PipValueResult with quote and account currency values
    """
    position_units = require_non_negative(position_units, "position_units")
    parsed = resolve_pair(pair, pip_decimal_places)

    value_quote = position_units * parsed.pip_unit
    value_account = convert_to_account_currency(value_quote, parsed, account_currency, exchange_rate)
    applied_rate = 1.0 if parsed.quote == account_currency.upper() else exchange_rate

    return PipValueResult(
        pip_unit=parsed.pip_unit,
        position_units=position_units,
        pip_value_quote=value_quote,
        pip_value_account=value_account,
        exchange_rate=applied_rate,
    )


def pip_value_for_lots(
    pair: PairLike,
    lots: float,
    account_currency: str,
    exchange_rate: Optional[float] = None,
    lot_units: float = STANDARD_LOT_UNITS
) -> float:
    """Account-currency value of one pip for a position given in standard lots."""
    return pip_value(pair, lots * lot_units, account_currency, exchange_rate).pip_value_account
