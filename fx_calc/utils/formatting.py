"""Currency and pip value display formatting."""

from typing import Optional

from ..data.reference import CURRENCIES


def get_currency_symbol(currency_code: str) -> str:
    """Currency symbol, falling back to the code itself when unknown."""
    currency = CURRENCIES.get(currency_code)
    return currency.symbol if currency else currency_code


def get_currency_decimals(currency_code: str) -> int:
    """Display decimals for a currency (JPY has none)."""
    currency = CURRENCIES.get(currency_code)
    return currency.decimals if currency else 2


def format_currency(
    amount: float,
    currency_code: str,
    show_symbol: bool = True,
    decimal_places: Optional[int] = None
) -> str:
    """
    Format an amount with the currency symbol and thousands separators.

    Args:
        amount: Amount to format
        currency_code: ISO currency code
        show_symbol: Prefix the currency symbol
        decimal_places: Override the currency's display decimals

    Returns:
        Formatted string, e.g. "$1,234.50"
    """
    if decimal_places is None:
        decimal_places = get_currency_decimals(currency_code)

    # Values past 10k drop the fraction
    if abs(amount) > 10000:
        decimal_places = min(decimal_places, 0)

    symbol = get_currency_symbol(currency_code) if show_symbol else ""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.{decimal_places}f}"


def format_pip_value(value: float, currency_code: str) -> str:
    """
    Format a pip value with precision suited to its magnitude.

    Tiny pip values (below 0.01) get four decimals so they never render as zero.
    """
    decimal_places = get_currency_decimals(currency_code)

    if value > 10000:
        decimal_places = 0
    elif 0 < value < 0.01:
        decimal_places = 4

    return f"{get_currency_symbol(currency_code)}{value:,.{decimal_places}f}"


def format_price(price: float, pip_decimal_places: int) -> str:
    """Format a quote with one fractional-pip digit past the pip decimal."""
    return f"{price:.{pip_decimal_places + 1}f}"
