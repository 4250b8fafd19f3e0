"""Static reference tables: currencies, currency pairs, lot sizes, leverage."""

from ..config.defaults import LotParams
from .models import Currency, CurrencyPair, LotSize

CURRENCIES: dict[str, Currency] = {
    "USD": Currency("USD", "US Dollar", "$"),
    "EUR": Currency("EUR", "Euro", "€"),
    "GBP": Currency("GBP", "British Pound", "£"),
    "JPY": Currency("JPY", "Japanese Yen", "¥", decimals=0),
    "AUD": Currency("AUD", "Australian Dollar", "A$"),
    "CAD": Currency("CAD", "Canadian Dollar", "C$"),
    "CHF": Currency("CHF", "Swiss Franc", "Fr"),
    "NZD": Currency("NZD", "New Zealand Dollar", "NZ$"),
    "INR": Currency("INR", "Indian Rupee", "₹"),
}

CURRENCY_PAIRS: dict[str, CurrencyPair] = {
    pair.name: pair
    for pair in (
        CurrencyPair("EUR", "USD"),
        CurrencyPair("GBP", "USD"),
        CurrencyPair("USD", "JPY", pip_decimal_places=2),
        CurrencyPair("USD", "CHF"),
        CurrencyPair("USD", "CAD"),
        CurrencyPair("AUD", "USD"),
        CurrencyPair("NZD", "USD"),
        CurrencyPair("EUR", "GBP"),
        CurrencyPair("EUR", "JPY", pip_decimal_places=2),
        CurrencyPair("GBP", "JPY", pip_decimal_places=2),
    )
}


def lot_size_table(lots: LotParams) -> dict[str, LotSize]:
    """Lot type -> size for a set of lot parameters; Custom counts raw units."""
    return {
        "Standard": LotSize("Standard", lots.standard),
        "Mini": LotSize("Mini", lots.mini),
        "Micro": LotSize("Micro", lots.micro),
        "Nano": LotSize("Nano", lots.nano),
        "Custom": LotSize("Custom", 1.0),
    }


DEFAULT_LOT_SIZES: dict[str, LotSize] = lot_size_table(LotParams())

# Broker leverage ratios offered for margin comparisons; the account default
# lives in AccountParams.
LEVERAGE_OPTIONS: tuple[int, ...] = (1, 10, 20, 50, 100, 200, 500, 1000)

STANDARD_LOT_UNITS = DEFAULT_LOT_SIZES["Standard"].units
MINI_LOT_UNITS = DEFAULT_LOT_SIZES["Mini"].units
MICRO_LOT_UNITS = DEFAULT_LOT_SIZES["Micro"].units
