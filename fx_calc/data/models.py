"""
Immutable value objects for currencies, currency pairs and lot sizes.

These are static reference data; calculators consume them as input and
never modify them.
"""

from dataclasses import dataclass

JPY = "JPY"


@dataclass(frozen=True)
class Currency:
    """Currency reference data."""
    code: str           # ISO 4217 code
    name: str
    symbol: str
    decimals: int = 2   # Display decimals for amounts


@dataclass(frozen=True)
class CurrencyPair:
    """Currency pair with the decimal place that defines one pip."""
    base: str
    quote: str
    pip_decimal_places: int = 4

    @property
    def name(self) -> str:
        """Pair name in slash form, e.g. EUR/USD."""
        return f"{self.base}/{self.quote}"

    @property
    def is_jpy(self) -> bool:
        """True if either leg is the Japanese yen."""
        return JPY in (self.base, self.quote)

    @property
    def pip_unit(self) -> float:
        """Price increment of one pip (1 when pip_decimal_places is 0)."""
        if self.pip_decimal_places == 0:
            return 1.0
        return 10.0 ** -self.pip_decimal_places

    def involves(self, currency: str) -> bool:
        """True if currency is either leg of the pair."""
        return currency in (self.base, self.quote)


@dataclass(frozen=True)
class LotSize:
    """Named lot size in base currency units."""
    name: str
    units: float
    editable: bool = True
