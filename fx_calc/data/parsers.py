"""
Parsers for raw calculator inputs.

Form fields arrive as free text. Numbers are parsed permissively: the
longest leading numeric prefix is used and anything unparseable becomes
0.0, so a half-typed value never breaks a calculation.
"""

import math
import re
from typing import Any, Optional

from ..errors import InvalidInputError
from .models import CurrencyPair
from .reference import CURRENCY_PAIRS

_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class ParseError(InvalidInputError):
    """Raised when a raw input cannot be parsed into the expected form."""
    pass


def parse_number(raw: Any, default: float = 0.0) -> float:
    """
    Parse a raw input value into a float.

    Args:
        raw: Number, numeric string or None
        default: Value used when nothing numeric can be read

    Returns:
        Parsed float, or default for empty, non-numeric, NaN or zero-length input
    """
    if raw is None or isinstance(raw, bool):
        return default

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _NUMBER_PREFIX.match(str(raw))
        if not match:
            return default
        value = float(match.group(0))

    if math.isnan(value) or value == 0:
        return default
    return value


def parse_int(raw: Any, default: int = 0) -> int:
    """Parse a raw input value into an int, truncating any fraction."""
    value = parse_number(raw, default=float(default))
    if math.isinf(value):
        return default
    return int(value)


def parse_currency_pair(pair: str, pip_decimal_places: Optional[int] = None) -> CurrencyPair:
    """
    Parse a pair name in "EUR/USD" or "EURUSD" form.

    Known pairs come from the reference table; unknown pairs get the
    standard pip scale (2 decimals when either leg is JPY, else 4).

    Args:
        pair: Pair name
        pip_decimal_places: Explicit pip decimal place overriding the default

    Returns:
        CurrencyPair value object

    Raises:
        ParseError: If the pair cannot be split into two currency codes
    """
    if isinstance(pair, CurrencyPair):
        parsed = pair
    else:
        text = str(pair).strip().upper()
        if "/" in text:
            base, _, quote = text.partition("/")
        elif len(text) == 6:
            base, quote = text[:3], text[3:]
        else:
            raise ParseError(f"Invalid currency pair: {pair!r}", field="pair", value=pair)

        base, quote = base.strip(), quote.strip()
        if not base or not quote:
            raise ParseError(f"Invalid currency pair: {pair!r}", field="pair", value=pair)

        name = f"{base}/{quote}"
        parsed = CURRENCY_PAIRS.get(name) or CurrencyPair(
            base=base,
            quote=quote,
            pip_decimal_places=2 if "JPY" in (base, quote) else 4,
        )

    if pip_decimal_places is not None and pip_decimal_places != parsed.pip_decimal_places:
        return CurrencyPair(parsed.base, parsed.quote, pip_decimal_places)
    return parsed
