"""Pivot point support and resistance levels"""

from enum import Enum
from typing import Callable, Optional, Union

from ..errors import MissingInputError, UnsupportedMethodError
from ..models.results import PivotPointsResult
from .guards import require_finite

CAMARILLA_MULTIPLIER = 1.1
CAMARILLA_DIVISORS = (12, 6, 4, 2)


class PivotMethod(Enum):
    """Supported pivot point formulas."""
    STANDARD = "standard"
    WOODIE = "woodie"
    CAMARILLA = "camarilla"
    DEMARK = "demark"


def _floor_levels(pivot: float, high: float, low: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """R1..R3 and S1..S3 shared by the standard and Woodie methods."""
    spread = high - low
    resistance = (2 * pivot - low, pivot + spread, pivot + 2 * spread)
    support = (2 * pivot - high, pivot - spread, pivot - 2 * spread)
    return resistance, support


def standard_pivots(high: float, low: float, close: float,
                    open_price: Optional[float] = None) -> PivotPointsResult:
    """PP = (H + L + C) / 3"""
    pivot = (high + low + close) / 3
    resistance, support = _floor_levels(pivot, high, low)
    return PivotPointsResult(PivotMethod.STANDARD.value, pivot, resistance, support)


def woodie_pivots(high: float, low: float, close: float,
                  open_price: Optional[float] = None) -> PivotPointsResult:
    """PP = (H + L + 2C) / 4, weighting the close"""
    pivot = (high + low + 2 * close) / 4
    resistance, support = _floor_levels(pivot, high, low)
    return PivotPointsResult(PivotMethod.WOODIE.value, pivot, resistance, support)


def camarilla_pivots(high: float, low: float, close: float,
                     open_price: Optional[float] = None) -> PivotPointsResult:
    """Narrow bands around the close: C +/- (H - L) * 1.1 / {12, 6, 4, 2}"""
    pivot = (high + low + close) / 3
    spread = (high - low) * CAMARILLA_MULTIPLIER
    resistance = tuple(close + spread / divisor for divisor in CAMARILLA_DIVISORS)
    support = tuple(close - spread / divisor for divisor in CAMARILLA_DIVISORS)
    return PivotPointsResult(PivotMethod.CAMARILLA.value, pivot, resistance, support)


def demark_pivots(high: float, low: float, close: float,
                  open_price: Optional[float] = None) -> PivotPointsResult:
    """
    DeMark pivot with a single band.

    X = H + 2L + C when the close is above the open, else 2H + L + C.
    """
    if open_price is None:
        raise MissingInputError("DeMark pivots require the period open", field="open_price")
    open_price = require_finite(open_price, "open_price")

    if close > open_price:
        x = high + 2 * low + close
    else:
        x = 2 * high + low + close

    return PivotPointsResult(
        PivotMethod.DEMARK.value,
        pivot=x / 4,
        resistance=(x / 2 - low,),
        support=(x / 2 - high,),
    )


_METHODS: dict[PivotMethod, Callable[..., PivotPointsResult]] = {
    PivotMethod.STANDARD: standard_pivots,
    PivotMethod.WOODIE: woodie_pivots,
    PivotMethod.CAMARILLA: camarilla_pivots,
    PivotMethod.DEMARK: demark_pivots,
}


def parse_pivot_method(method: Union[str, PivotMethod]) -> PivotMethod:
    if isinstance(method, PivotMethod):
        return method
    try:
        return PivotMethod(str(method).strip().lower())
    except ValueError:
        raise UnsupportedMethodError(
            f"Unknown pivot method: {method}",
            method=str(method),
            supported=[m.value for m in PivotMethod],
        )


def pivot_points(
    high: float,
    low: float,
    close: float,
    method: Union[str, PivotMethod] = PivotMethod.STANDARD,
    open_price: Optional[float] = None
) -> PivotPointsResult:
    """
    Calculate pivot, resistance and support levels from prior-period prices

    The OHLC ordering is not validated.

    Args:
        high: Prior period high
        low: Prior period low
        close: Prior period close
        method: standard, woodie, camarilla or demark
        open_price: Prior period open (DeMark only)

    Returns:
        PivotPointsResult; DeMark yields one band per side, Camarilla four,
        the others three
    """
    high = require_finite(high, "high")
    low = require_finite(low, "low")
    close = require_finite(close, "close")
    return _METHODS[parse_pivot_method(method)](high, low, close, open_price)
