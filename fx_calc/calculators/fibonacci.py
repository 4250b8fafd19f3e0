"""Fibonacci retracement and extension levels"""

from ..models.results import FibonacciLevel, FibonacciResult
from .guards import require_finite

RETRACEMENT_LEVELS = (0.0, 23.6, 38.2, 50.0, 61.8, 78.6, 100.0)
EXTENSION_LEVELS = (161.8, 200.0, 261.8)


def fibonacci_levels(high: float, low: float, is_uptrend: bool = True) -> FibonacciResult:
    """
    Calculate Fibonacci levels for a price swing

    Uptrend levels are measured down from the high and extend above it;
    downtrend levels are measured up from the low and extend below it.
    No check that high >= low is made.

    Args:
        high: Swing high
        low: Swing low
        is_uptrend: Direction of the swing

    Returns:
        FibonacciResult with levels in percent and their prices
    """
    high = require_finite(high, "high")
    low = require_finite(low, "low")
    diff = high - low

    if is_uptrend:
        anchor, sign = high, -1
    else:
        anchor, sign = low, 1

    retracements = tuple(
        FibonacciLevel(level=level, price=anchor + sign * diff * (level / 100))
        for level in RETRACEMENT_LEVELS
    )
    extensions = tuple(
        FibonacciLevel(level=level, price=anchor - sign * diff * (level / 100 - 1))
        for level in EXTENSION_LEVELS
    )

    return FibonacciResult(retracements=retracements, extensions=extensions)
