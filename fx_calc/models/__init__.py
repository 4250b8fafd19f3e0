"""
Calculation result models.

Immutable value objects returned by the calculators. They hold derived
numbers only and are safe to serialize.
"""

from .results import (
    BreakdownEntry,
    CompoundGrowthResult,
    FibonacciLevel,
    FibonacciResult,
    GrowthPoint,
    MarginResult,
    PipValueResult,
    PivotPointsResult,
    PositionSizeResult,
    ProfitLossResult,
    StopLossTakeProfitResult,
)

__all__ = [
    "BreakdownEntry",
    "CompoundGrowthResult",
    "FibonacciLevel",
    "FibonacciResult",
    "GrowthPoint",
    "MarginResult",
    "PipValueResult",
    "PivotPointsResult",
    "PositionSizeResult",
    "ProfitLossResult",
    "StopLossTakeProfitResult",
]
