"""Result value objects for every calculator."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GrowthPoint:
    """Balance at a point in time (year may be fractional for the last point)."""
    year: float
    balance: float


@dataclass(frozen=True)
class BreakdownEntry:
    """Single compounding period."""
    period: int
    earnings: float          # Net interest after tax
    balance: float
    contribution: float = 0.0
    withdrawal: float = 0.0
    tax: float = 0.0


@dataclass(frozen=True)
class CompoundGrowthResult:
    """Compound growth projection."""
    end_balance: float
    total_earnings: float
    growth_series: tuple[GrowthPoint, ...]
    breakdown: tuple[BreakdownEntry, ...]
    total_contributions: float
    total_withdrawals: float
    total_taxes_paid: float
    time_to_double_months: Optional[float]   # None when the rate never doubles the balance
    effective_annual_rate_percent: float


@dataclass(frozen=True)
class FibonacciLevel:
    """Price at a Fibonacci ratio, level in percent."""
    level: float
    price: float


@dataclass(frozen=True)
class FibonacciResult:
    """Retracement and extension levels."""
    retracements: tuple[FibonacciLevel, ...]
    extensions: tuple[FibonacciLevel, ...]

    def price_at(self, level: float) -> Optional[float]:
        """Price of the retracement or extension at level percent, if present."""
        for entry in self.retracements + self.extensions:
            if abs(entry.level - level) < 1e-9:
                return entry.price
        return None


@dataclass(frozen=True)
class PivotPointsResult:
    """Pivot with resistance and support bands, nearest band first."""
    method: str
    pivot: float
    resistance: tuple[float, ...]
    support: tuple[float, ...]

    def padded(self, count: int = 3) -> "PivotPointsResult":
        """
        Copy with exactly count bands per side.

        Missing bands repeat the outermost available band; extra bands are
        dropped. Used by consumers that expect R1..R3 for every method.
        """
        return PivotPointsResult(
            method=self.method,
            pivot=self.pivot,
            resistance=_pad(self.resistance, count),
            support=_pad(self.support, count),
        )


def _pad(levels: tuple[float, ...], count: int) -> tuple[float, ...]:
    if not levels:
        return ()
    if len(levels) >= count:
        return levels[:count]
    return levels + (levels[-1],) * (count - len(levels))


@dataclass(frozen=True)
class PipValueResult:
    """Value of one pip for a position."""
    pip_unit: float
    position_units: float
    pip_value_quote: float       # In quote currency
    pip_value_account: float     # In account currency
    exchange_rate: float


@dataclass(frozen=True)
class PositionSizeResult:
    """Position size that risks exactly risk_amount at the stop."""
    units: float
    standard_lots: float
    mini_lots: float
    micro_lots: float
    risk_amount: float
    risk_percent: float
    stop_loss_pips: float
    pip_value: float             # Per pip for the whole position, account currency


@dataclass(frozen=True)
class ProfitLossResult:
    """Signed trade outcome."""
    pips: float
    profit_loss: float
    roi_percent: float
    pip_value: float


@dataclass(frozen=True)
class MarginResult:
    """Margin requirement for a leveraged position."""
    position_value: float
    required_margin: float
    margin_level_percent: Optional[float]
    leverage: float


@dataclass(frozen=True)
class StopLossTakeProfitResult:
    """Risk and reward of a bracketed trade."""
    stop_loss_pips: float
    take_profit_pips: float
    stop_loss_amount: float
    take_profit_amount: float
    risk_reward_ratio: float
    pip_value: float
