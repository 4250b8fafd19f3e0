"""Compound growth projection with contributions, withdrawals and tax."""

import math
from typing import Optional

from ..models.results import BreakdownEntry, CompoundGrowthResult, GrowthPoint
from .guards import floor_frequency, require_finite, require_non_negative

RULE_OF_72 = 72.0


def _schedule_interval(frequency: int, event_frequency: int) -> int:
    """Number of compounding periods between two scheduled events."""
    return max(1, frequency // event_frequency)


def effective_annual_rate(rate_per_period: float, compounding_frequency: int) -> float:
    """Effective annual rate in percent: ((1 + r) ^ n - 1) * 100."""
    return ((1 + rate_per_period) ** compounding_frequency - 1) * 100


def time_to_double_months(
    rate_per_period: float,
    compounding_frequency: int,
    rule_constant: float = RULE_OF_72
) -> Optional[float]:
    """
    Estimated months to double the balance using the rule of 72.

    The rule yields a number of periods at the per-period rate; the
    compounding frequency converts periods into months.

    Returns:
        Months, or None when the rate is zero or negative
    """
    if rate_per_period <= 0:
        return None
    periods = rule_constant / (rate_per_period * 100)
    return periods * 12 / compounding_frequency


def compound_growth(
    principal: float,
    rate_percent: float,
    frequency: float = 12,
    years: float = 1.0,
    contribution: float = 0.0,
    contribution_frequency: Optional[float] = None,
    withdrawal: float = 0.0,
    withdrawal_frequency: Optional[float] = None,
    tax_rate_percent: float = 0.0,
    compounding_frequency: Optional[float] = None,
    rule_constant: float = RULE_OF_72
) -> CompoundGrowthResult:
    """
    Project a balance compounded period by period.

    Each period accrues interest on the current balance, deducts tax on
    positive interest, then applies any scheduled contribution and
    withdrawal. Contributions and withdrawals fall every
    frequency // event_frequency periods. A withdrawal never takes the
    balance below zero.

    Args:
        principal: Starting balance
        rate_percent: Annual nominal rate of return in percent
        frequency: Compounding periods per year
        years: Duration in years (fractional years truncate to whole periods)
        contribution: Amount added on each contribution date
        contribution_frequency: Contributions per year (defaults to frequency)
        withdrawal: Amount taken on each withdrawal date
        withdrawal_frequency: Withdrawals per year (defaults to frequency)
        tax_rate_percent: Tax withheld from each period's interest, in percent
        compounding_frequency: Periods per year used for the effective rate
            and doubling time (defaults to frequency)
        rule_constant: Numerator of the doubling-time rule

    Returns:
        CompoundGrowthResult with yearly series and per-period breakdown
    """
    principal = require_finite(principal, "principal")
    rate_percent = require_finite(rate_percent, "rate_percent")
    years = require_finite(years, "years")
    contribution = require_non_negative(contribution, "contribution")
    withdrawal = require_non_negative(withdrawal, "withdrawal")
    tax_rate_percent = require_non_negative(tax_rate_percent, "tax_rate_percent")

    frequency = floor_frequency(frequency)
    contribution_every = _schedule_interval(
        frequency, floor_frequency(contribution_frequency if contribution_frequency is not None else frequency)
    )
    withdrawal_every = _schedule_interval(
        frequency, floor_frequency(withdrawal_frequency if withdrawal_frequency is not None else frequency)
    )
    compounding_frequency = floor_frequency(
        compounding_frequency if compounding_frequency is not None else frequency
    )

    rate_per_period = rate_percent / 100 / frequency
    total_periods = max(0, math.floor(frequency * years))

    balance = principal
    total_earnings = 0.0
    total_contributions = 0.0
    total_withdrawals = 0.0
    total_taxes = 0.0
    growth_series = [GrowthPoint(year=0, balance=principal)]
    breakdown = []

    for period in range(1, total_periods + 1):
        interest = balance * rate_per_period
        tax = interest * tax_rate_percent / 100 if interest > 0 else 0.0
        earnings = interest - tax
        balance += earnings

        added = contribution if contribution and period % contribution_every == 0 else 0.0
        balance += added

        taken = 0.0
        if withdrawal and period % withdrawal_every == 0:
            taken = min(withdrawal, max(balance, 0.0))
            balance = max(balance - withdrawal, 0.0)

        total_earnings += earnings
        total_taxes += tax
        total_contributions += added
        total_withdrawals += taken

        breakdown.append(BreakdownEntry(
            period=period,
            earnings=earnings,
            balance=balance,
            contribution=added,
            withdrawal=taken,
            tax=tax,
        ))

        if period % frequency == 0:
            growth_series.append(GrowthPoint(year=period // frequency, balance=balance))
        elif period == total_periods:
            growth_series.append(GrowthPoint(year=period / frequency, balance=balance))

    return CompoundGrowthResult(
        end_balance=balance,
        total_earnings=total_earnings,
        growth_series=tuple(growth_series),
        breakdown=tuple(breakdown),
        total_contributions=total_contributions,
        total_withdrawals=total_withdrawals,
        total_taxes_paid=total_taxes,
        time_to_double_months=time_to_double_months(rate_per_period, compounding_frequency, rule_constant),
        effective_annual_rate_percent=effective_annual_rate(rate_per_period, compounding_frequency),
    )
