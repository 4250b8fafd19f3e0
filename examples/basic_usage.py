#!/usr/bin/env python3
"""
Basic Usage Example - FX Calc

This script walks through a typical trade plan with the forex calculators.
It shows how to:
- Initialize the calculator with the shipped configuration
- Size a position from account risk
- Check margin, risk/reward and pivot levels
- Project account growth

Run: python examples/basic_usage.py
"""

from fx_calc.calculators.lots import format_lot_size
from fx_calc.config.loader import ConfigLoader
from fx_calc.data.serializers import serialize_result
from fx_calc.engine import ForexCalculator
from fx_calc.errors import InputError
from fx_calc.logging import configure_logging
from fx_calc.utils.formatting import format_currency, format_pip_value, format_price


# Static demo rates standing in for a live feed
DEMO_RATES = {
    ("EUR", "USD"): 1.1000,
    ("USD", "JPY"): 150.00,
    ("JPY", "USD"): 1 / 150.00,
    ("GBP", "USD"): 1.2700,
}


def demo_rate_fetcher(base: str, quote: str) -> float:
    """Look up a demo rate, raising KeyError for unknown pairs."""
    return DEMO_RATES[(base, quote)]


def main():
    """Main demonstration function."""
    print("🚀 FX Calc - Basic Usage Demo")
    print("=" * 60)

    configure_logging(level="WARNING")

    print("1. Initializing the calculator...")
    calculator = ForexCalculator(loader=ConfigLoader.create(), rate_fetcher=demo_rate_fetcher)
    print(f"   Calculators: {', '.join(calculator.calculators)}")
    print()

    print("2. Sizing a EUR/USD long risking 1% of 25,000 with a 30 pip stop...")
    size = calculator.position_size(25000, 1, 30, 1.1000, "EUR/USD")
    print(f"   Risk amount: {format_currency(size.risk_amount, 'USD')}")
    print(f"   Position: {format_lot_size('Standard', round(size.standard_lots, 2))}")
    print(f"   Pip value: {format_pip_value(size.pip_value, 'USD')}")
    print()

    print("3. Bracketing the trade...")
    stop_price = calculator.convert_stop(1.1000, 30, "price", "EUR/USD")
    bracket = calculator.stop_loss_take_profit(1.1000, stop_price, 1.1060, size.standard_lots, "EUR/USD")
    print(f"   Stop: {format_price(stop_price, 4)}  Target: {format_price(1.1060, 4)}")
    print(f"   Risk/reward: 1:{bracket.risk_reward_ratio:.2f}")
    print()

    print("4. Margin at the configured leverage...")
    required = calculator.margin("EUR/USD", size.units, account_balance=25000)
    print(f"   Required margin: {format_currency(required.required_margin, 'USD')}")
    print(f"   Margin level: {required.margin_level_percent:,.0f}%")
    cautious = calculator.calculate(
        "margin", {"pair": "EUR/USD", "position_units": size.units},
        config_overrides={"account": {"leverage": 30}},
    )
    print(f"   At 1:30 instead: {format_currency(cautious.required_margin, 'USD')}")
    print()

    print("5. USD/JPY outcome converted to USD...")
    outcome = calculator.profit_loss(150.00, 150.75, 0.5, "USD/JPY")
    print(f"   {outcome.pips:+.1f} pips = {format_currency(outcome.profit_loss, 'USD')}")
    print()

    print("6. Pivot levels from yesterday's session...")
    for method in ("standard", "woodie", "camarilla"):
        pivots = calculator.pivot_points(1.1050, 1.0950, 1.1020, method).padded(3)
        levels = ", ".join(format_price(level, 4) for level in pivots.resistance)
        print(f"   {method:<10} PP {format_price(pivots.pivot, 4)}  R: {levels}")
    print()

    print("7. Growing 10,000 at 2% a month with 500 monthly deposits for 3 years...")
    growth = calculator.compound_growth(10000, 24, years=3, contribution=500)
    print(f"   End balance: {format_currency(growth.end_balance, 'USD')}")
    print(f"   Doubling time: {growth.time_to_double_months:.1f} months")
    print()

    print("8. Rejected input...")
    try:
        calculator.position_size(25000, 1, 0, 1.1000, "EUR/USD")
    except InputError as e:
        print(f"   ⚠️  {e}")
    print()

    print("9. Result as JSON...")
    print(serialize_result(bracket, pretty=True).decode())


if __name__ == "__main__":
    main()
