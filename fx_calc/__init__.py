"""
FX Calc - Forex Trading Calculation Library

A suite of independent forex trading calculators (compounding, Fibonacci,
pips, pivot points, position sizing, profit/loss, margin, stop-loss and
take-profit). Every calculator is a pure function of its inputs.
"""

__version__ = "0.1.0"
__author__ = "FX Calc Team"
