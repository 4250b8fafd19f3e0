"""Pytest configuration and shared fixtures."""

import pytest

from fx_calc.config.loader import ConfigLoader
from fx_calc.engine import ForexCalculator
from fx_calc.rates.cache import ExchangeRateCache


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rate_cache(clock: FakeClock) -> ExchangeRateCache:
    return ExchangeRateCache(ttl_seconds=300, clock=clock)


@pytest.fixture
def calculator(rate_cache: ExchangeRateCache) -> ForexCalculator:
    """Calculator with default configuration and an empty rate cache."""
    return ForexCalculator(rate_cache=rate_cache)


@pytest.fixture
def configured_calculator(rate_cache: ExchangeRateCache) -> ForexCalculator:
    """Calculator reading per-pair overrides from the shipped config directory."""
    return ForexCalculator(loader=ConfigLoader.create(), rate_cache=rate_cache)


@pytest.fixture
def sample_trade() -> dict:
    """Long EUR/USD trade used across calculator tests."""
    return {
        "entry_price": 1.1000,
        "exit_price": 1.1050,
        "lots": 1.0,
        "pair": "EUR/USD",
        "account_currency": "USD",
        "is_long": True,
    }
