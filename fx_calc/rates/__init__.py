"""Exchange rate caching."""

from .cache import CachedRate, ExchangeRateCache

__all__ = ["CachedRate", "ExchangeRateCache"]
