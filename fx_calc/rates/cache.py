"""
Exchange rate cache with time-to-live expiry.

The cache is an explicit object owned by the caller. Calculators never
reach for a module-level cache; they receive a plain exchange rate that
the caller resolved through this object.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import RateUnavailableError
from ..logging.config import get_rates_logger

RateFetcher = Callable[[str, str], float]


@dataclass(frozen=True)
class CachedRate:
    """Cached exchange rate and the clock reading when it was stored."""
    rate: float
    stored_at: float


class ExchangeRateCache:
    """Rates keyed by (base, quote) with TTL expiry and stale fallback."""

    def __init__(self, ttl_seconds: float = 300.0, allow_stale: bool = True,
                 clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self.allow_stale = allow_stale
        self._clock = clock
        self._rates: dict[str, CachedRate] = {}
        self.logger = get_rates_logger(__name__)

    @staticmethod
    def key(base: str, quote: str) -> str:
        return f"{base.upper()}-{quote.upper()}"

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, pair: tuple[str, str]) -> bool:
        return self.key(*pair) in self._rates

    def put(self, base: str, quote: str, rate: float) -> None:
        """Store a rate, stamping it with the current clock reading."""
        self._rates[self.key(base, quote)] = CachedRate(rate=rate, stored_at=self._clock())

    def is_fresh(self, base: str, quote: str) -> bool:
        """
        True if a rate is cached and younger than the TTL.

        Stamps from the future (a snapshot written under another clock)
        never count as fresh.
        """
        entry = self._rates.get(self.key(base, quote))
        if entry is None:
            return False
        age = self._clock() - entry.stored_at
        return 0 <= age < self.ttl_seconds

    def get(self, base: str, quote: str) -> Optional[float]:
        """
        Fresh cached rate, or None if missing or expired.

        Same-currency lookups always return 1.0.
        """
        if base.upper() == quote.upper():
            return 1.0

        if not self.is_fresh(base, quote):
            return None
        return self._rates[self.key(base, quote)].rate

    def get_stale(self, base: str, quote: str) -> Optional[float]:
        """Last cached rate regardless of age."""
        entry = self._rates.get(self.key(base, quote))
        return entry.rate if entry else None

    def resolve(self, base: str, quote: str, fetch: Optional[RateFetcher] = None) -> float:
        """
        Resolve a rate from the cache, fetching and caching it when needed.

        Args:
            base: Currency to convert from
            quote: Currency to convert to
            fetch: Callable returning a live rate for (base, quote)

        Returns:
            Exchange rate

        Raises:
            RateUnavailableError: If no fresh rate, no fetcher result and no
                permitted stale rate exist
        """
        cached = self.get(base, quote)
        if cached is not None:
            self.logger.debug("Rate cache hit", base=base, quote=quote, rate=cached)
            return cached

        if fetch is not None:
            try:
                rate = fetch(base, quote)
            except Exception as e:
                self.logger.warning("Rate fetch failed", base=base, quote=quote, error=str(e))
            else:
                self.put(base, quote, rate)
                self.logger.debug("Rate fetched", base=base, quote=quote, rate=rate)
                return rate

        stale = self.get_stale(base, quote) if self.allow_stale else None
        if stale is not None:
            self.logger.info("Serving stale rate", base=base, quote=quote, rate=stale)
            return stale

        raise RateUnavailableError(
            f"No exchange rate available for {base}/{quote}",
            base=base,
            quote=quote,
        )

    def snapshot(self) -> dict[str, dict[str, float]]:
        """
        Plain-dict copy of the cache, suitable for persisting by the caller.

        Stamps are clock readings; with the default wall clock they stay
        meaningful across restarts.
        """
        return {
            key: {"rate": entry.rate, "stored_at": entry.stored_at}
            for key, entry in self._rates.items()
        }

    def load(self, snapshot: dict[str, dict[str, float]]) -> None:
        """Merge a snapshot produced by snapshot() into the cache."""
        for key, entry in snapshot.items():
            self._rates[key] = CachedRate(rate=float(entry["rate"]), stored_at=float(entry["stored_at"]))
        self.logger.info("Loaded cached rates", count=len(snapshot))

    def clear(self) -> None:
        """Drop every cached rate."""
        self._rates.clear()
        self.logger.info("Rate cache cleared")
