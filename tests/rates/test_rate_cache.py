"""Tests for the exchange rate cache."""

import pytest
from unittest.mock import Mock
from structlog.testing import capture_logs

from fx_calc.errors import RateUnavailableError
from fx_calc.rates.cache import ExchangeRateCache


class TestCacheLookups:
    """Test storage and TTL expiry."""

    def test_put_and_get(self, rate_cache: ExchangeRateCache) -> None:
        rate_cache.put("eur", "usd", 1.1)
        assert rate_cache.get("EUR", "USD") == 1.1
        assert ("EUR", "USD") in rate_cache
        assert len(rate_cache) == 1

    def test_same_currency(self, rate_cache: ExchangeRateCache) -> None:
        """Same-currency lookups never touch the cache."""
        assert rate_cache.get("USD", "usd") == 1.0
        assert len(rate_cache) == 0

    def test_missing(self, rate_cache: ExchangeRateCache) -> None:
        assert rate_cache.get("EUR", "GBP") is None

    def test_expiry(self, rate_cache: ExchangeRateCache, clock) -> None:
        """Rates expire once they are as old as the TTL."""
        rate_cache.put("EUR", "USD", 1.1)

        clock.advance(299)
        assert rate_cache.is_fresh("EUR", "USD")

        clock.advance(1)
        assert not rate_cache.is_fresh("EUR", "USD")
        assert rate_cache.get("EUR", "USD") is None
        assert rate_cache.get_stale("EUR", "USD") == 1.1

    def test_put_refreshes(self, rate_cache: ExchangeRateCache, clock) -> None:
        rate_cache.put("EUR", "USD", 1.1)
        clock.advance(400)
        rate_cache.put("EUR", "USD", 1.2)
        assert rate_cache.get("EUR", "USD") == 1.2


class TestResolve:
    """Test resolution through cache, fetcher and stale fallback."""

    def test_fresh_hit_skips_fetch(self, rate_cache: ExchangeRateCache) -> None:
        fetch = Mock(return_value=1.3)
        rate_cache.put("EUR", "USD", 1.1)
        assert rate_cache.resolve("EUR", "USD", fetch) == 1.1
        fetch.assert_not_called()

    def test_fetch_on_miss(self, rate_cache: ExchangeRateCache) -> None:
        fetch = Mock(return_value=1.3)
        assert rate_cache.resolve("EUR", "USD", fetch) == 1.3
        assert rate_cache.get("EUR", "USD") == 1.3

    def test_fetch_on_expiry(self, rate_cache: ExchangeRateCache, clock) -> None:
        fetch = Mock(return_value=1.3)
        rate_cache.put("EUR", "USD", 1.1)
        clock.advance(301)
        assert rate_cache.resolve("EUR", "USD", fetch) == 1.3
        fetch.assert_called_once_with("EUR", "USD")

    def test_stale_fallback(self, rate_cache: ExchangeRateCache, clock) -> None:
        """A failed fetch falls back to the expired rate."""
        fetch = Mock(side_effect=ConnectionError("offline"))
        rate_cache.put("EUR", "USD", 1.1)
        clock.advance(3600)

        with capture_logs() as logs:
            assert rate_cache.resolve("EUR", "USD", fetch) == 1.1

        events = [(entry["event"], entry["log_level"]) for entry in logs]
        assert ("Rate fetch failed", "warning") in events
        assert ("Serving stale rate", "info") in events

    def test_stale_disabled(self, clock) -> None:
        cache = ExchangeRateCache(ttl_seconds=300, allow_stale=False, clock=clock)
        cache.put("EUR", "USD", 1.1)
        clock.advance(301)

        with pytest.raises(RateUnavailableError):
            cache.resolve("EUR", "USD")

    def test_nothing_available(self, rate_cache: ExchangeRateCache) -> None:
        with pytest.raises(RateUnavailableError) as exc_info:
            rate_cache.resolve("EUR", "GBP")
        assert exc_info.value.base == "EUR"
        assert exc_info.value.recoverable is False


class TestSnapshots:
    """Test persisting and restoring the cache."""

    def test_snapshot_round_trip(self, rate_cache: ExchangeRateCache, clock) -> None:
        rate_cache.put("EUR", "USD", 1.1)
        snapshot = rate_cache.snapshot()
        assert snapshot == {"EUR-USD": {"rate": 1.1, "stored_at": clock.now}}

        restored = ExchangeRateCache(ttl_seconds=300, clock=clock)
        restored.load(snapshot)
        assert restored.get("EUR", "USD") == 1.1

    def test_clear(self, rate_cache: ExchangeRateCache) -> None:
        rate_cache.put("EUR", "USD", 1.1)
        rate_cache.clear()
        assert len(rate_cache) == 0

    def test_snapshot_from_foreign_clock(self, clock) -> None:
        """Stamps ahead of the local clock are never treated as fresh."""
        cache = ExchangeRateCache(ttl_seconds=300, allow_stale=False, clock=clock)
        cache.load({"EUR-USD": {"rate": 1.1, "stored_at": clock.now + 10 * 86400}})

        assert not cache.is_fresh("EUR", "USD")
        assert cache.get("EUR", "USD") is None
        with pytest.raises(RateUnavailableError):
            cache.resolve("EUR", "USD")

    def test_default_clock_is_wall_time(self) -> None:
        """Snapshots taken with the default clock carry epoch timestamps."""
        cache = ExchangeRateCache()
        cache.put("EUR", "USD", 1.1)
        assert cache.snapshot()["EUR-USD"]["stored_at"] > 1_000_000_000
