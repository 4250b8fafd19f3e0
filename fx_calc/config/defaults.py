"""Default configuration parameters for the forex calculators."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipParams:
    """Pip scale parameters."""
    standard_decimal_places: int = 4                 # 0.0001 for most pairs
    jpy_decimal_places: int = 2                      # 0.01 when either leg is JPY
    precision: int = 6                               # Rounding applied to pip counts


@dataclass(frozen=True)
class LotParams:
    """Lot size definitions in base currency units."""
    standard: float = 100000.0
    mini: float = 10000.0
    micro: float = 1000.0
    nano: float = 100.0


@dataclass(frozen=True)
class CompoundingParams:
    """Compound growth parameters."""
    default_frequency: int = 12                      # Monthly compounding
    rule_constant: float = 72.0                      # Rule of 72 for doubling time


@dataclass(frozen=True)
class RoundingParams:
    """Rounding applied when converting between displayed input modes."""
    amount_decimals: int = 2
    percent_decimals: int = 2
    pip_decimals: int = 1


@dataclass(frozen=True)
class RateCacheParams:
    """Exchange rate cache parameters."""
    ttl_seconds: float = 300.0                       # 5 minutes
    allow_stale: bool = True                         # Serve expired rates as last resort


@dataclass(frozen=True)
class AccountParams:
    """Account defaults."""
    currency: str = "USD"
    leverage: float = 100.0                          # 1:100


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    pip: PipParams
    lots: LotParams
    compounding: CompoundingParams
    rounding: RoundingParams
    rate_cache: RateCacheParams
    account: AccountParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        pip=PipParams(),
        lots=LotParams(),
        compounding=CompoundingParams(),
        rounding=RoundingParams(),
        rate_cache=RateCacheParams(),
        account=AccountParams(),
    )
