"""
Calculator façade coordinating configuration, exchange rates and logging.

The pure calculators in fx_calc.calculators take every value explicitly.
ForexCalculator fills in what a caller usually leaves implicit: per-pair
pip scale and lot sizes from configuration, exchange rates from an
explicit cache, account defaults and rounding. It logs each calculation
and wraps unexpected failures in CalculationError.
"""

from dataclasses import replace
from typing import Any, Callable, Optional

from .calculators import (
    compound_growth,
    fibonacci_levels,
    margin,
    margin_by_leverage,
    pip_difference,
    pip_value,
    pivot_points,
    position_size,
    profit_loss,
    risk_amount_to_percent,
    risk_percent_to_amount,
    stop_loss_take_profit,
    stop_pips_to_price,
    stop_price_to_pips,
)
from .calculators.pips import resolve_pair
from .calculators.position_size import RiskMode, StopLossMode, parse_mode
from .config.defaults import DefaultConfig, LotParams
from .config.loader import ConfigLoader, deep_merge
from .config.validation import ConfigValidator
from .data.models import CurrencyPair
from .errors import (
    CalculationError,
    ConfigurationError,
    InputError,
    InvalidInputError,
    RateUnavailableError,
    UnsupportedMethodError,
)
from .logging.config import get_calculation_logger, log_calculation, log_calculation_failure
from .rates.cache import ExchangeRateCache, RateFetcher


class ForexCalculator:
    """
    Runs the forex calculators with configuration-driven defaults

    Settings resolve defaults < pairs.yaml < config_overrides. Use
    with_overrides() or calculate(..., config_overrides=...) for a single
    calculation with different settings.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 loader: Optional[ConfigLoader] = None,
                 rate_cache: Optional[ExchangeRateCache] = None,
                 rate_fetcher: Optional[RateFetcher] = None,
                 config_overrides: Optional[dict[str, Any]] = None):
        if loader is None:
            loader = ConfigLoader.defaults_only(config)
        elif config is not None:
            loader = replace(loader, defaults=config)

        self.loader = loader
        self.config = loader.defaults
        self.config_overrides = config_overrides or {}
        self.logger = get_calculation_logger(__name__)
        self.settings = self._validated(loader.merge_config(call_overrides=self.config_overrides))

        cache_settings = self.settings["rate_cache"]
        self.rate_cache = rate_cache or ExchangeRateCache(
            ttl_seconds=cache_settings["ttl_seconds"],
            allow_stale=cache_settings["allow_stale"],
        )
        self.rate_fetcher = rate_fetcher

        self._registry: dict[str, Callable[..., Any]] = {
            "compounding": self.compound_growth,
            "fibonacci": self.fibonacci_levels,
            "pip_difference": self.pip_difference,
            "pip_value": self.pip_value,
            "pivot_points": self.pivot_points,
            "position_size": self.position_size,
            "profit_loss": self.profit_loss,
            "margin": self.margin,
            "margin_by_leverage": self.margin_by_leverage,
            "stop_loss": self.stop_loss_take_profit,
        }

    @property
    def calculators(self) -> list[str]:
        """Names accepted by calculate()."""
        return list(self._registry)

    def with_overrides(self, overrides: dict[str, Any]) -> "ForexCalculator":
        """Calculator sharing this one's loader and rate cache, with extra setting overrides."""
        return ForexCalculator(
            loader=self.loader,
            rate_cache=self.rate_cache,
            rate_fetcher=self.rate_fetcher,
            config_overrides=deep_merge(self.config_overrides, overrides),
        )

    def calculate(self, name: str, params: dict[str, Any],
                  config_overrides: Optional[dict[str, Any]] = None) -> Any:
        """
        Run a calculator by name with keyword parameters

        Args:
            name: Calculator name, see calculators
            params: Keyword arguments for the calculator
            config_overrides: Settings overriding defaults and pair
                configuration for this calculation only

        Returns:
            The calculator's result object
        """
        target = self.with_overrides(config_overrides) if config_overrides else self

        handler = target._registry.get(name)
        if handler is None:
            raise UnsupportedMethodError(
                f"Unknown calculator: {name}",
                method=name,
                supported=self.calculators,
            )

        try:
            return handler(**params)
        except TypeError as e:
            raise InvalidInputError(f"Invalid parameters for {name}: {e}", field=name, value=params)

    # Configuration lookups

    def pair_config(self, pair_name: str) -> dict[str, Any]:
        """Merged configuration for a currency pair, validated."""
        return self._validated(
            self.loader.merge_config(pair_name, self.config_overrides),
            pair_name,
        )

    def resolve_pair(self, pair: Any) -> CurrencyPair:
        """Currency pair with the pip decimal place taken from configuration."""
        return self._pair_settings("resolve_pair", pair)[0]

    def exchange_rate(self, from_currency: str, to_currency: str,
                      explicit: Optional[float] = None) -> float:
        """
        Rate converting from_currency into to_currency

        An explicit rate wins; same-currency conversions are 1.0; anything
        else goes through the rate cache and the configured fetcher.
        """
        if explicit is not None:
            return explicit
        if from_currency.upper() == to_currency.upper():
            return 1.0
        return self.rate_cache.resolve(from_currency, to_currency, self.rate_fetcher)

    # Calculators

    def compound_growth(self, principal: float, rate_percent: float,
                        frequency: Optional[float] = None, years: float = 1.0,
                        **options: Any):
        compounding = self.settings["compounding"]
        inputs = {
            "principal": principal,
            "rate_percent": rate_percent,
            "frequency": frequency if frequency is not None else compounding["default_frequency"],
            "years": years,
            "rule_constant": compounding["rule_constant"],
            **options,
        }
        return self._run("compounding", compound_growth, inputs,
                         lambda r: {"end_balance": r.end_balance, "total_earnings": r.total_earnings})

    def fibonacci_levels(self, high: float, low: float, is_uptrend: bool = True):
        inputs = {"high": high, "low": low, "is_uptrend": is_uptrend}
        return self._run("fibonacci", fibonacci_levels, inputs)

    def pip_difference(self, price_a: float, price_b: float, pair: Any,
                       pip_decimal_places: Optional[int] = None):
        parsed, settings = self._pair_settings("pip_difference", pair, pip_decimal_places)
        inputs = {
            "price_a": price_a,
            "price_b": price_b,
            "pair": parsed,
            "precision": settings["pip"]["precision"],
        }
        return self._run("pip_difference", pip_difference, inputs, lambda r: {"pips": r})

    def pip_value(self, pair: Any, position_units: float,
                  account_currency: Optional[str] = None,
                  exchange_rate: Optional[float] = None):
        parsed, _ = self._pair_settings("pip_value", pair)
        account_currency = account_currency or self.settings["account"]["currency"]
        inputs = {
            "pair": parsed,
            "position_units": position_units,
            "account_currency": account_currency,
            "exchange_rate": self._quote_rate(parsed, account_currency, exchange_rate),
        }
        return self._run("pip_value", pip_value, inputs,
                         lambda r: {"pip_value_account": r.pip_value_account})

    def pivot_points(self, high: float, low: float, close: float,
                     method: str = "standard", open_price: Optional[float] = None):
        inputs = {"high": high, "low": low, "close": close, "method": method, "open_price": open_price}
        return self._run("pivot_points", pivot_points, inputs, lambda r: {"pivot": r.pivot})

    def position_size(self, balance: float, risk: float, stop_loss: float,
                      entry_price: float, pair: Any,
                      risk_mode: str = RiskMode.PERCENTAGE.value,
                      stop_loss_mode: str = StopLossMode.PIPS.value,
                      account_currency: Optional[str] = None,
                      exchange_rate: Optional[float] = None):
        parsed, settings = self._pair_settings("position_size", pair)
        account_currency = account_currency or self.settings["account"]["currency"]
        inputs = {
            "balance": balance,
            "risk": risk,
            "risk_mode": risk_mode,
            "stop_loss": stop_loss,
            "stop_loss_mode": stop_loss_mode,
            "entry_price": entry_price,
            "pair": parsed,
            "account_currency": account_currency,
            "exchange_rate": self._quote_rate(parsed, account_currency, exchange_rate),
            "lots": LotParams(**settings["lots"]),
        }
        return self._run("position_size", position_size, inputs,
                         lambda r: {"units": r.units, "risk_amount": r.risk_amount})

    def profit_loss(self, entry_price: float, exit_price: float, lots: float, pair: Any,
                    is_long: bool = True, account_currency: Optional[str] = None,
                    exchange_rate: Optional[float] = None):
        parsed, settings = self._pair_settings("profit_loss", pair)
        account_currency = account_currency or self.settings["account"]["currency"]
        inputs = {
            "entry_price": entry_price,
            "exit_price": exit_price,
            "lots": lots,
            "pair": parsed,
            "account_currency": account_currency,
            "is_long": is_long,
            "exchange_rate": self._quote_rate(parsed, account_currency, exchange_rate),
            "lot_units": settings["lots"]["standard"],
        }
        return self._run("profit_loss", profit_loss, inputs,
                         lambda r: {"pips": r.pips, "profit_loss": r.profit_loss})

    def margin(self, pair: Any, position_units: float, leverage: Optional[float] = None,
               account_balance: Optional[float] = None, account_currency: Optional[str] = None,
               exchange_rate: Optional[float] = None):
        parsed, _ = self._pair_settings("margin", pair)
        account = self.settings["account"]
        inputs = {
            "pair": parsed,
            "position_units": position_units,
            "leverage": leverage if leverage is not None else account["leverage"],
            "exchange_rate": self._rate_or_error(
                parsed.base, account_currency or account["currency"], exchange_rate
            ),
            "account_balance": account_balance,
        }
        return self._run("margin", margin, inputs,
                         lambda r: {"required_margin": r.required_margin})

    def margin_by_leverage(self, pair: Any, position_units: float,
                           account_balance: Optional[float] = None,
                           account_currency: Optional[str] = None,
                           exchange_rate: Optional[float] = None):
        parsed, _ = self._pair_settings("margin_by_leverage", pair)
        inputs = {
            "pair": parsed,
            "position_units": position_units,
            "exchange_rate": self._rate_or_error(
                parsed.base, account_currency or self.settings["account"]["currency"], exchange_rate
            ),
            "account_balance": account_balance,
        }
        return self._run("margin_by_leverage", margin_by_leverage, inputs,
                         lambda r: {"options": len(r)})

    def stop_loss_take_profit(self, entry_price: float, stop_loss_price: float,
                              take_profit_price: float, lots: float, pair: Any,
                              is_long: bool = True, account_currency: Optional[str] = None,
                              exchange_rate: Optional[float] = None):
        parsed, settings = self._pair_settings("stop_loss", pair)
        account_currency = account_currency or self.settings["account"]["currency"]
        inputs = {
            "entry_price": entry_price,
            "stop_loss_price": stop_loss_price,
            "take_profit_price": take_profit_price,
            "lots": lots,
            "pair": parsed,
            "account_currency": account_currency,
            "is_long": is_long,
            "exchange_rate": self._quote_rate(parsed, account_currency, exchange_rate),
            "lot_units": settings["lots"]["standard"],
        }
        return self._run("stop_loss", stop_loss_take_profit, inputs,
                         lambda r: {"risk_reward_ratio": r.risk_reward_ratio})

    # Input mode conversions

    def convert_risk(self, balance: float, value: float, to_mode: str) -> float:
        """Convert the displayed risk value when the risk mode toggles."""
        rounding = self.settings["rounding"]
        if parse_mode(to_mode, RiskMode) is RiskMode.AMOUNT:
            return risk_percent_to_amount(balance, value, rounding["amount_decimals"])
        return risk_amount_to_percent(balance, value, rounding["percent_decimals"])

    def convert_stop(self, entry_price: float, value: float, to_mode: str,
                     pair: Any, is_long: bool = True) -> float:
        """Convert the displayed stop value when the stop mode toggles."""
        parsed, _ = self._pair_settings("convert_stop", pair)
        if parse_mode(to_mode, StopLossMode) is StopLossMode.PRICE:
            return stop_pips_to_price(entry_price, value, parsed, is_long)
        return stop_price_to_pips(entry_price, value, parsed, self.settings["rounding"]["pip_decimals"])

    # Internals

    def _validated(self, merged: dict[str, Any], scope: str = "defaults") -> dict[str, Any]:
        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration for {scope}",
                errors=errors,
                context={"scope": scope},
            )
        return merged

    def _pair_settings(self, name: str, pair: Any,
                       pip_decimal_places: Optional[int] = None) -> tuple[CurrencyPair, dict[str, Any]]:
        """
        Parse the pair and load its merged settings.

        Unknown pair names and invalid settings are logged against the
        calculator that asked for them before being re-raised.
        """
        try:
            parsed = resolve_pair(pair)
            settings = self.pair_config(parsed.name)
            if pip_decimal_places is None:
                pip = settings["pip"]
                pip_decimal_places = pip["jpy_decimal_places"] if parsed.is_jpy else pip["standard_decimal_places"]
            return resolve_pair(parsed, pip_decimal_places), settings
        except (InputError, ConfigurationError) as e:
            shown = pair.name if isinstance(pair, CurrencyPair) else pair
            log_calculation_failure(self.logger, name, {"pair": shown}, e)
            raise

    def _quote_rate(self, pair: CurrencyPair, account_currency: str,
                    explicit: Optional[float]) -> float:
        return self._rate_or_error(pair.quote, account_currency, explicit)

    def _rate_or_error(self, from_currency: str, to_currency: str,
                       explicit: Optional[float]) -> float:
        try:
            return self.exchange_rate(from_currency, to_currency, explicit)
        except RateUnavailableError:
            self.logger.error("Exchange rate unavailable", base=from_currency, quote=to_currency)
            raise

    def _run(self, name: str, func: Callable[..., Any], inputs: dict[str, Any],
             summarize: Optional[Callable[[Any], dict[str, Any]]] = None) -> Any:
        loggable = {key: (value.name if isinstance(value, CurrencyPair) else value)
                    for key, value in inputs.items()}
        try:
            result = func(**inputs)
        except InputError as e:
            log_calculation_failure(self.logger, name, loggable, e)
            raise
        except TypeError as e:
            error = InvalidInputError(f"Invalid parameters for {name}: {e}", field=name, value=loggable)
            log_calculation_failure(self.logger, name, loggable, error)
            raise error
        except Exception as e:
            log_calculation_failure(self.logger, name, loggable, e)
            raise CalculationError(
                f"Unexpected error in {name} calculation: {str(e)}",
                calculator_name=name,
                calculation_input=loggable,
            )

        log_calculation(self.logger, name, loggable, summarize(result) if summarize else None)
        return result
