"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_pip_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pip parameters."""
        errors = []

        for name in ("standard_decimal_places", "jpy_decimal_places"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0 or value > 8:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an integer between 0 and 8",
                        value=value
                    ))

        if "precision" in params:
            value = params["precision"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="precision",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_lot_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate lot size parameters."""
        errors = []

        for name in ("standard", "mini", "micro", "nano"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_compounding_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate compounding parameters."""
        errors = []

        if "default_frequency" in params:
            value = params["default_frequency"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="default_frequency",
                    message="Must be a positive integer",
                    value=value
                ))

        if "rule_constant" in params:
            value = params["rule_constant"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="rule_constant",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_rate_cache_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate exchange rate cache parameters."""
        errors = []

        if "ttl_seconds" in params:
            value = params["ttl_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="ttl_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "allow_stale" in params:
            value = params["allow_stale"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="allow_stale",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_account_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate account parameters."""
        errors = []

        if "currency" in params:
            value = params["currency"]
            if not isinstance(value, str) or len(value) != 3:
                errors.append(ValidationError(
                    field="currency",
                    message="Must be a 3-letter currency code",
                    value=value
                ))

        if "leverage" in params:
            value = params["leverage"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="leverage",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "pip" in config:
            errors.extend(ConfigValidator.validate_pip_params(config["pip"]))

        if "lots" in config:
            errors.extend(ConfigValidator.validate_lot_params(config["lots"]))

        if "compounding" in config:
            errors.extend(ConfigValidator.validate_compounding_params(config["compounding"]))

        if "rate_cache" in config:
            errors.extend(ConfigValidator.validate_rate_cache_params(config["rate_cache"]))

        if "account" in config:
            errors.extend(ConfigValidator.validate_account_params(config["account"]))

        return errors
