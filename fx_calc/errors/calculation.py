"""
System failure error classifications.

These exceptions represent failures that are not caused by a correctable
input value.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class CalculationError(SystemFailureError):
    """Unexpected error inside a calculator."""

    def __init__(self, message: str, calculator_name: Optional[str] = None,
                 calculation_input: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.calculator_name = calculator_name
        self.calculation_input = calculation_input


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class RateUnavailableError(SystemFailureError):
    """No exchange rate could be fetched or served from cache."""

    def __init__(self, message: str, base: Optional[str] = None,
                 quote: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.base = base
        self.quote = quote
