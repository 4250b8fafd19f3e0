"""
Error classification for calculator inputs and calculation failures.

Input errors describe values the caller can correct; system failures
wrap unexpected problems inside a calculator or its collaborators.
"""

from .calculation import (
    CalculationError,
    ConfigurationError,
    RateUnavailableError,
    SystemFailureError,
)
from .input_errors import (
    InputError,
    InvalidInputError,
    MissingInputError,
    UnsupportedMethodError,
)

__all__ = [
    # Input Errors
    "InputError",
    "InvalidInputError",
    "MissingInputError",
    "UnsupportedMethodError",
    # System Failures
    "SystemFailureError",
    "CalculationError",
    "ConfigurationError",
    "RateUnavailableError",
]
