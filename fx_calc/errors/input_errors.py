"""
Input error classifications for calculator arguments.

These exceptions describe inputs that make a calculation meaningless
(zero denominators, missing fields, unknown methods). They are raised
instead of returning NaN or infinite results.
"""

from typing import Any, Optional


class InputError(ValueError):
    """Base class for calculator input problems the caller can correct."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidInputError(InputError):
    """Input is present but outside the range the formula accepts."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class MissingInputError(InputError):
    """A required input was not supplied."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class UnsupportedMethodError(InputError):
    """Requested calculation method or mode is not known."""

    def __init__(self, message: str, method: Optional[str] = None,
                 supported: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.method = method
        self.supported = supported or []
