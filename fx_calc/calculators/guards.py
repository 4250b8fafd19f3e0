"""Input guards shared by the calculators."""

import math
from typing import Optional

from ..errors import InvalidInputError


def require_finite(value: float, field: str) -> float:
    """Reject NaN and infinite inputs."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{field} must be a number", field=field, value=value)
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"{field} must be finite", field=field, value=value)
    return float(value)


def require_positive(value: float, field: str) -> float:
    """Reject zero, negative and non-finite values used as denominators."""
    value = require_finite(value, field)
    if value <= 0:
        raise InvalidInputError(f"{field} must be greater than zero", field=field, value=value)
    return value


def require_non_negative(value: float, field: str) -> float:
    value = require_finite(value, field)
    if value < 0:
        raise InvalidInputError(f"{field} must not be negative", field=field, value=value)
    return value


def floor_frequency(value: Optional[float]) -> int:
    """Whole periods per year, never below 1."""
    if value is None or value < 1:
        return 1
    return int(math.floor(value))
