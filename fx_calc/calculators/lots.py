"""Lot size conversions"""

from typing import Optional

from ..data.models import LotSize
from ..data.reference import DEFAULT_LOT_SIZES
from ..errors import UnsupportedMethodError

CUSTOM = "Custom"


def _trim(value: float, places: int) -> str:
    """Grouped fixed-point text without trailing zeros, e.g. 1,234,567 or 0.5."""
    text = f"{value:,.{places}f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


def _lot_size(lot_type: str, lot_sizes: dict[str, LotSize]) -> LotSize:
    try:
        return lot_sizes[lot_type]
    except KeyError:
        raise UnsupportedMethodError(
            f"Unknown lot type: {lot_type}",
            method=lot_type,
            supported=list(lot_sizes),
        )


def calculate_total_units(
    lot_type: str,
    lot_count: float,
    custom_units: float = 0.0,
    lot_sizes: Optional[dict[str, LotSize]] = None
) -> float:
    """
    Total base currency units for a number of lots

    Custom positions are given directly in units.
    """
    if lot_type == CUSTOM:
        return custom_units
    return _lot_size(lot_type, lot_sizes or DEFAULT_LOT_SIZES).units * lot_count


def format_lot_size(
    lot_type: str,
    lot_count: float,
    custom_units: float = 0.0,
    lot_sizes: Optional[dict[str, LotSize]] = None
) -> str:
    """Human-readable lot description, e.g. "2 Mini (20,000 units)"."""
    if lot_type == CUSTOM:
        return f"{_trim(custom_units, 2)} units"

    total_units = calculate_total_units(lot_type, lot_count, custom_units, lot_sizes)
    return f"{_trim(lot_count, 6)} {lot_type} ({total_units:,.0f} units)"


def with_custom_size(lot_type: str, units: float,
                     lot_sizes: Optional[dict[str, LotSize]] = None) -> dict[str, LotSize]:
    """Copy of the lot size table with one entry resized."""
    table = dict(lot_sizes or DEFAULT_LOT_SIZES)
    current = _lot_size(lot_type, table)
    table[lot_type] = LotSize(current.name, units, current.editable)
    return table
