"""
Number formatting helpers shared by the formatters.
"""

from decimal import ROUND_HALF_UP, Decimal

from models.common import Number


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero (28.5 -> 29).

    The builtin ``round`` rounds halves to even, which would give 28.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_number(value: Number) -> str:
    """Whole floats print without a fraction (180.0 -> "180")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_fixed(value: Number, places: int = 2) -> str:
    """Fixed-point text with halves rounded away from zero (30.125 -> "30.13")."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
