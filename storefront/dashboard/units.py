"""
Currency unit conversion.

The store keeps money as integer cents; the dashboard shows dollars.
Conversion back to cents rounds half up on the decimal value, so 0.005
becomes 1 cent regardless of binary float representation.

Dollar amounts are floats, so ``to_minor_units(to_major_units(x)) == x``
holds for amounts up to 15 significant digits (about ten trillion
dollars). Beyond that the float no longer carries every cent.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, Decimal]

MINOR_UNITS_PER_MAJOR = 100


def to_major_units(minor_value: Optional[Number]) -> float:
    """Cents to dollars; ``None`` counts as 0"""
    return (minor_value or 0) / MINOR_UNITS_PER_MAJOR


def to_minor_units(major_value: Optional[Number]) -> int:
    """Dollars to cents, rounding half up; ``None`` counts as 0"""
    amount = Decimal(str(major_value or 0)) * MINOR_UNITS_PER_MAJOR
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def minor_amount(value: Optional[Number]) -> int:
    """
    Read a stored minor-unit amount as an int.

    Fractional cents from loosely-typed documents are rounded half up.
    Non-numeric values raise ``TypeError``.
    """
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"Expected a numeric amount, got {type(value).__name__}")
    if isinstance(value, int):
        return value
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
