"""
Currency Amount Module

Decimal helpers for monetary amounts. The ledger runs in a single implicit
currency (USD, 2 decimal places). NEVER uses float for stored values.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from typing import Union

# Set global decimal context for financial precision
getcontext().prec = 28

CENT = Decimal('0.01')
ZERO = Decimal('0')

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: AmountLike) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal

    Floats go through str() so 0.1 becomes Decimal('0.1'), not its binary
    expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to an amount")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise ValueError(f"Cannot convert {value!r} to an amount")
    if not result.is_finite():
        raise ValueError(f"Cannot convert {value!r} to an amount")
    return result


def round_to_cents(value: Decimal) -> Decimal:
    """Round to currency precision"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """Format for display, e.g. $1,234.50 or -$35.00"""
    sign = "-" if value < ZERO else ""
    return f"{sign}${abs(value):,.2f}"
