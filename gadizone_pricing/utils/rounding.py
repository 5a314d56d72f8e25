"""Money rounding utilities"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest whole rupee, halves away from zero.

    The builtin round() uses banker's rounding (12.5 -> 12), which is not
    how displayed EMI amounts are rounded.
    """
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
