"""Rounding helpers.

Python's built-in ``round`` uses banker's rounding; prices and day figures are
quoted with half-away-from-zero rounding instead.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, halves away from zero.

    The value is first taken to 15 significant digits, so products such as
    0.15 * 0.95 (stored as 0.14249999...) round the way they read.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(format(float(value), ".15g")).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)
