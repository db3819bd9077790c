"""Render ExactDecimal values as human-readable strings."""

from __future__ import annotations

from exactcalc.number import ExactDecimal


def format_decimal(n: ExactDecimal) -> str:
    """Convert an ExactDecimal to its string form.

    Whole numbers drop their ".0" (3.0 -> "3"); every other value is printed
    digit for digit as "integer.fraction" with a leading '-' when negative.
    No reduction happens here; parse and the arithmetic operations already
    return reduced values.
    """
    sign = "-" if n.negative else ""
    integer = "".join(str(d) for d in n.integer)
    if n.fraction == (0,):
        return sign + integer
    fraction = "".join(str(d) for d in n.fraction)
    return f"{sign}{integer}.{fraction}"
