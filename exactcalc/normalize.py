"""Normalization and alignment of ExactDecimal digit sequences.

These helpers never mutate their input:
- reduce: strip superfluous leading/trailing zero digits
- pad: widen a value to a reference's integer/fraction widths
- shift_right / shift_left: multiply / divide by ten
"""

from __future__ import annotations

from exactcalc.number import ZERO, ExactDecimal


def reduce(n: ExactDecimal) -> ExactDecimal:
    """Return n in canonical form.

    Leading integer zeros and trailing fraction zeros are removed, keeping a
    single digit on each side of the point. Zero magnitude always returns
    the unsigned ZERO.
    """
    if n.is_zero:
        return ZERO

    integer = n.integer
    start = 0
    while start < len(integer) - 1 and integer[start] == 0:
        start += 1

    fraction = n.fraction
    end = len(fraction)
    while end > 1 and fraction[end - 1] == 0:
        end -= 1

    if start == 0 and end == len(fraction):
        return n
    return ExactDecimal(n.negative, integer[start:], fraction[:end])


def pad(n: ExactDecimal, reference: ExactDecimal) -> ExactDecimal:
    """Widen n with zero digits to at least the reference's widths.

    The integer part is padded on the left and the fraction on the right,
    so the value is unchanged. Apply in pairs to align two operands:

        a = pad(a, b)
        b = pad(b, a)
    """
    integer_pad = len(reference.integer) - len(n.integer)
    fraction_pad = len(reference.fraction) - len(n.fraction)
    if integer_pad <= 0 and fraction_pad <= 0:
        return n
    integer = (0,) * max(integer_pad, 0) + n.integer
    fraction = n.fraction + (0,) * max(fraction_pad, 0)
    return ExactDecimal(n.negative, integer, fraction)


def shift_right(n: ExactDecimal) -> ExactDecimal:
    """Move the decimal point one place right (multiply by ten)."""
    integer = n.integer + n.fraction[:1]
    fraction = n.fraction[1:] or (0,)
    return reduce(ExactDecimal(n.negative, integer, fraction))


def shift_left(n: ExactDecimal) -> ExactDecimal:
    """Move the decimal point one place left (divide by ten)."""
    integer = n.integer[:-1] or (0,)
    fraction = n.integer[-1:] + n.fraction
    return reduce(ExactDecimal(n.negative, integer, fraction))


def shift(n: ExactDecimal, places: int) -> ExactDecimal:
    """Multiply n by 10**places using single-place shifts."""
    for _ in range(places):
        n = shift_right(n)
    for _ in range(-places):
        n = shift_left(n)
    return n


def with_sign(n: ExactDecimal, negative: bool) -> ExactDecimal:
    """Return n carrying the given sign; zero stays unsigned."""
    if n.negative == negative:
        return n
    return n.negate()


def truncate_fraction(n: ExactDecimal, places: int) -> tuple[ExactDecimal, int]:
    """Cut n's fraction down to `places` digits.

    Args:
        n: Value to truncate
        places: Number of fractional digits to keep (>= 0)

    Returns:
        Tuple of (reduced truncated value, first dropped digit). The dropped
        digit is 0 when nothing was cut.
    """
    if len(n.fraction) <= places:
        return reduce(n), 0
    dropped = n.fraction[places]
    kept = n.fraction[:places] or (0,)
    truncated = ExactDecimal(False, n.integer, kept)
    return reduce(with_sign(truncated, n.negative)), dropped
