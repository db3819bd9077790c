"""Exact decimal arithmetic on digit sequences.

Add and subtract are positional carry/borrow scans over operands padded to a
common width. Multiply builds partial products from shifts and repeated
addition. Divide is long division by repeated subtraction with a fixed number
of fractional digits and round-half-up on one guard digit.

Signed cases are dispatched on (a.negative, b.negative) to the magnitude
routines, which only ever see non-negative values:

    add(a, b)       -> _add_magnitudes / _subtract_magnitudes
    subtract(a, b)  -> _subtract_magnitudes / _add_magnitudes

Usage pattern:
    from exactcalc.arithmetic import add, divide

    add("0.1", "0.2")               # ExactDecimal('0.3')
    divide("1", "3", decimal_limit=5)  # ExactDecimal('0.33333')
"""

from __future__ import annotations

from typing import Any

import structlog

from exactcalc.compare import Ordering, compare
from exactcalc.config import DEFAULT_DECIMAL_LIMIT, validate_decimal_limit
from exactcalc.errors import DivisionByZero
from exactcalc.normalize import (
    pad,
    reduce,
    shift,
    shift_left,
    shift_right,
    truncate_fraction,
    with_sign,
)
from exactcalc.number import ONE, ZERO, ExactDecimal, as_decimal

logger = structlog.get_logger()

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
]


# =============================================================================
# Magnitude routines (non-negative operands only)
# =============================================================================


def _aligned_digits(a: ExactDecimal, b: ExactDecimal) -> tuple[list[int], list[int], int]:
    """Pad a and b to a common width and flatten their digits.

    Returns:
        Tuple of (digits of a, digits of b, integer width)
    """
    a = pad(a, b)
    b = pad(b, a)
    return list(a.integer + a.fraction), list(b.integer + b.fraction), len(a.integer)


def _from_digits(digits: list[int], integer_width: int) -> ExactDecimal:
    return reduce(ExactDecimal(False, digits[:integer_width], digits[integer_width:]))


def _add_magnitudes(a: ExactDecimal, b: ExactDecimal) -> ExactDecimal:
    """|a| + |b| by a right-to-left carry scan."""
    digits_a, digits_b, integer_width = _aligned_digits(a, b)

    result = [0] * len(digits_a)
    carry = 0
    for i in range(len(digits_a) - 1, -1, -1):
        total = digits_a[i] + digits_b[i] + carry
        result[i] = total % 10
        carry = total // 10

    if carry:
        result.insert(0, carry)
        integer_width += 1

    return _from_digits(result, integer_width)


def _subtract_magnitudes(a: ExactDecimal, b: ExactDecimal) -> ExactDecimal:
    """|a| - |b| by a right-to-left borrow scan.

    A borrow left over past the leftmost digit means |b| > |a|; the result
    is then -(|b| - |a|), which cannot borrow again.
    """
    digits_a, digits_b, integer_width = _aligned_digits(a, b)

    result = [0] * len(digits_a)
    borrow = 0
    for i in range(len(digits_a) - 1, -1, -1):
        diff = digits_a[i] - digits_b[i] - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    if borrow:
        return _subtract_magnitudes(b, a).negate()

    return _from_digits(result, integer_width)


def _times_digit(n: ExactDecimal, digit: int) -> ExactDecimal:
    """|n| * digit by repeated addition (digit in 0..9)."""
    product = ZERO
    for _ in range(digit):
        product = _add_magnitudes(product, n)
    return product


# =============================================================================
# Public operations
# =============================================================================


def add(a: ExactDecimal | Any, b: ExactDecimal | Any) -> ExactDecimal:
    """Return a + b.

    Raises:
        InvalidOperand: If either operand is not a valid decimal
        ParseError: If a string operand is malformed
    """
    a, b = as_decimal(a), as_decimal(b)

    if not a.negative and not b.negative:
        return _add_magnitudes(a, b)
    if not a.negative and b.negative:
        return _subtract_magnitudes(a, abs(b))
    if a.negative and not b.negative:
        return _subtract_magnitudes(b, abs(a))
    return _add_magnitudes(abs(a), abs(b)).negate()


def subtract(a: ExactDecimal | Any, b: ExactDecimal | Any) -> ExactDecimal:
    """Return a - b.

    Raises:
        InvalidOperand: If either operand is not a valid decimal
        ParseError: If a string operand is malformed
    """
    a, b = as_decimal(a), as_decimal(b)

    if not a.negative and not b.negative:
        return _subtract_magnitudes(a, b)
    if not a.negative and b.negative:
        return _add_magnitudes(a, abs(b))
    if a.negative and not b.negative:
        return _add_magnitudes(abs(a), b).negate()
    # -|a| - -|b| = |b| - |a|
    return _subtract_magnitudes(abs(b), abs(a))


def multiply(a: ExactDecimal | Any, b: ExactDecimal | Any) -> ExactDecimal:
    """Return a * b.

    Each non-zero digit of a contributes b shifted to that digit's place,
    added digit times. Digits are visited outward from the decimal point so
    every partial product is one more single-place shift of the previous.

    Raises:
        InvalidOperand: If either operand is not a valid decimal
        ParseError: If a string operand is malformed
    """
    a, b = as_decimal(a), as_decimal(b)
    negative = a.negative != b.negative

    x = pad(abs(a), b)
    y = pad(abs(b), a)

    product = ZERO

    # Integer digits: b * 10^0, b * 10^1, ...
    shifted = y
    for digit in reversed(x.integer):
        if digit:
            product = _add_magnitudes(product, _times_digit(shifted, digit))
        shifted = shift_right(shifted)

    # Fraction digits: b * 10^-1, b * 10^-2, ...
    shifted = y
    for digit in x.fraction:
        shifted = shift_left(shifted)
        if digit:
            product = _add_magnitudes(product, _times_digit(shifted, digit))

    return with_sign(reduce(product), negative)


def divide(
    a: ExactDecimal | Any,
    b: ExactDecimal | Any,
    decimal_limit: int = DEFAULT_DECIMAL_LIMIT,
) -> ExactDecimal:
    """Return a / b with at most decimal_limit fractional digits.

    Quotients that terminate within the limit are exact. Longer ones are
    computed to one guard digit past the limit and rounded half-up on it.

    Args:
        a: Dividend
        b: Divisor
        decimal_limit: Maximum fractional digits in the result (>= 0)

    Returns:
        The (possibly rounded) quotient

    Raises:
        DivisionByZero: If b is zero
        InvalidArgument: If decimal_limit is negative or not an int
        InvalidOperand: If either operand is not a valid decimal
        ParseError: If a string operand is malformed
    """
    a, b = as_decimal(a), as_decimal(b)
    limit = validate_decimal_limit(decimal_limit)

    if b.is_zero:
        raise DivisionByZero(f"Division by zero: {a} / 0")

    negative = a.negative != b.negative
    dividend, divisor = abs(a), abs(b)

    if dividend.is_zero:
        return ZERO
    if compare(dividend, divisor) is Ordering.EQUAL:
        return with_sign(ONE, negative)

    divisor, scale, exponent = _find_scale(dividend, divisor)
    guard_exponent = -(limit + 1)

    logger.debug(
        "division_scale_found",
        dividend=str(dividend),
        divisor=str(divisor),
        exponent=exponent,
        decimal_limit=limit,
    )

    # Leading digit falls past the guard digit: rounds to zero
    if exponent < guard_exponent:
        return ZERO

    quotient = ZERO
    remainder = dividend
    while True:
        fit, remainder = _fit(remainder, divisor)
        if fit:
            quotient = _add_magnitudes(quotient, _times_digit(scale, fit))
        if remainder.is_zero or exponent <= guard_exponent:
            break
        divisor = shift_left(divisor)
        scale = shift_left(scale)
        exponent -= 1

    if len(quotient.fraction) > limit:
        quotient = _round_half_up(quotient, limit)

    return with_sign(quotient, negative)


# =============================================================================
# Division helpers
# =============================================================================


def _find_scale(
    dividend: ExactDecimal, divisor: ExactDecimal
) -> tuple[ExactDecimal, ExactDecimal, int]:
    """Scale divisor by a power of ten p so that divisor <= dividend < 10 * divisor.

    An exact hit (divisor * 10^p == dividend) stops on that power; the next
    shift would overshoot.

    Returns:
        Tuple of (scaled divisor, 10^p as ExactDecimal, p)
    """
    scale = ONE
    exponent = 0

    if compare(divisor, dividend) is Ordering.GREATER:
        while compare(divisor, dividend) is Ordering.GREATER:
            divisor = shift_left(divisor)
            scale = shift_left(scale)
            exponent -= 1
        return divisor, scale, exponent

    candidate = shift_right(divisor)
    while compare(candidate, dividend) is not Ordering.GREATER:
        divisor = candidate
        scale = shift_right(scale)
        exponent += 1
        candidate = shift_right(divisor)
    return divisor, scale, exponent


def _fit(remainder: ExactDecimal, divisor: ExactDecimal) -> tuple[int, ExactDecimal]:
    """Count how many times divisor fits into remainder.

    Bounded by 9 while remainder < 10 * divisor, which the scale search and
    the one-place shift per step maintain.

    Returns:
        Tuple of (count, remainder after subtracting divisor count times)
    """
    count = 0
    while compare(remainder, divisor) is not Ordering.LESS:
        remainder = _subtract_magnitudes(remainder, divisor)
        count += 1
    return count, remainder


def _round_half_up(quotient: ExactDecimal, limit: int) -> ExactDecimal:
    """Drop the guard digit, rounding the last kept place up on >= 5."""
    truncated, guard = truncate_fraction(quotient, limit)
    if guard < 5:
        return truncated

    rounded = _add_magnitudes(truncated, shift(ONE, -limit))
    logger.debug(
        "division_rounded",
        truncated=str(truncated),
        rounded=str(rounded),
        guard_digit=guard,
    )
    return rounded
