"""Parse human-readable decimal strings into ExactDecimal values.

Accepted input is an optional leading '-', ASCII digits and at most one
'.', surrounded by optional whitespace:

    parse("42")      -> 42.0
    parse("-.5")     -> -0.5
    parse(" 007.50") -> 7.5
"""

from __future__ import annotations

from exactcalc.errors import ParseError
from exactcalc.normalize import reduce
from exactcalc.number import ExactDecimal

DIGITS = "0123456789"
POINT = "."
MINUS = "-"


def parse(text: str) -> ExactDecimal:
    """Parse a decimal string into a reduced ExactDecimal.

    A missing integer part becomes 0 and a missing fraction part becomes .0,
    so integers are stored in their one-fractional-digit form.

    Args:
        text: Decimal string to parse

    Returns:
        Reduced ExactDecimal; "-0" parses to unsigned zero

    Raises:
        ParseError: If text is empty, has a misplaced sign, more than one
            decimal point, a character outside 0-9 '.' '-', or no digits
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected str, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise ParseError("Empty input")

    if stripped.rfind(MINUS) > 0:
        raise ParseError(f"Sign must be the first character: '{stripped}'")
    if stripped.count(POINT) > 1:
        raise ParseError(f"Multiple decimal points: '{stripped}'")
    for char in stripped:
        if char not in DIGITS and char != POINT and char != MINUS:
            raise ParseError(f"Illegal character {char!r} in '{stripped}'")

    negative = stripped.startswith(MINUS)
    body = stripped[1:] if negative else stripped
    integer_text, _, fraction_text = body.partition(POINT)
    if not integer_text and not fraction_text:
        raise ParseError(f"No digits in '{stripped}'")

    integer = tuple(DIGITS.index(c) for c in integer_text) or (0,)
    fraction = tuple(DIGITS.index(c) for c in fraction_text) or (0,)

    # Sign is applied after reduce so "-0.0" collapses to unsigned zero
    magnitude = reduce(ExactDecimal(False, integer, fraction))
    if negative:
        return magnitude.negate()
    return magnitude
