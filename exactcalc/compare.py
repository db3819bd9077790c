"""Total order over ExactDecimal values."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from exactcalc.number import ExactDecimal


class Ordering(IntEnum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(a: ExactDecimal | Any, b: ExactDecimal | Any) -> Ordering:
    """Compare a with b by the sign of a - b.

    This costs a full subtraction rather than a digit scan, keeping all the
    borrow logic in one place.

    Raises:
        InvalidOperand: If either operand is not a valid decimal
    """
    from exactcalc.arithmetic import subtract

    return Ordering(subtract(a, b).sign)
