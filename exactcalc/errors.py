"""Error classes for exact decimal arithmetic.

Every error derives from ExactDecimalError, and additionally from the
builtin exception that best describes it, so callers can catch either
the library-specific or the generic type.
"""


class ExactDecimalError(ArithmeticError):
    """Base class for exact decimal errors."""

    pass


class ParseError(ExactDecimalError, ValueError):
    """Text is not a valid decimal number."""

    pass


class InvalidOperand(ExactDecimalError, TypeError):
    """Value passed to an operation is not a valid decimal."""

    pass


class DivisionByZero(ExactDecimalError, ZeroDivisionError):
    """Divisor magnitude is zero."""

    pass


class InvalidArgument(ExactDecimalError, ValueError):
    """Configuration argument is out of range (e.g. negative decimal limit)."""

    pass
