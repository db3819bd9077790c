"""Canonical representation of an exact decimal number.

An ExactDecimal is a sign flag plus two digit tuples joined by an implicit
decimal point:

    ExactDecimal(negative=True, integer=(1, 2), fraction=(5,))  # -12.5

Both tuples are always non-empty; integers carry a single zero fraction
digit (5 is stored as 5.0). Values are immutable, and every operation
returns a new value.

Usage pattern:
    from exactcalc import ExactDecimal

    total = ExactDecimal.from_str("0.1") + "0.2"
    assert total == ExactDecimal.from_str("0.3")
    print(total)  # 0.3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from exactcalc.errors import InvalidOperand

Digits = tuple[int, ...]


@dataclass(frozen=True, eq=False)
class ExactDecimal:
    """Signed decimal value with exact integer and fractional digits.

    Construction validates the structural invariants:
    - both digit tuples are non-empty
    - every digit is an int in 0..9
    - zero is never negative

    Leading integer zeros and trailing fraction zeros are allowed (padded
    intermediates need them); results handed back to callers are always
    reduced. Equality and hashing compare the reduced value, so 007.50
    equals 7.5.

    Attributes:
        negative: True for values below zero
        integer: Digits left of the decimal point, most significant first
        fraction: Digits right of the decimal point, most significant first
    """

    negative: bool
    integer: Digits
    fraction: Digits

    def __post_init__(self) -> None:
        # Accept any digit sequence but store tuples
        object.__setattr__(self, "integer", tuple(self.integer))
        object.__setattr__(self, "fraction", tuple(self.fraction))
        self.validate()

    def validate(self) -> None:
        """Check the structural invariants.

        Raises:
            InvalidOperand: If any invariant is violated
        """
        if not isinstance(self.negative, bool):
            raise InvalidOperand(f"Sign flag must be bool, got {type(self.negative).__name__}")
        if not self.integer:
            raise InvalidOperand("Integer part must have at least one digit")
        if not self.fraction:
            raise InvalidOperand("Fractional part must have at least one digit")
        for digit in self.integer + self.fraction:
            if type(digit) is not int or not 0 <= digit <= 9:
                raise InvalidOperand(f"Invalid digit: {digit!r}")
        if self.negative and self.is_zero:
            raise InvalidOperand("Zero cannot be negative")

    # --- Properties ---

    @property
    def is_zero(self) -> bool:
        """True if every digit is zero."""
        return not any(self.integer) and not any(self.fraction)

    @property
    def is_negative(self) -> bool:
        return self.negative

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        if self.is_zero:
            return 0
        return -1 if self.negative else 1

    # --- Conversion ---

    @classmethod
    def from_str(cls, text: str) -> ExactDecimal:
        """Parse an ExactDecimal from text.

        Raises:
            ParseError: If text is not a valid decimal number
        """
        from exactcalc.parsing import parse

        return parse(text)

    def __str__(self) -> str:
        from exactcalc.formatting import format_decimal

        return format_decimal(self)

    def __repr__(self) -> str:
        return f"ExactDecimal('{self}')"

    def __bool__(self) -> bool:
        return not self.is_zero

    # --- Comparison ---

    def _reduced_key(self) -> tuple[bool, Digits, Digits]:
        from exactcalc.normalize import reduce

        reduced = reduce(self)
        return reduced.negative, reduced.integer, reduced.fraction

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int) and not isinstance(other, bool):
            other = as_decimal(other)
        if not isinstance(other, ExactDecimal):
            return NotImplemented
        return self._reduced_key() == other._reduced_key()

    def __hash__(self) -> int:
        negative, integer, fraction = self._reduced_key()
        # Whole numbers hash like the equal int
        if fraction == (0,):
            value = 0
            for digit in integer:
                value = value * 10 + digit
            return hash(-value if negative else value)
        return hash((negative, integer, fraction))

    def __lt__(self, other: Any) -> bool:
        from exactcalc.compare import Ordering, compare

        return compare(self, other) is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        from exactcalc.compare import Ordering, compare

        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: Any) -> bool:
        from exactcalc.compare import Ordering, compare

        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        from exactcalc.compare import Ordering, compare

        return compare(self, other) is not Ordering.LESS

    # --- Arithmetic operations ---

    def __add__(self, other: Any) -> ExactDecimal:
        from exactcalc.arithmetic import add

        return add(self, other)

    def __radd__(self, other: Any) -> ExactDecimal:
        from exactcalc.arithmetic import add

        return add(other, self)

    def __sub__(self, other: Any) -> ExactDecimal:
        from exactcalc.arithmetic import subtract

        return subtract(self, other)

    def __rsub__(self, other: Any) -> ExactDecimal:
        from exactcalc.arithmetic import subtract

        return subtract(other, self)

    def __mul__(self, other: Any) -> ExactDecimal:
        from exactcalc.arithmetic import multiply

        return multiply(self, other)

    def __rmul__(self, other: Any) -> ExactDecimal:
        from exactcalc.arithmetic import multiply

        return multiply(other, self)

    def __truediv__(self, other: Any) -> ExactDecimal:
        """Divide using the default decimal limit.

        Raises:
            DivisionByZero: If other is zero
        """
        from exactcalc.arithmetic import divide

        return divide(self, other)

    def __rtruediv__(self, other: Any) -> ExactDecimal:
        from exactcalc.arithmetic import divide

        return divide(other, self)

    def __neg__(self) -> ExactDecimal:
        return self.negate()

    def __pos__(self) -> ExactDecimal:
        return self

    def __abs__(self) -> ExactDecimal:
        if not self.negative:
            return self
        return ExactDecimal(False, self.integer, self.fraction)

    def negate(self) -> ExactDecimal:
        """Flip the sign. Zero stays unsigned."""
        if self.is_zero:
            return ExactDecimal(False, self.integer, self.fraction)
        return ExactDecimal(not self.negative, self.integer, self.fraction)


def as_decimal(value: Any) -> ExactDecimal:
    """Coerce an operand to ExactDecimal.

    Accepts an ExactDecimal (re-validated), a decimal string (parsed) or an
    int of any size (split into digits).

    ExactDecimal operands are checked against the structural invariants
    only. Leading integer zeros and trailing fraction zeros are accepted
    and removed from results, so ExactDecimal(False, (0, 0, 7), (5, 0))
    behaves exactly like 7.5.

    Raises:
        InvalidOperand: If value is of an unsupported type or invalid
        ParseError: If a string operand is malformed
    """
    if isinstance(value, ExactDecimal):
        value.validate()
        return value
    if isinstance(value, str):
        from exactcalc.parsing import parse

        return parse(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return _from_int(value)
    raise InvalidOperand(f"Unsupported operand type: {type(value).__name__}")


# Digits per divmod step when splitting an int; stays below the int/str limit
_INT_CHUNK_DIGITS = 18


def _from_int(value: int) -> ExactDecimal:
    """Build an ExactDecimal from an int without str(), which caps digit counts."""
    magnitude = abs(value)
    chunks: list[str] = []
    while True:
        magnitude, chunk = divmod(magnitude, 10**_INT_CHUNK_DIGITS)
        if not magnitude:
            chunks.append(str(chunk))
            break
        chunks.append(f"{chunk:0{_INT_CHUNK_DIGITS}d}")
    integer = tuple(int(c) for c in "".join(reversed(chunks)))
    return ExactDecimal(value < 0, integer, (0,))


ZERO = ExactDecimal(False, (0,), (0,))
ONE = ExactDecimal(False, (1,), (0,))
