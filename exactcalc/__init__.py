"""Exact decimal arithmetic on arbitrary-precision digit sequences."""

from exactcalc.arithmetic import add, divide, multiply, subtract
from exactcalc.calculator import CalculationError, CalculationResult, Calculator
from exactcalc.compare import Ordering, compare
from exactcalc.config import DEFAULT_DECIMAL_LIMIT, DivisionConfig
from exactcalc.errors import (
    DivisionByZero,
    ExactDecimalError,
    InvalidArgument,
    InvalidOperand,
    ParseError,
)
from exactcalc.formatting import format_decimal
from exactcalc.models import CalculationRequest, Operator
from exactcalc.normalize import pad, reduce, shift_left, shift_right
from exactcalc.number import ONE, ZERO, ExactDecimal
from exactcalc.parsing import parse

__version__ = "0.1.0"
__all__ = [
    # Representation
    "ExactDecimal",
    "ZERO",
    "ONE",
    # Parsing and formatting
    "parse",
    "format_decimal",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "compare",
    "Ordering",
    # Normalization
    "reduce",
    "pad",
    "shift_left",
    "shift_right",
    # Engine
    "Calculator",
    "CalculationRequest",
    "CalculationResult",
    "CalculationError",
    "Operator",
    "DivisionConfig",
    "DEFAULT_DECIMAL_LIMIT",
    # Errors
    "ExactDecimalError",
    "ParseError",
    "InvalidOperand",
    "DivisionByZero",
    "InvalidArgument",
    "__version__",
]
