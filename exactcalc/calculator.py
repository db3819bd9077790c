"""Calculator engine owning its division configuration.

The Calculator wraps the arithmetic functions with a per-instance decimal
limit and turns requests into CalculationResult values, so front ends get
explicit success/failure instead of exceptions.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

import structlog

from exactcalc.arithmetic import add, divide, multiply, subtract
from exactcalc.config import DEFAULT_DIVISION_CONFIG, DivisionConfig
from exactcalc.errors import DivisionByZero, InvalidArgument, InvalidOperand, ParseError
from exactcalc.models import CalculationRequest, Operator
from exactcalc.number import ExactDecimal
from exactcalc.parsing import parse

logger = structlog.get_logger()


class CalculationError(Enum):
    """Types of calculation errors."""

    PARSE_ERROR = "parse_error"
    INVALID_OPERAND = "invalid_operand"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class CalculationResult:
    """Result of evaluating a CalculationRequest.

    Attributes:
        operator: The requested operator
        left: Parsed left operand, or None if it failed to parse
        right: Parsed right operand, or None if it failed to parse
        value: The result, or None on error
        error: If evaluation failed, the type of error that occurred
        error_detail: Optional human-readable detail about the error

    Examples:
        result = Calculator().evaluate(
            CalculationRequest(operator="+", left="0.1", right="0.2")
        )
        assert result.is_valid
        assert result.describe() == "0.1 + 0.2 = 0.3"
    """

    operator: Operator
    left: ExactDecimal | None = None
    right: ExactDecimal | None = None
    value: ExactDecimal | None = None
    error: CalculationError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if the calculation succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the calculation failed with an error."""
        return self.error is not None

    def describe(self) -> str:
        """Render as "left OP right = value".

        Raises:
            ValueError: If the result is an error
        """
        if self.is_error or self.value is None:
            raise ValueError(f"Cannot describe failed calculation: {self.error}")
        return f"{self.left} {self.operator.value} {self.right} = {self.value}"

    @classmethod
    def success(
        cls,
        operator: Operator,
        left: ExactDecimal,
        right: ExactDecimal,
        value: ExactDecimal,
    ) -> CalculationResult:
        """Create a successful result."""
        return cls(operator=operator, left=left, right=right, value=value)

    @classmethod
    def with_error(
        cls,
        operator: Operator,
        error: CalculationError,
        detail: str | None = None,
        left: ExactDecimal | None = None,
        right: ExactDecimal | None = None,
    ) -> CalculationResult:
        """Create an error result."""
        return cls(
            operator=operator,
            left=left,
            right=right,
            error=error,
            error_detail=detail,
        )


class Calculator:
    """Exact decimal calculator with its own decimal limit.

    Separate instances never share a limit, and each division reads the
    configuration once, so changing the limit mid-flight only affects later
    calls.
    """

    def __init__(self, config: DivisionConfig | None = None) -> None:
        """Initialize the calculator.

        Args:
            config: Division configuration. Uses DEFAULT_DIVISION_CONFIG if not provided.
        """
        self.config = config or DEFAULT_DIVISION_CONFIG
        self._lock = threading.Lock()

    @property
    def decimal_limit(self) -> int:
        return self.config.decimal_limit

    def set_division_limit(self, limit: int) -> None:
        """Change the decimal limit for subsequent divisions.

        Raises:
            InvalidArgument: If limit is negative or not an int
        """
        with self._lock:
            self.config = replace(self.config, decimal_limit=limit)
        logger.info("division_limit_changed", decimal_limit=limit)

    def add(self, a: ExactDecimal | Any, b: ExactDecimal | Any) -> ExactDecimal:
        return add(a, b)

    def subtract(self, a: ExactDecimal | Any, b: ExactDecimal | Any) -> ExactDecimal:
        return subtract(a, b)

    def multiply(self, a: ExactDecimal | Any, b: ExactDecimal | Any) -> ExactDecimal:
        return multiply(a, b)

    def divide(
        self,
        a: ExactDecimal | Any,
        b: ExactDecimal | Any,
        decimal_limit: int | None = None,
    ) -> ExactDecimal:
        """Divide a by b.

        Args:
            a: Dividend
            b: Divisor
            decimal_limit: Overrides this calculator's limit for one call

        Raises:
            DivisionByZero: If b is zero
            InvalidArgument: If the limit is invalid
        """
        limit = self.config.decimal_limit if decimal_limit is None else decimal_limit
        return divide(a, b, decimal_limit=limit)

    def _operation(
        self, request: CalculationRequest
    ) -> Callable[[ExactDecimal, ExactDecimal], ExactDecimal]:
        if request.operator == Operator.ADD:
            return self.add
        if request.operator == Operator.SUBTRACT:
            return self.subtract
        if request.operator == Operator.MULTIPLY:
            return self.multiply
        return lambda a, b: self.divide(a, b, decimal_limit=request.decimal_limit)

    def evaluate(self, request: CalculationRequest) -> CalculationResult:
        """Parse the operands and apply the requested operation.

        Every engine error is captured in the returned result.

        Args:
            request: The calculation to perform

        Returns:
            CalculationResult with the value or error information
        """
        try:
            left = parse(request.left)
            right = parse(request.right)
        except ParseError as err:
            logger.warning(
                "calculation_parse_failed",
                operator=request.operator.value,
                detail=str(err),
            )
            return CalculationResult.with_error(
                request.operator, CalculationError.PARSE_ERROR, str(err)
            )

        try:
            value = self._operation(request)(left, right)
        except DivisionByZero as err:
            error, detail = CalculationError.DIVISION_BY_ZERO, str(err)
        except InvalidArgument as err:
            error, detail = CalculationError.INVALID_ARGUMENT, str(err)
        except InvalidOperand as err:
            error, detail = CalculationError.INVALID_OPERAND, str(err)
        else:
            logger.debug(
                "calculation_succeeded",
                operator=request.operator.value,
                left=str(left),
                right=str(right),
                value=str(value),
            )
            return CalculationResult.success(request.operator, left, right, value)

        logger.warning(
            "calculation_failed",
            operator=request.operator.value,
            error=error.value,
            detail=detail,
        )
        return CalculationResult.with_error(request.operator, error, detail, left, right)


def create_calculator() -> Calculator:
    """Create a calculator configured from the environment.

    Raises:
        InvalidArgument: If EXACTCALC_DECIMAL_LIMIT is set to an invalid value
    """
    return Calculator(DivisionConfig.from_env())
