"""Interactive command-line calculator.

Usage:
    exactcalc                       # prompts for operator and operands
    exactcalc + 0.1 0.2             # 0.1 + 0.2 = 0.3
    exactcalc / 1 3 --limit 5       # 1 / 3 = 0.33333
    exactcalc '*' 12.5 0.4 -v       # with debug logging

Any operator or operand not given on the command line is prompted for.
Errors print a one-line message and exit with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import structlog
from pydantic import ValidationError

from exactcalc.calculator import CalculationError, create_calculator
from exactcalc.errors import InvalidArgument
from exactcalc.models import CalculationRequest, Operator

logger = structlog.get_logger()

OPERATOR_PROMPT = "Operation (+, -, *, /): "
LEFT_PROMPT = "Left-hand operand: "
RIGHT_PROMPT = "Right-hand operand: "

ERROR_MESSAGES = {
    CalculationError.PARSE_ERROR: "Invalid number specified.",
    CalculationError.INVALID_OPERAND: "Invalid number specified.",
    CalculationError.DIVISION_BY_ZERO: "Division by zero.",
    CalculationError.INVALID_ARGUMENT: "Invalid decimal limit.",
}


def configure_logging(verbose: bool) -> None:
    """Send structlog output to stderr, DEBUG when verbose else WARNING."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exactcalc",
        description="Exact decimal arithmetic without floating-point rounding",
    )
    parser.add_argument(
        "operator",
        nargs="?",
        help="One of + - * / (prompted if omitted)",
    )
    parser.add_argument("left", nargs="?", help="Left-hand operand (prompted if omitted)")
    parser.add_argument("right", nargs="?", help="Right-hand operand (prompted if omitted)")
    parser.add_argument(
        "--limit",
        "-l",
        type=int,
        default=None,
        help="Fractional digits kept by division (default: EXACTCALC_DECIMAL_LIMIT or 20)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def _value_or_prompt(value: str | None, prompt: str) -> str:
    if value is not None:
        return value
    return input(prompt)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one calculation and print the result.

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    args = build_parser().parse_args(argv)

    configure_logging(args.verbose)

    try:
        calculator = create_calculator()
    except InvalidArgument as err:
        logger.error("invalid_environment_config", detail=str(err))
        print(ERROR_MESSAGES[CalculationError.INVALID_ARGUMENT])
        return 1

    try:
        operator = Operator(_value_or_prompt(args.operator, OPERATOR_PROMPT).strip())
    except (ValueError, EOFError):
        print("Invalid operation specified.")
        return 1

    try:
        left = _value_or_prompt(args.left, LEFT_PROMPT)
        right = _value_or_prompt(args.right, RIGHT_PROMPT)
    except EOFError:
        print(ERROR_MESSAGES[CalculationError.PARSE_ERROR])
        return 1

    try:
        request = CalculationRequest(
            operator=operator,
            left=left,
            right=right,
            decimal_limit=args.limit,
        )
    except ValidationError as err:
        logger.warning("invalid_request", errors=err.error_count())
        print(ERROR_MESSAGES[CalculationError.INVALID_ARGUMENT])
        return 1

    result = calculator.evaluate(request)
    if result.error is not None:
        print(ERROR_MESSAGES[result.error])
        return 1

    print(result.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
