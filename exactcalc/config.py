"""Division configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from exactcalc.errors import InvalidArgument

# Maximum fractional digits a division produces before rounding
DEFAULT_DECIMAL_LIMIT = 20

# Environment variable overriding the default decimal limit
DECIMAL_LIMIT_ENV = "EXACTCALC_DECIMAL_LIMIT"


def validate_decimal_limit(value: Any) -> int:
    """Validate a decimal limit.

    Args:
        value: Candidate limit

    Returns:
        The limit as int

    Raises:
        InvalidArgument: If value is not an int or is negative
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgument(f"Decimal limit must be int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgument(f"Decimal limit cannot be negative: {value}")
    return value


@dataclass(frozen=True)
class DivisionConfig:
    """Configuration for division.

    Each Calculator holds its own instance, so two callers using different
    limits never see each other's setting.

    Attributes:
        decimal_limit: Fractional digits kept by divide; one extra guard
            digit is computed for round-half-up (default: 20)
    """

    decimal_limit: int = DEFAULT_DECIMAL_LIMIT

    def __post_init__(self) -> None:
        validate_decimal_limit(self.decimal_limit)

    @classmethod
    def from_env(cls) -> DivisionConfig:
        """Build a config from EXACTCALC_DECIMAL_LIMIT, if set.

        Raises:
            InvalidArgument: If the variable is not a non-negative integer
        """
        raw = os.environ.get(DECIMAL_LIMIT_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            limit = int(raw)
        except ValueError as err:
            raise InvalidArgument(f"{DECIMAL_LIMIT_ENV} must be an integer: '{raw}'") from err
        return cls(decimal_limit=limit)


# Default configuration instance
DEFAULT_DIVISION_CONFIG = DivisionConfig()
