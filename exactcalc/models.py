"""Pydantic models for calculation requests."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Operator(str, Enum):
    """Arithmetic operator symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class CalculationRequest(BaseModel):
    """A single binary calculation as entered by a user.

    Operands stay raw strings here; they are parsed by the Calculator so that
    malformed numbers are reported as parse errors rather than validation
    errors.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    operator: Operator
    left: str
    right: str
    decimal_limit: int | None = Field(
        default=None,
        ge=0,
        alias="decimalLimit",
        description="Fractional digits kept by division; overrides the calculator default.",
    )

    @property
    def is_division(self) -> bool:
        return self.operator == Operator.DIVIDE
