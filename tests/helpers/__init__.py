"""Test helpers module for shared test utilities.

- constants: sample operands and their combinations
"""

from tests.helpers.constants import (
    NONZERO_DIVISOR_PAIRS,
    NONZERO_VALUES,
    PAIRS,
    SAMPLE_VALUES,
    TRIPLES,
)

__all__ = [
    "SAMPLE_VALUES",
    "NONZERO_VALUES",
    "PAIRS",
    "NONZERO_DIVISOR_PAIRS",
    "TRIPLES",
]
