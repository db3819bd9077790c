"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from exactcalc import Calculator, DivisionConfig
from exactcalc.config import DECIMAL_LIMIT_ENV


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_decimal_limit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the built-in default decimal limit."""
    monkeypatch.delenv(DECIMAL_LIMIT_ENV, raising=False)


@pytest.fixture
def calculator() -> Calculator:
    """Calculator with the default configuration."""
    return Calculator()


@pytest.fixture
def short_calculator() -> Calculator:
    """Calculator keeping five fractional digits on division."""
    return Calculator(DivisionConfig(decimal_limit=5))
