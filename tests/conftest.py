"""Shared fixtures for the rulecheck test-suite."""
from __future__ import annotations

import pytest

from rulecheck.core.logging import configure_logging
from rulecheck.core.validation import (
    MappingDataSet,
    ValidationContext,
    Validator,
)


@pytest.fixture(scope="session", autouse=True)
def _logging():
    """Route structlog through the package configuration so debug events render."""
    configure_logging(level="DEBUG", json_logs=True)


@pytest.fixture
def validator() -> Validator:
    return Validator(default_skip_on_empty=False)


@pytest.fixture
def make_context():
    """Build a context for calling handlers directly."""

    def _make(attribute: str | None = None, data: dict | None = None) -> ValidationContext:
        return ValidationContext(MappingDataSet(data or {}), attribute=attribute)

    return _make
