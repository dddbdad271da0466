"""Pytest configuration and fixtures for Chronofield tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# Add the parent directory to sys.path so chronofield can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronofield import LocalDate, LocalTime, OffsetDateTime, ZoneOffset  # noqa: E402

# Hypothesis profiles: "dev" by default, "ci" when running under CI
settings.register_profile(
    "dev",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "ci",
    max_examples=500,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(
    "ci" if os.getenv("CI") else os.getenv("HYPOTHESIS_PROFILE", "dev")
)


@pytest.fixture
def ides_of_march() -> LocalDate:
    """2024-03-15, a Friday and day 75 of a leap year."""
    return LocalDate(2024, 3, 15)


@pytest.fixture
def afternoon() -> LocalTime:
    return LocalTime(14, 30, 45, 100_000_000)


@pytest.fixture
def tokyo() -> ZoneOffset:
    return ZoneOffset.of_hours(9)


@pytest.fixture
def tokyo_afternoon(tokyo: ZoneOffset) -> OffsetDateTime:
    return OffsetDateTime(2024, 3, 15, 14, 30, 45, offset=tokyo)
