"""Shared fixtures for validation tests."""

from __future__ import annotations

import pytest
from validation_models import Employee


@pytest.fixture
def alice() -> Employee:
    return Employee("Alice", 40)


@pytest.fixture
def bob() -> Employee:
    return Employee("Bob", 5)
