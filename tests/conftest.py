"""
Pytest configuration and fixtures for datetime-constraints tests

This module provides shared fixtures for unit and CLI tests.
"""
from datetime import date

import pytest

from datetime_constraints.core.formats import FormatRegistry
from datetime_constraints.core.formats import registry as registry_module


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise a single rule or component"
    )
    config.addinivalue_line(
        "markers", "cli: Tests that drive the command-line interface"
    )


# =======================
# CLOCK FIXTURES
# =======================

@pytest.fixture
def fixed_today() -> date:
    """A fixed 'today' for the relative-to-today rules"""
    return date(2005, 2, 17)


# =======================
# FORMAT FIXTURES
# =======================

@pytest.fixture
def all_formats() -> FormatRegistry:
    """Registry with every database format enabled"""
    return FormatRegistry(["mysql", "pg"])


@pytest.fixture
def mysql_only() -> FormatRegistry:
    """Registry without the PostgreSQL format"""
    return FormatRegistry(["mysql"])


@pytest.fixture(autouse=True)
def reset_default_registry(monkeypatch):
    """
    Drop the cached default registry so each test sees its own environment

    Args:
        monkeypatch: pytest monkeypatch fixture
    """
    monkeypatch.setattr(registry_module, "_default_registry", None)
    yield


# =======================
# FILE FIXTURES
# =======================

PROFILE_YAML = """
required:
  - start_date

rules:
  start_date:
    - type: to_datetime
      params:
        pattern: "%m/%d/%Y"

  end_date:
    - type: after_datetime
      params:
        pattern: "%m/%d/%Y"
        target: {field: start_date}

  created_at:
    - to_mysql_datetime

  birth_year:
    - type: ymd_to_datetime
      params:
        month: {field: birth_month}
        day: {field: birth_day}
"""


@pytest.fixture
def profile_path(tmp_path):
    """
    Write a validation profile to a temporary YAML file

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the profile
    """
    path = tmp_path / "profile.yaml"
    path.write_text(PROFILE_YAML)
    return path
