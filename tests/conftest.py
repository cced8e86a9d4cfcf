"""Pytest configuration and shared fixtures for nesting tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from stonecut.domain import NestingConfig


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def nesting_config() -> NestingConfig:
    """Default nesting configuration."""
    return NestingConfig()


@pytest.fixture
def jobs_path() -> Path:
    """Directory holding the JSON job fixtures."""
    return Path(__file__).parent / "fixtures" / "jobs"
