# tests/conftest.py
"""
Pytest configuration and fixtures for patternkit tests.
"""

import logging

import pytest

from patternkit import DemoConfig


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Restore the package log level after each test."""
    package_logger = logging.getLogger("patternkit")
    level = package_logger.level

    yield

    package_logger.setLevel(level)


@pytest.fixture
def config():
    """Default demonstration config."""
    return DemoConfig()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
