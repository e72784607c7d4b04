# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from flexport.infrastructure.config import ConfigLoader
from flexport.infrastructure.config import reset_config

# Shared builders and item fixtures for every test module
from tests.fixtures.items import full_item  # noqa: F401
from tests.fixtures.items import item_builder  # noqa: F401
from tests.fixtures.items import shirt_item  # noqa: F401


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and the default config"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Never reuse a default config loaded by another test
    reset_config()

    yield

    reset_config()


@pytest.fixture
def default_config() -> ConfigLoader:
    """Configuration with every default, independent of any config.json"""
    return ConfigLoader.from_dict({})


@pytest.fixture
def compact_xml_config() -> ConfigLoader:
    """Configuration producing unindented XML"""
    return ConfigLoader.from_dict({"xml": {"pretty_print": False}})
