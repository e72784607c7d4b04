# tests/adapters/exporters/conftest.py

"""Pytest configuration for exporter tests"""

# Third party imports
import pytest

# Local imports
from flexport.adapters.exporters.csv_exporter import CSVExporter
from flexport.adapters.exporters.xml_exporter import XMLExporter
from flexport.infrastructure.config import ConfigLoader


@pytest.fixture
def csv_exporter(default_config: ConfigLoader) -> CSVExporter:
    """CSV exporter with the two property columns used by the full item"""
    return CSVExporter(10, ["sale", "delivery"], config=default_config)


@pytest.fixture
def xml_exporter(default_config: ConfigLoader) -> XMLExporter:
    return XMLExporter(20, config=default_config)
