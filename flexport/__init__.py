# flexport/__init__.py

"""flexport - catalog export for search indexing services

A library that serializes catalog items with usergroup-scoped properties
into the XML or CSV export format consumed by a search/indexing service.
"""

# Local imports
# Exporters
from flexport.adapters.exporters import CSVExporter
from flexport.adapters.exporters import Exporter
from flexport.adapters.exporters import XMLExporter

# Data model
from flexport.core.domain import AllOrdernumbers
from flexport.core.domain import Attribute
from flexport.core.domain import DEFAULT_USERGROUP
from flexport.core.domain import ExportType
from flexport.core.domain import Image
from flexport.core.domain import ImageType
from flexport.core.domain import Item
from flexport.core.domain import MultiValue
from flexport.core.domain import Ordernumber
from flexport.core.domain import Property
from flexport.core.domain import UsergroupAwareMultiValue
from flexport.core.domain import Value

# Errors
from flexport.core.errors import FlexportError
from flexport.core.errors import InvalidConfigurationError
from flexport.core.errors import InvalidValueError

# Configuration and logging
from flexport.infrastructure.config import ConfigLoader
from flexport.infrastructure.config import get_config
from flexport.infrastructure.logging import setup_logging
from flexport.infrastructure.logging import setup_logging_from_config

# Version info
__version__ = "1.0.0"

__all__: list[str] = [
    # Exporters
    "Exporter",
    "ExportType",
    "CSVExporter",
    "XMLExporter",
    # Data model
    "Item",
    "Value",
    "Ordernumber",
    "Image",
    "ImageType",
    "MultiValue",
    "UsergroupAwareMultiValue",
    "AllOrdernumbers",
    "Attribute",
    "Property",
    "DEFAULT_USERGROUP",
    # Errors
    "FlexportError",
    "InvalidConfigurationError",
    "InvalidValueError",
    # Configuration
    "ConfigLoader",
    "get_config",
    "setup_logging",
    "setup_logging_from_config",
]
