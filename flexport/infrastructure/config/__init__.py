# flexport/infrastructure/config/__init__.py

"""Configuration infrastructure for flexport.

This module manages configuration loading, validation, and models.
"""

# Local imports
from flexport.infrastructure.config._loader import ConfigLoader
from flexport.infrastructure.config._loader import get_config
from flexport.infrastructure.config._loader import reset_config
from flexport.infrastructure.config._models import AppConfig
from flexport.infrastructure.config._models import CSVConfig
from flexport.infrastructure.config._models import ExportConfig
from flexport.infrastructure.config._models import LoggingConfig
from flexport.infrastructure.config._models import OutputConfig
from flexport.infrastructure.config._models import XMLConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "CSVConfig",
    "ExportConfig",
    "LoggingConfig",
    "OutputConfig",
    "XMLConfig",
    "get_config",
    "reset_config",
]
