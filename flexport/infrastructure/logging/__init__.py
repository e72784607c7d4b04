# flexport/infrastructure/logging/__init__.py

"""Logging setup for applications embedding flexport"""

# Local imports
from flexport.infrastructure.logging._setup import get_default_log_path
from flexport.infrastructure.logging._setup import log_export_summary
from flexport.infrastructure.logging._setup import set_up_logging as setup_logging
from flexport.infrastructure.logging._setup import (
    set_up_logging_from_config as setup_logging_from_config,
)

__all__ = [
    "setup_logging",
    "setup_logging_from_config",
    "get_default_log_path",
    "log_export_summary",
]
