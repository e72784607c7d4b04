# flexport/core/errors.py

"""Exception hierarchy for the export library"""


class FlexportError(Exception):
    """Base class for all errors raised by flexport"""


class InvalidConfigurationError(FlexportError, ValueError):
    """Raised when an exporter or configuration model is given unusable settings"""


class InvalidValueError(FlexportError, ValueError):
    """Raised when a typed export value rejects its raw input"""
