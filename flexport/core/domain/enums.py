# flexport/core/domain/enums.py

"""Domain enumerations for the export library"""

# Standard library imports
from enum import Enum
from enum import IntEnum


class ExportType(IntEnum):
    """Supported export formats

    The integer values are part of the public API and must stay stable.
    """

    XML = 0  # XML-based export format, supports usergroups
    CSV = 1  # Tab-separated export format, usergroups are flattened

    @classmethod
    def from_name(cls, name: str) -> "ExportType":
        """Look up an export type by its case-insensitive name (e.g. "csv")"""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown export type '{name}'") from None


class ImageType(Enum):
    """Role of an image within the item's image set"""

    DEFAULT = "default"
    THUMBNAIL = "thumbnail"
