# flexport/core/types/protocols.py

"""Protocol definitions for renderable properties and writers"""

# Standard library imports
from collections.abc import Set as AbstractSet
from typing import Protocol
from typing import runtime_checkable

# Local imports
from flexport.core.types.fragments import XmlFragment

# Type alias for CSV row data
type CSVRow = list[str]


# ============================================================================
# External Library Protocols
# ============================================================================


class CSVWriter(Protocol):
    """Protocol for CSV writer objects."""

    def writerow(self, row: CSVRow) -> object: ...
    def writerows(self, rows: list[CSVRow]) -> None: ...


# ============================================================================
# Property Protocols
# ============================================================================


@runtime_checkable
class FragmentRenderable(Protocol):
    """Capability shared by every exportable multi-valued property."""

    def get_csv_fragment(self, usergroups: AbstractSet[str] = frozenset()) -> str: ...
    def get_xml_fragment(self) -> list[XmlFragment]: ...
    def get_value_name(self) -> str: ...
