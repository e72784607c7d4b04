# flexport/core/types/__init__.py

"""Shared type definitions"""

# Local imports
from flexport.core.types.fragments import XmlFragment
from flexport.core.types.fragments import XmlValue
from flexport.core.types.protocols import CSVRow
from flexport.core.types.protocols import CSVWriter
from flexport.core.types.protocols import FragmentRenderable

__all__ = ["CSVRow", "CSVWriter", "FragmentRenderable", "XmlFragment", "XmlValue"]
