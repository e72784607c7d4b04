# flexport/shared/utils/__init__.py

"""Shared utility functions for text sanitising and file output"""

# Local imports
from flexport.shared.utils.file_utils import ensure_writable_directory
from flexport.shared.utils.file_utils import write_atomic
from flexport.shared.utils.text_utils import remove_illegal_xml_characters
from flexport.shared.utils.text_utils import sanitize_csv_value

__all__ = [
    # File utilities
    "ensure_writable_directory",
    "write_atomic",
    # Text utilities
    "remove_illegal_xml_characters",
    "sanitize_csv_value",
]
