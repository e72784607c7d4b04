# flexport/shared/utils/text_utils.py

"""Text sanitising for serialized output"""

# Standard library imports
from re import compile

# Characters outside the XML 1.0 Char production (control characters,
# lone surrogates and the two non-characters U+FFFE/U+FFFF)
_ILLEGAL_XML_CHARACTERS = compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

# Tabs and line breaks would split a CSV cell or row
_CSV_BREAKING_WHITESPACE = compile(r"[\t\r\n]+")


def remove_illegal_xml_characters(text: str) -> str:
    """Strip characters that cannot appear in an XML 1.0 document

    Args:
        text: Text to be placed in an element or attribute

    Returns:
        Text with all illegal characters removed
    """
    if not text:
        return ""
    return _ILLEGAL_XML_CHARACTERS.sub("", text)


def sanitize_csv_value(text: str) -> str:
    """Collapse tabs and line breaks to single spaces and trim the result

    Args:
        text: Cell content

    Returns:
        Single-line cell content
    """
    if not text:
        return ""
    return _CSV_BREAKING_WHITESPACE.sub(" ", text).strip()
