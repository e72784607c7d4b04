# flexport/core/domain/keyed.py

"""Properties identified by a merchant-defined key"""

# Standard library imports
from urllib.parse import quote

# Local imports
from flexport.core.domain.multi_value import MultiValue
from flexport.core.domain.multi_value import UsergroupAwareMultiValue
from flexport.core.domain.values import RawValue
from flexport.core.domain.values import Value
from flexport.core.errors import InvalidValueError


def _require_key(key: str, kind: str) -> str:
    if not key or not key.strip():
        raise InvalidValueError(f"{kind} key must not be empty")
    return key


class Attribute(MultiValue):
    """Filterable attribute such as a category or color with one or more values

    In CSV each value becomes an URL-encoded key=value pair; pairs are joined
    with "&".
    """

    __slots__ = ("key",)

    def __init__(self, key: str, values: list[Value | RawValue] | None = None):
        super().__init__("attribute", "attribute", "&", Value, value_tag="value")
        self.key = _require_key(key, "Attribute")
        for value in values or []:
            self.add_value(value)

    def _csv_value(self, value: Value) -> str:
        return f"{quote(self.key, safe='')}={quote(value.get_csv_fragment(), safe='')}"

    def _xml_key(self) -> str | None:
        return self.key


class Property(UsergroupAwareMultiValue):
    """Free-form data the search service passes through to the shop, one value per usergroup

    Properties listed in the CSV exporter's property columns are rendered
    as extra columns; in XML every property is exported.
    """

    __slots__ = ("key",)

    def __init__(self, key: str):
        super().__init__("property", "property", "|", Value, value_tag="value")
        self.key = _require_key(key, "Property")

    def _xml_key(self) -> str | None:
        return self.key
