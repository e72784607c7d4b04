# flexport/core/domain/item.py

"""Core Item domain entity"""

# Local imports
from flexport.core.domain.collections import AllImages
from flexport.core.domain.collections import AllKeywords
from flexport.core.domain.collections import AllOrdernumbers
from flexport.core.domain.collections import Usergroups
from flexport.core.domain.enums import ImageType
from flexport.core.domain.keyed import Attribute
from flexport.core.domain.keyed import Property
from flexport.core.domain.multi_value import MultiValue
from flexport.core.domain.multi_value import UsergroupAwareMultiValue
from flexport.core.domain.values import Bonus
from flexport.core.domain.values import DateAdded
from flexport.core.domain.values import Description
from flexport.core.domain.values import Image
from flexport.core.domain.values import Keyword
from flexport.core.domain.values import Name
from flexport.core.domain.values import Ordernumber
from flexport.core.domain.values import Price
from flexport.core.domain.values import RawValue
from flexport.core.domain.values import SalesFrequency
from flexport.core.domain.values import Sort
from flexport.core.domain.values import Summary
from flexport.core.domain.values import Url
from flexport.core.domain.values import Usergroup
from flexport.core.domain.values import Value
from flexport.core.errors import InvalidValueError


def _single_value_field(name: str, value_type: type[Value]) -> UsergroupAwareMultiValue:
    """Field holding at most one value per usergroup, rendered flat in XML"""
    return UsergroupAwareMultiValue(name, value_type.XML_TAG, "|", value_type)


class Item:
    """Core domain entity representing one exportable catalog entry

    This is a plain data holder. Exporters read it through the fragment
    methods of its collections; format-specific subclasses are created by
    Exporter.create_item.
    """

    __slots__ = (
        "_id",
        # Single value per usergroup
        "names",
        "summaries",
        "descriptions",
        "prices",
        "urls",
        "bonuses",
        "sales_frequencies",
        "dates_added",
        "sorts",
        # Multi-valued collections
        "ordernumbers",
        "keywords",
        "images",
        "usergroups",
        # Keyed collections
        "attributes",
        "properties",
    )

    def __init__(self, item_id: str):
        item_id = str(item_id)
        if not item_id.strip():
            raise InvalidValueError("Item id must not be empty")
        self._id = item_id

        self.names = _single_value_field("names", Name)
        self.summaries = _single_value_field("summaries", Summary)
        self.descriptions = _single_value_field("descriptions", Description)
        self.prices = _single_value_field("prices", Price)
        self.urls = _single_value_field("urls", Url)
        self.bonuses = _single_value_field("bonuses", Bonus)
        self.sales_frequencies = _single_value_field("salesFrequencies", SalesFrequency)
        self.dates_added = _single_value_field("dateAddeds", DateAdded)
        self.sorts = _single_value_field("sorts", Sort)

        self.ordernumbers = AllOrdernumbers()
        self.keywords = AllKeywords()
        self.images = AllImages()
        self.usergroups = Usergroups()

        self.attributes: dict[str, Attribute] = {}
        self.properties: dict[str, Property] = {}

    @property
    def id(self) -> str:
        """Unique ID of the item within an export"""
        return self._id

    # Single-valued fields
    def set_name(self, name: Name | RawValue, usergroup: str = "") -> None:
        self.names.set_value(name, usergroup)

    def set_summary(self, summary: Summary | RawValue, usergroup: str = "") -> None:
        self.summaries.set_value(summary, usergroup)

    def set_description(self, description: Description | RawValue, usergroup: str = "") -> None:
        self.descriptions.set_value(description, usergroup)

    def set_price(self, price: Price | RawValue, usergroup: str = "") -> None:
        self.prices.set_value(price, usergroup)

    def set_url(self, url: Url | RawValue, usergroup: str = "") -> None:
        self.urls.set_value(url, usergroup)

    def set_bonus(self, bonus: Bonus | RawValue, usergroup: str = "") -> None:
        self.bonuses.set_value(bonus, usergroup)

    def set_sales_frequency(
        self, sales_frequency: SalesFrequency | RawValue, usergroup: str = ""
    ) -> None:
        self.sales_frequencies.set_value(sales_frequency, usergroup)

    def set_date_added(self, date_added: DateAdded | RawValue, usergroup: str = "") -> None:
        self.dates_added.set_value(date_added, usergroup)

    def set_sort(self, sort: Sort | RawValue, usergroup: str = "") -> None:
        self.sorts.set_value(sort, usergroup)

    # Multi-valued collections
    def add_ordernumber(self, ordernumber: Ordernumber | RawValue) -> None:
        self.ordernumbers.add_ordernumber(ordernumber)

    def add_keyword(self, keyword: Keyword | RawValue, usergroup: str = "") -> None:
        self.keywords.add_keyword(keyword, usergroup)

    def add_image(
        self,
        image: Image | RawValue,
        image_type: ImageType | str = ImageType.DEFAULT,
        usergroup: str = "",
    ) -> None:
        if not isinstance(image, Image):
            image = Image(image, image_type, usergroup)
        self.images.add_image(image, usergroup)

    def add_usergroup(self, usergroup: Usergroup | RawValue) -> None:
        self.usergroups.add_usergroup(usergroup)

    # Keyed collections
    def add_attribute(self, key: str, value: Value | RawValue, usergroup: str = "") -> None:
        """Append a value to the attribute with this key, creating it if needed"""
        if key not in self.attributes:
            self.attributes[key] = Attribute(key)
        self.attributes[key].add_value(value, usergroup)

    def set_property(self, key: str, value: Value | RawValue, usergroup: str = "") -> None:
        """Set the value of a property for one usergroup, creating the property if needed"""
        if key not in self.properties:
            self.properties[key] = Property(key)
        self.properties[key].set_value(value, usergroup)

    def value_collections(self) -> list[MultiValue]:
        """Unkeyed collections in serialization order"""
        return [
            self.ordernumbers,
            self.names,
            self.summaries,
            self.descriptions,
            self.prices,
            self.urls,
            self.bonuses,
            self.sales_frequencies,
            self.dates_added,
            self.sorts,
            self.keywords,
            self.images,
            self.usergroups,
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
