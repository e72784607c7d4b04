# flexport/adapters/exporters/xml_exporter.py

"""XML export of item pages"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Sequence
from logging import getLogger
import xml.etree.ElementTree as ET

# Local imports
from flexport.adapters.exporters.base_exporter import Exporter
from flexport.core.domain.enums import ExportType
from flexport.core.domain.item import Item
from flexport.core.domain.multi_value import MultiValue
from flexport.core.types.fragments import XmlValue
from flexport.core.types.protocols import FragmentRenderable
from flexport.shared.utils.text_utils import remove_illegal_xml_characters

logger = getLogger(__name__)

XML_SCHEMA_VERSION = "1.0"


def _usergroup_attributes(usergroup: str) -> dict[str, str]:
    return {"usergroup": remove_illegal_xml_characters(usergroup)} if usergroup else {}


def _value_element(value: XmlValue, usergroup: str = "") -> ET.Element:
    attributes = {
        name: remove_illegal_xml_characters(text) for name, text in value.attributes.items()
    }
    attributes.update(_usergroup_attributes(usergroup))
    element = ET.Element(value.tag, attributes)
    element.text = remove_illegal_xml_characters(value.text)
    return element


def build_collection_element(collection: FragmentRenderable) -> ET.Element:
    """Render one multi-valued property, one fragment per usergroup bucket

    Nested fragments become a bucket element (e.g. <ordernumbers usergroup="x">)
    wrapping the values; flat fragments put the usergroup on every value
    element (e.g. <name usergroup="x">).
    """
    root = ET.Element(collection.get_value_name())
    for fragment in collection.get_xml_fragment():
        if fragment.nested:
            bucket = ET.SubElement(root, fragment.name, _usergroup_attributes(fragment.usergroup))
            for value in fragment.values:
                bucket.append(_value_element(value))
        else:
            for value in fragment.values:
                root.append(_value_element(value, fragment.usergroup))
    return root


def build_keyed_element(
    root_name: str, bucket_name: str, entries: Iterable[MultiValue], wrap_values: bool
) -> ET.Element:
    """Render keyed properties grouped into one bucket element per usergroup

    Args:
        root_name: Name of the enclosing element (e.g. "allAttributes")
        bucket_name: Name of each usergroup bucket (e.g. "attributes")
        entries: Keyed properties to render
        wrap_values: Put the values of an entry inside a <values> element
    """
    root = ET.Element(root_name)
    buckets: dict[str, ET.Element] = {}
    for entry in entries:
        for fragment in entry.get_xml_fragment():
            bucket = buckets.get(fragment.usergroup)
            if bucket is None:
                bucket = ET.SubElement(
                    root, bucket_name, _usergroup_attributes(fragment.usergroup)
                )
                buckets[fragment.usergroup] = bucket

            entry_element = ET.SubElement(bucket, fragment.name)
            ET.SubElement(entry_element, "key").text = remove_illegal_xml_characters(
                fragment.key or ""
            )
            container = ET.SubElement(entry_element, "values") if wrap_values else entry_element
            for value in fragment.values:
                container.append(_value_element(value))
    return root


def build_item_element(item: Item) -> ET.Element:
    """Render one item with every collection, empty ones included"""
    item_element = ET.Element("item", {"id": remove_illegal_xml_characters(item.id)})
    for collection in item.value_collections():
        item_element.append(build_collection_element(collection))
    item_element.append(
        build_keyed_element("allAttributes", "attributes", item.attributes.values(), True)
    )
    item_element.append(
        build_keyed_element("allProperties", "properties", item.properties.values(), False)
    )
    return item_element


class XMLItem(Item):
    """Item created by the XML exporter"""

    __slots__ = ()

    def to_xml_element(self) -> ET.Element:
        return build_item_element(self)


class XMLExporter(Exporter):
    """Export item pages as XML documents

    The page window (start, count, total) is embedded as attributes of the
    <items> element so the indexing service can request the next page.
    """

    export_type = ExportType.XML

    def create_item(self, item_id: str) -> Item:
        return XMLItem(item_id)

    def file_name(self, start: int, count: int) -> str:
        return self.config.output.xml_file_name_template.format(start=start, count=count)

    def serialize_items(self, items: Sequence[Item], start: int, count: int, total: int) -> str:
        self._warn_on_overfull_page(items, count)

        root = ET.Element("findologic", {"version": XML_SCHEMA_VERSION})
        items_element = ET.SubElement(
            root, "items", {"start": str(start), "count": str(count), "total": str(total)}
        )
        for item in items:
            items_element.append(build_item_element(item))

        if self.config.xml.pretty_print:
            ET.indent(root)

        logger.debug(f"Serialized {len(items)} items to XML (start={start}, total={total})")
        encoding = self.config.xml.encoding
        declaration = f'<?xml version="1.0" encoding="{encoding}"?>\n'
        # Characters the encoding cannot represent become character references
        body = ET.tostring(root, encoding=encoding, xml_declaration=False).decode(encoding)
        return declaration + body + "\n"

    def _file_encoding(self) -> str:
        return self.config.xml.encoding
