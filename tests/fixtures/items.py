# tests/fixtures/items.py

"""Shared item fixtures and builders for tests"""

# Third party imports
import pytest

# Local imports
from flexport.core.domain.enums import ImageType
from flexport.core.domain.item import Item


class ItemBuilder:
    """Builder pattern for creating test items with sensible defaults"""

    @staticmethod
    def shirt(item_id: str = "123", item_class: type[Item] = Item) -> Item:
        """The minimal item used by the end-to-end checks

        Args:
            item_id: ID of the item
            item_class: Item class to instantiate (e.g. CSVItem or XMLItem)

        Returns:
            Item named "Shirt" with the ordernumbers SKU1 and SKU2
        """
        item = item_class(item_id)
        item.set_name("Shirt")
        item.add_ordernumber("SKU1")
        item.add_ordernumber("SKU2")
        return item

    @staticmethod
    def full_item(item_id: str = "42", item_class: type[Item] = Item) -> Item:
        """Item with every field set, including usergroup-specific values"""
        item = item_class(item_id)
        item.add_ordernumber("SKU-42")
        item.add_ordernumber("4006381333931")
        item.set_name("Wool Jumper")
        item.set_name("Wool Jumper (trade)", usergroup="B2B")
        item.set_summary("Warm jumper")
        item.set_description("Knitted from\tmerino wool.\nMachine washable.")
        item.set_price(49.9)
        item.set_price("39.90", usergroup="B2B")
        item.set_url("https://shop.example/jumper")
        item.set_bonus(3)
        item.set_sales_frequency(12)
        item.set_date_added("2024-03-01T08:30:00")
        item.set_sort(7)
        item.add_keyword("jumper")
        item.add_keyword("wool")
        item.add_keyword("bulk", usergroup="B2B")
        item.add_image("https://cdn.example/jumper.jpg")
        item.add_image("https://cdn.example/jumper_small.jpg", ImageType.THUMBNAIL)
        item.add_usergroup("B2B")
        item.add_attribute("cat", "Clothing")
        item.add_attribute("cat", "Sale")
        item.add_attribute("color", "red & blue")
        item.set_property("sale", "1")
        item.set_property("sale", "0", usergroup="B2B")
        item.set_property("delivery", "2 days")
        return item

    @staticmethod
    def batch_items(count: int = 3, item_class: type[Item] = Item) -> list[Item]:
        """Create a batch of simple items with consecutive IDs"""
        items = []
        for i in range(count):
            item = item_class(f"item-{i:03d}")
            item.set_name(f"Test Item {i + 1}")
            item.add_ordernumber(f"SKU-{i:03d}")
            item.set_price(f"{10 + i}.00")
            items.append(item)
        return items


@pytest.fixture
def item_builder():
    """Fixture providing the ItemBuilder for tests"""
    return ItemBuilder


@pytest.fixture
def shirt_item() -> Item:
    return ItemBuilder.shirt()


@pytest.fixture
def full_item() -> Item:
    return ItemBuilder.full_item()
