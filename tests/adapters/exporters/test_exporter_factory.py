# tests/adapters/exporters/test_exporter_factory.py

"""Tests for Exporter.create and the exporter lookup table"""

# Third party imports
from pytest import mark
from pytest import raises

# Local imports
from flexport.adapters.exporters._registry import EXPORTER_FACTORIES
from flexport.adapters.exporters.base_exporter import Exporter
from flexport.adapters.exporters.csv_exporter import CSVExporter
from flexport.adapters.exporters.csv_exporter import CSVItem
from flexport.adapters.exporters.xml_exporter import XMLExporter
from flexport.adapters.exporters.xml_exporter import XMLItem
from flexport.core.domain.enums import ExportType
from flexport.core.domain.item import Item
from flexport.core.errors import InvalidConfigurationError
from flexport.infrastructure.config import ConfigLoader


class TestExporterCreate:
    """Test exporter construction through the factory"""

    def test_create_xml_exporter(self, default_config):
        exporter = Exporter.create(ExportType.XML, config=default_config)
        assert isinstance(exporter, XMLExporter)
        assert exporter.items_per_page == 20
        assert exporter.export_type is ExportType.XML

    def test_create_csv_exporter_with_properties(self, default_config):
        exporter = Exporter.create(ExportType.CSV, 10, ["sale", "delivery"], config=default_config)
        assert isinstance(exporter, CSVExporter)
        assert exporter.items_per_page == 10
        assert exporter.csv_properties == ["sale", "delivery"]

    def test_plain_integer_export_type(self, default_config):
        assert isinstance(Exporter.create(1, 5, [], config=default_config), CSVExporter)
        assert isinstance(Exporter.create(0, 5, [], config=default_config), XMLExporter)

    def test_csv_properties_ignored_for_xml(self, default_config):
        exporter = Exporter.create(ExportType.XML, 10, ["sale"], config=default_config)
        assert isinstance(exporter, XMLExporter)

    @mark.parametrize("items_per_page", [0, -1])
    def test_rejects_empty_pages(self, items_per_page):
        with raises(InvalidConfigurationError, match="At least one item"):
            Exporter.create(ExportType.CSV, items_per_page, [])

    @mark.parametrize("export_type", [999, -1, 2])
    def test_rejects_unknown_export_type(self, export_type):
        with raises(InvalidConfigurationError, match="Unsupported exporter type"):
            Exporter.create(export_type, 20, [])

    def test_configuration_errors_are_value_errors(self):
        with raises(ValueError):
            Exporter.create(999, 20, [])

    @mark.parametrize("properties", [["sale", "sale"], ["price"], ["id", "sale"]])
    def test_rejects_unusable_property_columns(self, default_config, properties):
        with raises(InvalidConfigurationError):
            Exporter.create(ExportType.CSV, 20, properties, config=default_config)

    def test_every_export_type_has_a_factory(self):
        assert set(EXPORTER_FACTORIES) == set(ExportType)

    def test_base_class_is_abstract(self, default_config):
        with raises(TypeError):
            Exporter(20, config=default_config)


class TestExporterFromConfig:
    """Test building exporters from configuration"""

    def test_defaults_build_xml_exporter(self, default_config):
        exporter = Exporter.from_config(default_config)
        assert isinstance(exporter, XMLExporter)
        assert exporter.items_per_page == 20
        assert exporter.config is default_config

    def test_csv_settings_are_applied(self):
        config = ConfigLoader.from_dict(
            {
                "export": {"type": "csv", "items_per_page": 5},
                "csv": {"properties": ["sale"], "usergroups": ["B2B"]},
            }
        )
        exporter = Exporter.from_config(config)

        assert isinstance(exporter, CSVExporter)
        assert exporter.items_per_page == 5
        assert exporter.csv_properties == ["sale"]
        assert exporter.usergroups == frozenset({"B2B"})


class TestCreateItem:
    """Test format-specific item creation"""

    @mark.parametrize(
        "export_type,item_class",
        [(ExportType.XML, XMLItem), (ExportType.CSV, CSVItem)],
    )
    def test_create_item(self, default_config, export_type, item_class):
        item = Exporter.create(export_type, config=default_config).create_item("123")
        assert isinstance(item, item_class)
        assert isinstance(item, Item)
        assert item.id == "123"
