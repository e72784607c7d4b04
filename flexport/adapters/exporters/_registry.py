# flexport/adapters/exporters/_registry.py

"""Lookup table from export type to exporter constructor"""

# Standard library imports
from collections.abc import Callable

# Local imports
from flexport.adapters.exporters.base_exporter import Exporter
from flexport.adapters.exporters.csv_exporter import CSVExporter
from flexport.adapters.exporters.xml_exporter import XMLExporter
from flexport.core.domain.enums import ExportType
from flexport.infrastructure.config import ConfigLoader

type ExporterFactory = Callable[[int, list[str], ConfigLoader | None], Exporter]


def _create_xml_exporter(
    items_per_page: int, csv_properties: list[str], config: ConfigLoader | None
) -> Exporter:
    # CSV property columns have no meaning for XML
    return XMLExporter(items_per_page, config=config)


def _create_csv_exporter(
    items_per_page: int, csv_properties: list[str], config: ConfigLoader | None
) -> Exporter:
    return CSVExporter(items_per_page, csv_properties, config=config)


EXPORTER_FACTORIES: dict[ExportType, ExporterFactory] = {
    ExportType.XML: _create_xml_exporter,
    ExportType.CSV: _create_csv_exporter,
}
