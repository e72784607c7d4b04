# flexport/adapters/exporters/__init__.py

"""Output generation and export functionality"""

# Local imports
from flexport.adapters.exporters.base_exporter import Exporter
from flexport.adapters.exporters.csv_exporter import CSVExporter
from flexport.adapters.exporters.csv_exporter import CSVItem
from flexport.adapters.exporters.csv_exporter import CSV_COLUMNS
from flexport.adapters.exporters.xml_exporter import XMLExporter
from flexport.adapters.exporters.xml_exporter import XMLItem

__all__: list[str] = [
    "CSV_COLUMNS",
    "CSVExporter",
    "CSVItem",
    "Exporter",
    "XMLExporter",
    "XMLItem",
]
