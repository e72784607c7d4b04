# flexport/adapters/exporters/csv_exporter.py

"""CSV export of item pages"""

# Standard library imports
from collections.abc import Sequence
from collections.abc import Set as AbstractSet
from csv import writer
from io import StringIO
from logging import getLogger

# Local imports
from flexport.adapters.exporters.base_exporter import Exporter
from flexport.core.domain.enums import ExportType
from flexport.core.domain.item import Item
from flexport.core.domain.keyed import Attribute
from flexport.core.errors import InvalidConfigurationError
from flexport.core.types.protocols import CSVRow
from flexport.core.types.protocols import CSVWriter
from flexport.infrastructure.config import ConfigLoader
from flexport.shared.utils.text_utils import sanitize_csv_value

logger = getLogger(__name__)

# Fixed columns, always in this order before any property columns
CSV_COLUMNS: tuple[str, ...] = (
    "id",
    "ordernumber",
    "name",
    "summary",
    "description",
    "price",
    "url",
    "image",
    "attributes",
    "keywords",
    "groups",
    "bonus",
    "sales_frequency",
    "date_added",
    "sort",
)


def _attribute_cell(attribute: Attribute, usergroups: AbstractSet[str]) -> str:
    # Default attributes stay visible in every usergroup context
    fragments = [attribute.get_csv_fragment()]
    if usergroups:
        fragments.append(attribute.get_csv_fragment(usergroups))
    return "&".join(fragment for fragment in fragments if fragment)


def build_csv_row(
    item: Item, csv_properties: Sequence[str], usergroups: AbstractSet[str] = frozenset()
) -> CSVRow:
    """Flatten an item into one CSV row

    Args:
        item: Item to render
        csv_properties: Property keys rendered as extra columns, in order
        usergroups: Usergroup context used to resolve usergroup-scoped values

    Returns:
        Sanitised cells matching CSV_COLUMNS followed by csv_properties
    """
    attribute_cells = (_attribute_cell(attr, usergroups) for attr in item.attributes.values())
    attributes = "&".join(cell for cell in attribute_cells if cell)
    row = [
        item.id,
        item.ordernumbers.get_csv_fragment(usergroups),
        item.names.get_csv_fragment(usergroups),
        item.summaries.get_csv_fragment(usergroups),
        item.descriptions.get_csv_fragment(usergroups),
        item.prices.get_csv_fragment(usergroups),
        item.urls.get_csv_fragment(usergroups),
        item.images.get_csv_fragment(usergroups),
        attributes,
        item.keywords.get_csv_fragment(usergroups),
        item.usergroups.get_csv_fragment(),
        item.bonuses.get_csv_fragment(usergroups),
        item.sales_frequencies.get_csv_fragment(usergroups),
        item.dates_added.get_csv_fragment(usergroups),
        item.sorts.get_csv_fragment(usergroups),
    ]
    for key in csv_properties:
        prop = item.properties.get(key)
        row.append(prop.get_csv_fragment(usergroups) if prop is not None else "")

    return [sanitize_csv_value(cell) for cell in row]


class CSVItem(Item):
    """Item created by the CSV exporter"""

    __slots__ = ()

    def to_csv_row(
        self, csv_properties: Sequence[str], usergroups: AbstractSet[str] = frozenset()
    ) -> CSVRow:
        return build_csv_row(self, csv_properties, usergroups)


class CSVExporter(Exporter):
    """Export item pages as delimiter-separated rows, one item per row

    The page window is not part of the output. Usergroup-scoped values are
    flattened to the configured usergroup context.
    """

    export_type = ExportType.CSV

    def __init__(
        self,
        items_per_page: int,
        csv_properties: Sequence[str] | None = None,
        usergroups: AbstractSet[str] | None = None,
        config: ConfigLoader | None = None,
    ):
        """Initialize the exporter

        Args:
            items_per_page: Number of items exported at once
            csv_properties: Property keys exported as extra columns
            usergroups: Usergroup context, None for the configured one
            config: Configuration to use, None for the default configuration

        Raises:
            InvalidConfigurationError: If property columns repeat or clash
                with a fixed column
        """
        super().__init__(items_per_page, config)
        self.csv_properties = self._validate_properties(list(csv_properties or []))
        self.usergroups = frozenset(
            usergroups if usergroups is not None else self.config.csv.usergroups
        )

    @staticmethod
    def _validate_properties(csv_properties: list[str]) -> list[str]:
        seen: set[str] = set()
        for name in csv_properties:
            if name in CSV_COLUMNS:
                raise InvalidConfigurationError(
                    f"CSV property '{name}' clashes with a fixed column"
                )
            if name in seen:
                raise InvalidConfigurationError(f"CSV property '{name}' is listed twice")
            seen.add(name)
        return csv_properties

    @property
    def header(self) -> CSVRow:
        return [*CSV_COLUMNS, *self.csv_properties]

    def create_item(self, item_id: str) -> Item:
        return CSVItem(item_id)

    def file_name(self, start: int, count: int) -> str:
        return self.config.output.csv_file_name

    def serialize_items(self, items: Sequence[Item], start: int, count: int, total: int) -> str:
        # start, count and total are not part of the CSV format
        self._warn_on_overfull_page(items, count)
        return self._render(items, include_header=True)

    def _serialize_page(self, items: Sequence[Item], start: int, count: int, total: int) -> str:
        # Later pages are appended to the file of the first one
        self._warn_on_overfull_page(items, count)
        return self._render(items, include_header=start == 0)

    def _appends_to_existing_file(self, start: int) -> bool:
        return start > 0

    def _render(self, items: Sequence[Item], include_header: bool) -> str:
        buffer = StringIO()
        csv_writer: CSVWriter = writer(
            buffer, delimiter=self.config.csv.delimiter, lineterminator="\n"
        )
        if include_header:
            csv_writer.writerow(self.header)
        for item in items:
            csv_writer.writerow(build_csv_row(item, self.csv_properties, self.usergroups))

        logger.debug(f"Serialized {len(items)} items to CSV")
        return buffer.getvalue()
