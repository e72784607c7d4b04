# flexport/adapters/exporters/base_exporter.py

"""Exporter factory and the contract shared by all export formats"""

# Standard library imports
from abc import ABC
from abc import abstractmethod
from collections.abc import Sequence
from logging import getLogger
from pathlib import Path
from time import time

# Local imports
from flexport.core.domain.enums import ExportType
from flexport.core.domain.item import Item
from flexport.core.errors import InvalidConfigurationError
from flexport.infrastructure.config import ConfigLoader
from flexport.infrastructure.logging import log_export_summary
from flexport.shared.mixins.mixins import ConfigurableMixin
from flexport.shared.utils.file_utils import ensure_writable_directory
from flexport.shared.utils.file_utils import write_atomic

logger = getLogger(__name__)


class Exporter(ConfigurableMixin, ABC):
    """Base class for all export formats

    Exporters are stateless between calls: every serialization works only on
    the items passed in. Use Exporter.create to obtain a concrete exporter.
    """

    export_type: ExportType

    def __init__(self, items_per_page: int, config: ConfigLoader | None = None):
        """Initialize the exporter

        Args:
            items_per_page: Number of items exported at once. Respecting this
                is at the discretion of the caller and the implementation.
            config: Configuration to use, None for the default configuration
        """
        self.items_per_page = items_per_page
        self.config = self._init_config(config)

    @staticmethod
    def create(
        export_type: ExportType | int,
        items_per_page: int = 20,
        csv_properties: Sequence[str] | None = None,
        config: ConfigLoader | None = None,
    ) -> "Exporter":
        """Create an exporter for the desired output format

        Args:
            export_type: ExportType.XML or ExportType.CSV
            items_per_page: Number of items exported at once, at least 1
            csv_properties: Property keys exported as extra CSV columns; no
                effect for XML
            config: Configuration to use, None for the default configuration

        Returns:
            The exporter for the desired output format

        Raises:
            InvalidConfigurationError: If items_per_page is below 1 or the
                export type is unknown
        """
        if items_per_page < 1:
            raise InvalidConfigurationError("At least one item must be exported per page.")

        try:
            resolved_type = ExportType(export_type)
        except ValueError:
            raise InvalidConfigurationError(
                f"Unsupported exporter type: {export_type!r}"
            ) from None

        # Local imports
        from flexport.adapters.exporters._registry import EXPORTER_FACTORIES

        factory = EXPORTER_FACTORIES[resolved_type]
        exporter = factory(items_per_page, list(csv_properties or []), config)
        logger.debug(
            f"Created {resolved_type.name} exporter with {items_per_page} items per page"
        )
        return exporter

    @staticmethod
    def from_config(config: ConfigLoader | None = None) -> "Exporter":
        """Create the exporter described by the export section of a configuration"""
        # Local imports
        from flexport.infrastructure.config import get_config

        if config is None:
            config = get_config()
        return Exporter.create(
            config.export.type,
            config.export.items_per_page,
            config.csv.properties,
            config=config,
        )

    @abstractmethod
    def serialize_items(self, items: Sequence[Item], start: int, count: int, total: int) -> str:
        """Turn the provided items into their serialized form

        Args:
            items: Items to serialize. All of them are serialized, regardless
                of start and total.
            start: Assuming that items is a fragment of the total, the global
                index of the first item in items
            count: Number of items requested for this export step. The actual
                number can be smaller due to errors, but never greater.
            total: Global total of items that could be exported

        Returns:
            The items in serialized form
        """

    @abstractmethod
    def create_item(self, item_id: str) -> Item:
        """Create an export format-specific item instance

        Args:
            item_id: Unique ID of the item

        Returns:
            The newly created item
        """

    @abstractmethod
    def file_name(self, start: int, count: int) -> str:
        """Name of the file a page is written to"""

    def serialize_items_to_file(
        self,
        target_directory: str | Path,
        items: Sequence[Item],
        start: int,
        count: int,
        total: int,
    ) -> str:
        """Like serialize_items(), but the output is written to a file

        Args:
            target_directory: Existing, writable directory for the file. The
                file name is chosen by the exporter.
            items: Items to serialize
            start: Global index of the first item in items
            count: Number of items requested for this export step
            total: Global total of items that could be exported

        Returns:
            Absolute path of the written file

        Raises:
            OSError: If the directory is missing or not writable, or writing fails
        """
        start_time = time()
        directory = ensure_writable_directory(target_directory)
        target = (directory / self.file_name(start, count)).resolve()

        content = self._serialize_page(items, start, count, total)
        write_atomic(
            target,
            content,
            encoding=self._file_encoding(),
            append=self._appends_to_existing_file(start),
        )

        log_export_summary(
            self.export_type,
            str(target),
            len(items),
            start,
            count,
            total,
            start_time,
            time(),
        )
        return str(target)

    def _serialize_page(self, items: Sequence[Item], start: int, count: int, total: int) -> str:
        """Content written by serialize_items_to_file for one page"""
        return self.serialize_items(items, start, count, total)

    def _appends_to_existing_file(self, start: int) -> bool:
        return False

    def _file_encoding(self) -> str:
        return "utf-8"

    def _warn_on_overfull_page(self, items: Sequence[Item], count: int) -> None:
        """Log when a caller passes more items than it requested"""
        if len(items) > count:
            logger.warning(
                f"Serializing {len(items)} items although only {count} were requested; "
                f"the requested count is probably ignored when generating items"
            )
        if len(items) > self.items_per_page:
            logger.debug(f"Page of {len(items)} items exceeds {self.items_per_page} items per page")
