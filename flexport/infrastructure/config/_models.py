# flexport/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from codecs import lookup
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from flexport.core.domain.enums import ExportType
from flexport.core.errors import InvalidConfigurationError

logger = getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"


class ExportConfig(BaseModel):
    """Exporter selection and paging"""

    type: ExportType = Field(ExportType.XML, description="Output format (xml or csv)")
    items_per_page: int = Field(20, gt=0, description="Items exported per page (advisory)")

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, v: object) -> object:
        """Accept format names as well as their numeric values"""
        if isinstance(v, str):
            if v.strip().isdigit():
                return int(v)
            return ExportType.from_name(v)
        return v


class CSVConfig(BaseModel):
    """CSV output configuration"""

    properties: list[str] = Field(
        default_factory=list, description="Property keys exported as extra columns"
    )
    usergroups: list[str] = Field(
        default_factory=list, description="Usergroup context used to flatten values"
    )
    delimiter: str = Field("\t", min_length=1, max_length=1, description="Column delimiter")

    @field_validator("properties")
    @classmethod
    def validate_unique(cls, v: list[str]) -> list[str]:
        """Property columns must be unique"""
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate CSV property columns: {', '.join(duplicates)}")
        return v


class XMLConfig(BaseModel):
    """XML output configuration"""

    pretty_print: bool = Field(True, description="Indent the XML document")
    encoding: str = Field("utf-8", min_length=1, description="Encoding of written files")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Encoding must be known to the codec registry"""
        try:
            lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding '{v}'") from e
        return v


class OutputConfig(BaseModel):
    """File output configuration"""

    csv_file_name: str = Field("findologic.csv", min_length=1, description="CSV export file")
    xml_file_name_template: str = Field(
        "findologic_{start}_{count}.xml",
        min_length=1,
        description="XML page file name; {start} and {count} are substituted",
    )

    @field_validator("xml_file_name_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Template may only reference start and count"""
        try:
            v.format(start=0, count=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Invalid file name template '{v}': {e}") from e
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    export: ExportConfig = Field(default_factory=ExportConfig)
    csv: CSVConfig = Field(default_factory=CSVConfig)
    xml: XMLConfig = Field(default_factory=XMLConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "AppConfig":
        """Validate configuration given as a dictionary

        Raises:
            InvalidConfigurationError: If any value fails validation
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Read a JSON configuration file, falling back to defaults

        Without a path, ./config.json is used when present. A missing,
        unreadable or invalid file is logged as a warning and yields the
        default configuration.

        Args:
            config_path: JSON file to read, None for ./config.json

        Returns:
            Validated AppConfig instance
        """
        # Standard library imports
        import json

        if config_path is None:
            default_path = Path(DEFAULT_CONFIG_FILE)
            if not default_path.exists():
                return cls()
            config_path = default_path
        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        except (OSError, ValueError) as e:
            # Covers JSON syntax errors and pydantic ValidationError
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-compatible dictionary"""
        return self.model_dump(mode="json")
