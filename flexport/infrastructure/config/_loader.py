# flexport/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from flexport.infrastructure.config._models import AppConfig
from flexport.infrastructure.config._models import CSVConfig
from flexport.infrastructure.config._models import ExportConfig
from flexport.infrastructure.config._models import LoggingConfig
from flexport.infrastructure.config._models import OutputConfig
from flexport.infrastructure.config._models import XMLConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader giving typed access to each config section"""

    def __init__(self, config_path: str | None = None, app_config: AppConfig | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
            app_config: Already validated configuration; skips file loading
        """
        self.config_path = config_path
        self._app_config = app_config if app_config is not None else AppConfig.load(config_path)

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "ConfigLoader":
        """Build a loader from an in-memory configuration dictionary"""
        return cls(app_config=AppConfig.from_dict(data))

    # Direct access to Pydantic config objects
    @property
    def config(self) -> dict[str, object]:
        """Full config as a JSON-compatible dict"""
        return self._app_config.to_dict()

    @property
    def export(self) -> ExportConfig:
        """Exporter selection and paging"""
        return self._app_config.export

    @property
    def csv(self) -> CSVConfig:
        """CSV output configuration"""
        return self._app_config.csv

    @property
    def xml(self) -> XMLConfig:
        """XML output configuration"""
        return self._app_config.xml

    @property
    def output(self) -> OutputConfig:
        """File output configuration"""
        return self._app_config.output

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config


def reset_config() -> None:
    """Forget the cached default configuration so the next get_config() reloads it"""
    global _default_config
    _default_config = None
