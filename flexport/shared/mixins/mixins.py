# flexport/shared/mixins/mixins.py

"""Mixins shared by the exporters"""

# Local imports
from flexport.infrastructure.config import ConfigLoader
from flexport.infrastructure.config import get_config


class ConfigurableMixin:
    """Gives a class the process-wide configuration unless it is handed its own"""

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """Return config, or the default configuration when config is None"""
        return config if config is not None else get_config()
