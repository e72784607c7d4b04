# flexport/infrastructure/logging/_setup.py

"""Logging configuration and export summaries"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from pathlib import Path

# Local imports
from flexport.core.domain.enums import ExportType
from flexport.infrastructure.config import LoggingConfig

LOG_DIRECTORY = "logs"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_default_log_path() -> str:
    """Timestamped log file below ./logs, creating the directory on demand"""
    Path(LOG_DIRECTORY).mkdir(parents=True, exist_ok=True)
    return f"{LOG_DIRECTORY}/flexport_{datetime.now():%Y%m%d_%H%M%S}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Route flexport log records to the console and a log file

    Any handlers already attached to the root logger are replaced, so calling
    this twice does not duplicate output.

    Args:
        log_file: Log file path; a timestamped file under logs/ when None
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR); unknown
            names mean INFO
        silent: Do not log to the console
        disable_file_logging: Do not log to a file

    Returns:
        The log file path, or None without file logging
    """
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    if disable_file_logging:
        return None

    if log_file is None:
        log_file = get_default_log_path()

    file_handler = FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(DEBUG)
    file_handler.setFormatter(Formatter(FILE_FORMAT))
    root_logger.addHandler(file_handler)
    # The file receives debug records even when the console is quieter
    root_logger.setLevel(DEBUG)

    getLogger(__name__).info(f"Logging to file: {log_file}")
    return log_file


def set_up_logging_from_config(
    config: LoggingConfig, silent: bool = False, disable_file_logging: bool = False
) -> str | None:
    """Apply the logging section of the configuration

    Args:
        config: Logging section; debug selects DEBUG on the console and
            log_file overrides the default log path
        silent: Do not log to the console
        disable_file_logging: Do not log to a file

    Returns:
        The log file path, or None without file logging
    """
    return set_up_logging(
        log_file=config.log_file,
        log_level="DEBUG" if config.debug else "INFO",
        silent=silent,
        disable_file_logging=disable_file_logging,
    )


def log_export_summary(
    export_type: ExportType,
    output_path: str,
    items_exported: int,
    start: int,
    count: int,
    total: int,
    start_time: float,
    end_time: float,
) -> None:
    """Log one block describing a written export page

    Args:
        export_type: Format of the written file
        output_path: Path of the written file
        items_exported: Number of items serialized into the page
        start: Global index of the first item of the page
        count: Number of items requested for the page
        total: Global number of exportable items
        start_time: Time serialization started
        end_time: Time the file was in place
    """
    elapsed = end_time - start_time
    rate = items_exported / elapsed if elapsed > 0 else 0

    end = start + items_exported
    window = f"{start:,}-{end - 1:,}" if items_exported else f"empty at {start:,}"
    progress = f"{min(end, total) / total * 100:.1f}%" if total > 0 else "n/a"

    rule = "=" * 60
    getLogger(__name__).info(
        "\n".join(
            [
                rule,
                f"{export_type.name} EXPORT PAGE WRITTEN",
                rule,
                f"Items exported: {items_exported:,} (requested {count:,})",
                f"Window: {window} of {total:,} ({progress})",
                f"Serialization time: {elapsed:.3f}s ({rate:.0f} items/second)",
                f"Output: {output_path}",
                rule,
            ]
        )
    )
