"""Logging setup for chaincmd.

Chain components log through a logger bound to the ``command_chain`` channel
so the optional log file only receives chain-related records.
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from chaincmd.config.schemas import LoggingConfig

CHANNEL = "command_chain"

SIMPLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
DETAILED_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def get_logger():
    """Get the logger bound to the command chain channel."""
    return logger.bind(channel=CHANNEL)


def _is_chain_record(record) -> bool:
    return record["extra"].get("channel") == CHANNEL


def setup_logging(config: "LoggingConfig", verbose: bool = False, quiet: bool = False) -> None:
    """Configure loguru sinks from the logging configuration.

    Args:
        config: Logging section of the application configuration
        verbose: Force DEBUG level on the console
        quiet: Force ERROR level on the console
    """
    # Remove default logger
    logger.remove()

    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    else:
        level = config.level

    format_string = SIMPLE_FORMAT if config.format == "simple" else DETAILED_FORMAT
    logger.add(sys.stderr, level=level, format=format_string, colorize=None)

    if config.file_output:
        config.file_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.file_dir / config.file_name,
            format=DETAILED_FORMAT,
            level=config.level,
            rotation=config.rotation,
            retention=config.retention,
            filter=_is_chain_record,
        )
        logger.debug(f"Logging command chain records to {config.file_dir / config.file_name}")
