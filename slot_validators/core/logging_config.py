"""
Centralized logging configuration.

The package itself only creates loggers; handlers are installed by the
application (or the bundled CLI) through ``setup_logging``.
"""

import logging
import sys
from typing import Optional
from pathlib import Path

PACKAGE_LOGGER = 'slot_validators'

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Library default: stay silent until an application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    level: str = 'INFO',
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Configure logging for an application using the validators.

    Log records go to stderr so that stdout stays free for command output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses default if None)
        log_file: Optional log file path
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=format_string,
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_from_settings(settings) -> None:
    """
    Configure logging from settings object.

    Args:
        settings: Settings object with log_level, log_format and log_file
    """
    setup_logging(
        level=settings.log_level,
        format_string=settings.log_format,
        log_file=settings.log_file
    )
