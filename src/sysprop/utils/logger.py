"""Logger configuration with console and optional file handlers."""

import logging
from datetime import datetime
from pathlib import Path

from sysprop.utils.env_utils import get_optional_property

# Handlers this module attached to the root logger
_handlers: list[logging.Handler] = []


def log_file_name(day=None):
    """Daily log file name, e.g. ``sysprop_2025-01-31.log``."""
    day = day or datetime.now()
    return f"sysprop_{day.strftime('%Y-%m-%d')}.log"


def configure_logging():
    """(Re)attach root handlers from the current environment.

    Replaces any handlers installed by a previous call, so a .env file
    loaded after import can still set ``SYSPROP_LOG_DIR``.
    """
    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    root_logger.setLevel(logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)  # Only INFO and above go to console
    console_handler.setFormatter(logging.Formatter('%(levelname)-8s | %(message)s'))
    _handlers.append(console_handler)

    # File logging only when a directory is configured
    log_dir = get_optional_property("SYSPROP_LOG_DIR")
    if log_dir:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(logs_dir / log_file_name(), encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s | %(message)s')
        )
        _handlers.append(file_handler)

    for handler in _handlers:
        root_logger.addHandler(handler)


def get_logger(name):
    """Get a logger with the specified name."""
    if not _handlers:
        configure_logging()
    logger = logging.getLogger(name)

    if get_optional_property("DEBUG_SYSPROP") == "1":
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    return logger


def get_cli_logger():
    """Get logger for the property checker."""
    return get_logger("cli")
