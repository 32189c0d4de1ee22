# streamta/logconfig.py
"""
Logging setup for applications embedding streamta.

Library modules only create loggers; nothing is configured on import.
"""

import logging
import sys

from .config import LOG_LEVELS, settings
from .errors import ConfigError


def configure_logging(level: str | None = None, force: bool = False) -> None:
    """
    Configure root logger with console output.

    By default, this is non-destructive: if the root logger already has handlers,
    it will do nothing (assuming the application has configured logging).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to
            STREAMTA_LOG_LEVEL from the environment.
        force: If True, clear existing handlers and force this configuration

    Raises:
        ConfigError: If the level is not a known logging level
    """
    root_logger = logging.getLogger()

    if root_logger.hasHandlers() and not force:
        return

    if level is None:
        settings.validate()
        level = settings.log_level
    elif level.upper() not in LOG_LEVELS:
        raise ConfigError(f"log level must be one of {', '.join(LOG_LEVELS)}, got '{level}'")

    root_logger.setLevel(level.upper())

    if force:
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
