# streamta/config.py
"""
Configuration management for the streamta library.

Settings are loaded from environment variables or a .env file.

Optional environment variables:
    STREAMTA_LOG_LEVEL  - Logging level used by configure_logging (default: INFO)

Indicator parameters can be kept in a YAML file and loaded with
load_indicator_config():

    rsi:
      period: 14
    bollinger:
      period: 20
      multiplier: 2.0
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

log = logging.getLogger(__name__)

cwd_env = Path.cwd() / ".env"
if cwd_env.exists():
    load_dotenv(dotenv_path=cwd_env)
else:
    # Fallback to standard behavior (searches parents)
    load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Global settings for the streamta library.

    Values are loaded from environment variables on initialization.
    Users can override these programmatically if needed:

        from streamta.config import settings
        settings.log_level = "DEBUG"
    """

    log_level: str = "INFO"

    def __post_init__(self):
        """
        Refresh values from environment after load_dotenv has run.
        This allows the global 'settings' instance to be populated correctly.
        """
        self.log_level = os.getenv("STREAMTA_LOG_LEVEL", self.log_level)

    def validate(self) -> None:
        """
        Validate settings.

        Raises:
            ConfigError: If a setting has an unsupported value
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"STREAMTA_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got '{self.log_level}'"
            )


def load_indicator_config(config_path: str | Path) -> dict[str, dict[str, Any]]:
    """
    Load indicator parameters from a YAML file.

    The file must map indicator names to mappings of constructor keyword
    arguments. Parameter values are not checked here; indicator constructors
    validate them.

    Args:
        config_path: Path to YAML config file

    Returns:
        Dictionary of indicator name -> keyword arguments

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is empty, not valid YAML, or has the wrong shape
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        raise ConfigError(f"Empty config file: {config_path}")

    if not isinstance(config, dict):
        raise ConfigError(
            f"{config_path} must map indicator names to parameters, "
            f"got {type(config).__name__}"
        )

    parameters: dict[str, dict[str, Any]] = {}
    for name, params in config.items():
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ConfigError(
                f"Parameters for '{name}' in {config_path} must be a mapping, "
                f"got {type(params).__name__}"
            )
        parameters[str(name)] = dict(params)

    log.debug("Loaded parameters for %d indicator(s) from %s", len(parameters), config_path)
    return parameters


# Global settings instance - loaded when module is imported
settings = Settings()
