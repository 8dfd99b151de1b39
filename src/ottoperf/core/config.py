"""Configuration loader for YAML files.

This module provides configuration loading with support for nested access,
defaults, and merging user settings over the built-in defaults.

Typical usage example:
    from ottoperf.core.config import ConfigLoader

    config = ConfigLoader.defaults()
    config.merge(ConfigLoader.load("ottoperf.yaml"))
    units = config.get("display.units", default="imperial")
"""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "display": {
        "units": "imperial",
    },
    "defaults": {
        "pressure_altitude_ft": 0.0,
        "temperature_c": 15.0,
        "weight_lbs": 2325.0,
        "wind_component_kts": 0.0,
    },
    "logging": {
        "config": None,
        "use_platform_dir": True,
        "console_level": "WARNING",
    },
}


class ConfigError(Exception):
    """Raised when configuration operations fail."""


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base.

    Nested mappings are merged key by key; any other override value
    replaces the base value.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and merging for configuration.

    Examples:
        >>> config = ConfigLoader.load("ottoperf.yaml")
        >>> weight = config.get("defaults.weight_lbs", default=2325.0)
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def defaults(cls) -> "ConfigLoader":
        """Create a loader holding a copy of the built-in settings."""
        return cls(copy.deepcopy(DEFAULT_SETTINGS))

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded or is not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Supports nested access like "display.units".

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        keys = key.split(".")
        value = self._data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Args:
            other: ConfigLoader to merge from.

        Note:
            Other config values override existing ones.
        """
        self._data = merge_dicts(self._data, other._data)
