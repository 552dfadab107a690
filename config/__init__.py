"""
Configuration Module for the Weighing Slip Parser.

This module provides centralized configuration management using YAML files.
Thresholds and tolerances used by the parsing core are bound once into an
immutable ParserSettings value and handed to each component at construction.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class ConfigurationManager:
    """
    Centralized configuration management for the weighing slip parser.

    This class handles loading and providing access to all configuration
    parameters defined in settings.yaml.

    Attributes:
        config_path (Path): Path to the configuration file.
        config (Dict): Loaded configuration dictionary.

    Example:
        >>> config = ConfigurationManager()
        >>> threshold = config.get("parser.fuzzy_match_threshold")
        >>> tolerance = config.get("parser.validation.weight_tolerance")
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        """
        Singleton pattern to ensure only one configuration instance exists.

        Args:
            config_path: Optional path to configuration file.

        Returns:
            ConfigurationManager instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to configuration file.
                        Defaults to config/settings.yaml.
        """
        if self._initialized:
            return

        if config_path is None:
            self.config_path = Path(__file__).parent / "settings.yaml"
        else:
            self.config_path = Path(config_path)

        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.

        Raises:
            FileNotFoundError: If configuration file doesn't exist.
            yaml.YAMLError: If configuration file is invalid.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}"
            )

        with open(self.config_path, 'r', encoding='utf-8') as f:
            self._config = yaml.safe_load(f) or {}

        self._resolve_paths()

    def _resolve_paths(self) -> None:
        """
        Resolve relative paths in configuration to absolute paths.
        Uses the current working directory as base directory.
        """
        base_dir = Path.cwd()

        if 'paths' in self._config:
            for key, value in self._config['paths'].items():
                if value and not Path(value).is_absolute():
                    self._config['paths'][key] = str(base_dir / value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., "parser.position.y_tolerance").
            default: Default value if key doesn't exist.

        Returns:
            Configuration value or default.

        Example:
            >>> config.get("parser.fuzzy_match_threshold")
            0.8
            >>> config.get("nonexistent.key", "default_value")
            "default_value"
        """
        keys = key.split('.')
        value = self._config

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_all(self) -> Dict[str, Any]:
        """
        Get the complete configuration dictionary.

        Returns:
            Complete configuration dictionary.
        """
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    @classmethod
    def reset(cls) -> None:
        """
        Reset the singleton instance.
        Useful for testing or configuration changes.
        """
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get configuration values.

    Args:
        key: Configuration key in dot notation.
        default: Default value if key doesn't exist.

    Returns:
        Configuration value or default.
    """
    return ConfigurationManager().get(key, default)


@dataclass(frozen=True)
class ParserSettings:
    """
    Immutable parser configuration shared by the parsing components.

    Attributes:
        fuzzy_match_threshold: Minimum similarity (0.0-1.0) for a fuzzy keyword hit.
        y_tolerance: Maximum vertical distance (px) for two words to share a row.
        x_min_offset: Minimum gap (px) between a label's right edge and its value.
        weight_tolerance: Allowed |(gross - tare) - net| discrepancy in kg.
    """
    fuzzy_match_threshold: float = 0.8
    y_tolerance: int = 80
    x_min_offset: int = 50
    weight_tolerance: float = 10.0

    def __post_init__(self):
        # Imported lazily: the exceptions module lives in the package
        from weighslip.utils.exceptions import ConfigurationError

        if not 0.0 <= self.fuzzy_match_threshold <= 1.0:
            raise ConfigurationError(
                "parser.fuzzy_match_threshold",
                f"must be between 0.0 and 1.0, got {self.fuzzy_match_threshold}"
            )
        for key, value in (
            ("parser.position.y_tolerance", self.y_tolerance),
            ("parser.position.x_min_offset", self.x_min_offset),
            ("parser.validation.weight_tolerance", self.weight_tolerance),
        ):
            if value < 0:
                raise ConfigurationError(key, f"must not be negative, got {value}")

    @classmethod
    def from_config(cls, config: Optional[ConfigurationManager] = None) -> 'ParserSettings':
        """
        Bind parser settings from the YAML configuration.

        Missing keys fall back to the dataclass defaults.

        Args:
            config: Configuration manager. If None, uses the singleton.

        Returns:
            ParserSettings instance.

        Raises:
            ConfigurationError: If a value is null, not numeric or out of range.
        """
        config = config or ConfigurationManager()
        return cls(
            fuzzy_match_threshold=_read_number(
                config, "parser.fuzzy_match_threshold", cls.fuzzy_match_threshold, float
            ),
            y_tolerance=_read_number(
                config, "parser.position.y_tolerance", cls.y_tolerance, int
            ),
            x_min_offset=_read_number(
                config, "parser.position.x_min_offset", cls.x_min_offset, int
            ),
            weight_tolerance=_read_number(
                config, "parser.validation.weight_tolerance", cls.weight_tolerance, float
            ),
        )


def _read_number(config: ConfigurationManager, key: str, default: Any, convert) -> Any:
    """Read a numeric setting; a key present with a null value is an error."""
    from weighslip.utils.exceptions import ConfigurationError

    value = config.get(key, default)
    if value is None:
        raise ConfigurationError(key, "value is null")
    try:
        return convert(value)
    except (TypeError, ValueError):
        raise ConfigurationError(key, f"expected a number, got {value!r}")


__all__ = ['ConfigurationManager', 'get_config', 'ParserSettings']
