"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from working_days.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # (section, key) in the YAML file -> Config field
    YAML_MAPPINGS = {
        ("holiday_api", "url"): "holiday_api_url",
        ("holiday_api", "timeout"): "request_timeout",
        ("calendar", "min_year"): "min_year",
        ("calendar", "year_margin"): "year_margin",
        ("display", "language"): "language",
        ("output", "format"): "output_format",
        ("output", "directory"): "output_directory",
        ("api", "host"): "api_host",
        ("api", "port"): "api_port",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        # 1. Load from YAML file
        config_dict = self._load_yaml()

        # 2. Apply environment variable overrides
        config_dict = self._apply_env_overrides(config_dict)

        # 3. Validate and create Config object
        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}")

        logger.debug(f"Loaded config from: {config_path}")
        return self._flatten_config(config) if config else {}

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}
        for (section, key), field in self.YAML_MAPPINGS.items():
            values = config.get(section)
            if isinstance(values, dict) and key in values:
                result[field] = values[key]
        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - WORKDAYS_HOLIDAY_API_URL -> holiday_api_url
        - WORKDAYS_REQUEST_TIMEOUT -> request_timeout
        - WORKDAYS_MIN_YEAR -> min_year
        - WORKDAYS_YEAR_MARGIN -> year_margin
        - WORKDAYS_LANGUAGE -> language
        - WORKDAYS_OUTPUT_FORMAT -> output_format
        - WORKDAYS_OUTPUT_DIRECTORY -> output_directory
        - WORKDAYS_API_HOST -> api_host
        - WORKDAYS_API_PORT -> api_port

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "WORKDAYS_HOLIDAY_API_URL": "holiday_api_url",
            "WORKDAYS_REQUEST_TIMEOUT": ("request_timeout", float),
            "WORKDAYS_MIN_YEAR": ("min_year", int),
            "WORKDAYS_YEAR_MARGIN": ("year_margin", int),
            "WORKDAYS_LANGUAGE": "language",
            "WORKDAYS_OUTPUT_FORMAT": "output_format",
            "WORKDAYS_OUTPUT_DIRECTORY": "output_directory",
            "WORKDAYS_API_HOST": "api_host",
            "WORKDAYS_API_PORT": ("api_port", int),
        }

        for env_var, mapping in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")
                    continue
            else:
                config_key = mapping
                config_dict[config_key] = env_value
            logger.debug(f"Override from env: {env_var} -> {config_key}")

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict: Dict[str, Dict[str, Any]] = {}
        for (section, key), field in self.YAML_MAPPINGS.items():
            config_dict.setdefault(section, {})[key] = getattr(config, field)

        # Ensure directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration to: {output_path}")
