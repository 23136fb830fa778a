"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from swedish_holidays.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

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
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}") from e

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
            raise ValueError(f"Error parsing YAML config file: {e}") from e

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

        if "holidays" in config:
            hol = config["holidays"] or {}
            if "language" in hol:
                result["default_language"] = hol["language"]
            if "timezone" in hol:
                result["reference_timezone"] = hol["timezone"]

        if "cache" in config:
            cache = config["cache"] or {}
            if "prefetch" in cache:
                result["prefetch_enabled"] = cache["prefetch"]
            if "years_before" in cache:
                result["prefetch_years_before"] = cache["years_before"]
            if "years_after" in cache:
                result["prefetch_years_after"] = cache["years_after"]

        if "output" in config:
            out = config["output"] or {}
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        if "api" in config:
            api = config["api"] or {}
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - SWEDISH_HOLIDAYS_LANGUAGE -> default_language
        - SWEDISH_HOLIDAYS_TIMEZONE -> reference_timezone
        - SWEDISH_HOLIDAYS_PREFETCH -> prefetch_enabled
        - SWEDISH_HOLIDAYS_PREFETCH_BEFORE -> prefetch_years_before
        - SWEDISH_HOLIDAYS_PREFETCH_AFTER -> prefetch_years_after
        - SWEDISH_HOLIDAYS_OUTPUT_FORMAT -> output_format
        - SWEDISH_HOLIDAYS_OUTPUT_DIRECTORY -> output_directory
        - SWEDISH_HOLIDAYS_API_HOST -> api_host
        - SWEDISH_HOLIDAYS_API_PORT -> api_port

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "SWEDISH_HOLIDAYS_LANGUAGE": "default_language",
            "SWEDISH_HOLIDAYS_TIMEZONE": "reference_timezone",
            "SWEDISH_HOLIDAYS_PREFETCH": ("prefetch_enabled", self._parse_bool),
            "SWEDISH_HOLIDAYS_PREFETCH_BEFORE": ("prefetch_years_before", int),
            "SWEDISH_HOLIDAYS_PREFETCH_AFTER": ("prefetch_years_after", int),
            "SWEDISH_HOLIDAYS_OUTPUT_FORMAT": "output_format",
            "SWEDISH_HOLIDAYS_OUTPUT_DIRECTORY": "output_directory",
            "SWEDISH_HOLIDAYS_API_HOST": "api_host",
            "SWEDISH_HOLIDAYS_API_PORT": ("api_port", int),
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
            else:
                config_dict[mapping] = env_value

        return config_dict

    def _parse_bool(self, value: str) -> bool:
        """Parse a boolean from string."""
        return value.lower() in ("true", "1", "yes", "on")

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "holidays": {
                "language": config.default_language.value,
                "timezone": config.reference_timezone,
            },
            "cache": {
                "prefetch": config.prefetch_enabled,
                "years_before": config.prefetch_years_before,
                "years_after": config.prefetch_years_after,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
