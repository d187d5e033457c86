"""Configuration loading and validation for datebucket."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from datebucket.config.schema import (
    DateBucketConfig,
    GeneralConfig,
    LoggingConfig,
    ScanConfig,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration error."""

    pass


class ConfigLoader:
    """Loads configuration from YAML files."""

    DEFAULT_CONFIG_PATHS = [
        Path("datebucket.yaml"),
        Path("datebucket.yml"),
        Path(".datebucket/config.yaml"),
        Path(".datebucket/config.yml"),
    ]

    VALID_LEVELS = ["debug", "info", "warning", "error", "critical"]

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> DateBucketConfig:
        """
        Load configuration.

        Priority:
        1. Explicit config_path argument
        2. Default config paths (first found)
        3. Built-in defaults

        Args:
            config_path: Optional explicit path to config file

        Returns:
            DateBucketConfig object

        Raises:
            ConfigError: If config file cannot be read or parsed
        """
        config_dict: dict[str, Any] = {}

        if config_path:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_path}")
            config_dict = cls._load_yaml(config_path)
        else:
            for default_path in cls.DEFAULT_CONFIG_PATHS:
                if default_path.exists():
                    logger.info(f"Loading config from {default_path}")
                    config_dict = cls._load_yaml(default_path)
                    break

        return cls._build_config(config_dict)

    @classmethod
    def _load_yaml(cls, path: Path) -> dict[str, Any]:
        """Load YAML file and return dict."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config root in {path} must be a mapping")
        return data

    @classmethod
    def _build_config(cls, data: dict[str, Any]) -> DateBucketConfig:
        """Build DateBucketConfig from dictionary."""
        try:
            return DateBucketConfig(
                version=str(data.get("version", "1.0")),
                general=cls._build_general(data.get("general") or {}),
                scan=cls._build_scan(data.get("scan") or {}),
                logging=cls._build_logging(data.get("logging") or {}),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config value: {e}")

    @classmethod
    def _build_general(cls, data: dict[str, Any]) -> GeneralConfig:
        """Build GeneralConfig from dictionary."""
        config = GeneralConfig()
        if "max_attempts" in data:
            config.max_attempts = int(data["max_attempts"])
        if "dry_run_default" in data:
            config.dry_run_default = bool(data["dry_run_default"])
        return config

    @classmethod
    def _build_scan(cls, data: dict[str, Any]) -> ScanConfig:
        """Build ScanConfig from dictionary."""
        config = ScanConfig()
        if "fallback_to_ctime" in data:
            config.fallback_to_ctime = bool(data["fallback_to_ctime"])
        return config

    @classmethod
    def _build_logging(cls, data: dict[str, Any]) -> LoggingConfig:
        """Build LoggingConfig from dictionary."""
        config = LoggingConfig()
        if "level" in data:
            config.level = str(data["level"])
        if "color_output" in data:
            config.color_output = bool(data["color_output"])
        if "log_to_file" in data:
            config.log_to_file = bool(data["log_to_file"])
        if "file_path" in data:
            config.file_path = str(data["file_path"])
        return config

    @classmethod
    def validate(cls, config: DateBucketConfig) -> list[str]:
        """
        Validate configuration and return list of errors.

        Args:
            config: Configuration to validate

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []

        if config.general.max_attempts < 1:
            errors.append("max_attempts must be at least 1")

        if config.logging.level.lower() not in cls.VALID_LEVELS:
            errors.append(f"Invalid logging level: {config.logging.level}")

        return errors
