"""Configuration management for datebucket."""

from datebucket.config.loader import ConfigError, ConfigLoader
from datebucket.config.schema import DateBucketConfig

__all__ = ["ConfigError", "ConfigLoader", "DateBucketConfig"]
