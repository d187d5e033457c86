"""Configuration schema definitions for datebucket."""

from dataclasses import dataclass, field

from datebucket.utils.constants import DEFAULT_MAX_ATTEMPTS


@dataclass
class GeneralConfig:
    """General configuration settings."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    dry_run_default: bool = False


@dataclass
class ScanConfig:
    """Scan-specific configuration settings."""

    # Use st_ctime when the platform has no real creation time
    fallback_to_ctime: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration settings."""

    level: str = "info"
    color_output: bool = True
    log_to_file: bool = False
    file_path: str = ".datebucket/datebucket.log"


@dataclass
class DateBucketConfig:
    """Root configuration object for datebucket."""

    version: str = "1.0"
    general: GeneralConfig = field(default_factory=GeneralConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
