"""
Configuration models and data structures.

This module defines the configuration models used by the command-line host,
providing validation for configuration values.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

SUPPORTED_PLATFORMS = ("android", "ios", "desktop")

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_directory: str = "logs"
    max_file_size: str = "10MB"
    backup_count: int = 5
    console_enabled: bool = True
    file_enabled: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.level, str):
            raise ValueError(f"Log level must be a string, got {self.level!r}")
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got {self.level}")
        if self.backup_count < 0:
            raise ValueError(
                f"Backup count must not be negative, got {self.backup_count}")


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    name: str = "Shared DI"
    version: str = "0.1.0"
    debug: bool = False
    environment: str = "production"

    # Native module selection and optional platform name override
    platform: str = "desktop"
    platform_name: Optional[str] = None

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    config_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.platform, str):
            raise ValueError(f"Platform must be a string, got {self.platform!r}")
        self.platform = self.platform.lower()
        if self.platform not in SUPPORTED_PLATFORMS:
            raise ValueError(
                f"Platform must be one of {', '.join(SUPPORTED_PLATFORMS)}, got {self.platform}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary."""
        logging_config = LoggingConfig(**data.get('logging', {}))

        return cls(
            name=data.get('name', 'Shared DI'),
            version=data.get('version', '0.1.0'),
            debug=data.get('debug', False),
            environment=data.get('environment', 'production'),
            platform=data.get('platform', 'desktop'),
            platform_name=data.get('platform_name'),
            logging=logging_config,
            config_file_path=data.get('config_file_path'),
        )
