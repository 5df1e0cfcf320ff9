"""
Application Configuration - Central configuration management.

This module provides configuration management for the application,
including environment variables and runtime settings for logging and
event publication.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMAT_TYPES = ("text", "json")
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    format_type: str = "text"
    file: str | None = None
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
            format_type=os.getenv("LOG_FORMAT_TYPE", "text").lower(),
            file=file_path if file_path else None,
            max_bytes=int(os.getenv("LOG_MAX_BYTES", "10485760")),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        )


@dataclass
class EventConfig:
    """Service order event publication settings."""

    enabled: bool = True
    channel: str = "service-orders"

    @classmethod
    def from_env(cls) -> "EventConfig":
        """Create configuration from environment variables."""
        return cls(
            enabled=os.getenv("EVENTS_ENABLED", "true").lower() == "true",
            channel=os.getenv("EVENTS_CHANNEL", "service-orders"),
        )


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    environment: Environment = Environment.DEVELOPMENT
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    events: EventConfig = field(default_factory=EventConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "format_type": self.logging.format_type,
                "file": self.logging.file,
                "max_bytes": self.logging.max_bytes,
                "backup_count": self.logging.backup_count,
            },
            "events": {
                "enabled": self.events.enabled,
                "channel": self.events.channel,
            },
        }

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises exception otherwise
        """
        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.logging.level}")
        if self.logging.format_type not in VALID_LOG_FORMAT_TYPES:
            raise ValueError(f"Invalid log format type: {self.logging.format_type}")
        if self.logging.max_bytes < 0:
            raise ValueError("Log max bytes cannot be negative")
        if self.logging.backup_count < 0:
            raise ValueError("Log backup count cannot be negative")

        if self.events.enabled and not self.events.channel:
            raise ValueError("Event channel required when events are enabled")

        return True


# Global configuration singleton
_config: ApplicationConfig | None = None


def get_config() -> ApplicationConfig:
    """
    Get the application configuration singleton.

    Returns:
        ApplicationConfig: The application configuration
    """
    global _config
    if _config is None:
        from workshop.application.config_loader import ConfigLoader

        _config = ConfigLoader.from_env()
    return _config


def set_config(config: ApplicationConfig) -> None:
    """
    Set the application configuration.

    Args:
        config: The new configuration
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the configuration singleton."""
    global _config
    _config = None
