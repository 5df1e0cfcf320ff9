"""
Configuration Loader - Handles IO operations for configuration management.

This module is responsible for loading and saving configuration from/to
various sources (YAML files, environment variables) while keeping the
ApplicationConfig class focused on data representation and validation.
"""

import os

import yaml

from workshop.application.config import (
    ApplicationConfig,
    Environment,
    EventConfig,
    LoggingConfig,
)


class ConfigLoader:
    """Handles loading and saving of configuration from various sources."""

    @classmethod
    def from_env(cls) -> ApplicationConfig:
        """
        Create configuration from environment variables.

        Returns:
            ApplicationConfig: Configuration loaded from environment
        """
        env_str = os.getenv("ENVIRONMENT", "development")
        try:
            environment = Environment(env_str)
        except ValueError:
            raise ValueError(f"Invalid environment: {env_str}")

        return ApplicationConfig(
            environment=environment,
            logging=LoggingConfig.from_env(),
            events=EventConfig.from_env(),
        )

    @classmethod
    def from_yaml(cls, path: str) -> ApplicationConfig:
        """
        Load configuration from YAML file.

        Missing sections and keys fall back to the dataclass defaults.

        Args:
            path: Path to YAML configuration file

        Returns:
            ApplicationConfig: Configuration loaded from YAML file
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        config = ApplicationConfig()

        # Handle empty or null YAML files
        if not data:
            return config

        if "environment" in data:
            config.environment = Environment(data["environment"])

        if "logging" in data:
            log_data = data["logging"] or {}
            config.logging = LoggingConfig(
                level=str(log_data.get("level", config.logging.level)).upper(),
                format=log_data.get("format", config.logging.format),
                format_type=log_data.get("format_type", config.logging.format_type),
                file=log_data.get("file", config.logging.file),
                max_bytes=log_data.get("max_bytes", config.logging.max_bytes),
                backup_count=log_data.get("backup_count", config.logging.backup_count),
            )

        if "events" in data:
            event_data = data["events"] or {}
            config.events = EventConfig(
                enabled=event_data.get("enabled", config.events.enabled),
                channel=event_data.get("channel", config.events.channel),
            )

        return config

    @classmethod
    def to_yaml(cls, config: ApplicationConfig) -> str:
        """
        Convert configuration to YAML string.

        Args:
            config: ApplicationConfig instance to convert

        Returns:
            str: YAML representation of the configuration
        """
        return yaml.dump(config.to_dict(), default_flow_style=False)

    @classmethod
    def save_to_yaml(cls, config: ApplicationConfig, path: str) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: ApplicationConfig instance to save
            path: Path to save the YAML file to
        """
        yaml_content = cls.to_yaml(config)
        with open(path, "w") as f:
            f.write(yaml_content)
