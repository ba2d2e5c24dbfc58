"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation using Pydantic Settings.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- IntentsConfig: Signing secret and lifetime of shareable entity intents
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("tunelink.log")
    real_time_debug: bool = True


class IntentsConfig(BaseModel):
    """Signing and expiry of serialized entity intents."""

    secret: str = ""
    lifetime: int = 600  # seconds, 0 disables expiry


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: CONSOLE_LOG_LEVEL, INTENTS_SECRET
    - Nested: LOGGING__CONSOLE_LEVEL, INTENTS__SECRET

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Nested configuration groups
    logging: LoggingConfig = LoggingConfig()
    intents: IntentsConfig = IntentsConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat keys (INTENTS_SECRET) onto the nested groups (intents.secret)."""
        if not isinstance(data, dict):
            return data

        transformed = {}

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        intents_mapping = {
            "intents_secret": "secret",
            "intents_lifetime": "lifetime",
        }
        for env_key, field_key in intents_mapping.items():
            if env_key in data:
                transformed.setdefault("intents", {})[field_key] = data.pop(env_key)

        # Flat keys win over the defaults of a partially given group
        for group, values in transformed.items():
            existing = data.get(group)
            if isinstance(existing, dict):
                data[group] = {**existing, **values}
            else:
                data[group] = values

        return data


# Singleton instance for application use
settings = Settings()


# Flat key access
_LEGACY_KEY_MAP = {
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "LOG_REAL_TIME_DEBUG": lambda: settings.logging.real_time_debug,
    "INTENTS_SECRET": lambda: settings.intents.secret,
    "INTENTS_LIFETIME": lambda: settings.intents.lifetime,
}


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Example:
        >>> lifetime = get_config("INTENTS_LIFETIME", 600)
    """
    if key in _LEGACY_KEY_MAP:
        return _LEGACY_KEY_MAP[key]()
    return default
