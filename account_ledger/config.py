"""
Configuration Management Module

Logging settings from LEDGER_ environment variables (and an optional .env
file) via pydantic-settings. The ledger itself has no settings.
"""

import logging

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerConfig(BaseSettings):
    """Account ledger configuration"""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: str = "json"  # json or text

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {v!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return fmt


# Global configuration instance, created on first use
config = None
# Validation error from the last load, if defaults had to be used
config_error = None


def _load() -> LedgerConfig:
    global config_error
    try:
        loaded = LedgerConfig()
        config_error = None
    except ValidationError as e:
        # Bad logging settings are never fatal; run with defaults
        loaded = LedgerConfig.model_construct()
        config_error = e
    return loaded


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    global config
    if config is None:
        config = _load()
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = _load()
    return config


def report_config_error(logger: logging.Logger) -> None:
    """Warn about settings that were replaced by defaults"""
    if config_error is None:
        return
    for error in config_error.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        logger.warning(f"Ignoring invalid setting {field}: {error.get('msg')}; using default")
