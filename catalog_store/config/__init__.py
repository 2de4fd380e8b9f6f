"""Configuration module."""

from catalog_store.config.configuration import (
    AppConfig,
    ConfigurationError,
    LoggingConfig,
    StorageConfig,
    get_config,
    get_environment,
    load_config,
    reset_config,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "LoggingConfig",
    "StorageConfig",
    "get_config",
    "get_environment",
    "load_config",
    "reset_config",
]
