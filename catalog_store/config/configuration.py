"""Configuration module for the catalog store.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml
- APP_ENV=test → config_test.yaml
- Default      → config.yaml

Every setting has a default, so a missing config file is not an error.
Environment variables (optionally from a .env file) override the file:
- CATALOG_STORAGE_PATH → storage.path
- CATALOG_LOG_LEVEL    → logging.level
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from catalog_store/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable."""
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from the environment-specific config file."""
    config_path = _get_project_root() / _get_config_filename()

    if not config_path.exists():
        return {}

    with open(config_path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping.")
    return data


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


@dataclass(frozen=True)
class StorageConfig:
    """Catalog file configuration."""
    path: str
    atomic_writes: bool
    indent: int


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str
    format: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    storage: StorageConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If a setting has an invalid value.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    # Build Storage config
    storage_section = yaml_config.get("storage") or {}

    atomic_writes = storage_section.get("atomic_writes", True)
    if not isinstance(atomic_writes, bool):
        raise ConfigurationError(f"storage.atomic_writes must be true or false, got {atomic_writes!r}")

    indent = storage_section.get("indent", 2)
    if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
        raise ConfigurationError(f"storage.indent must be a non-negative integer, got {indent!r}")

    storage_config = StorageConfig(
        path=_get_optional_env("CATALOG_STORAGE_PATH") or storage_section.get("path", "products.json"),
        atomic_writes=atomic_writes,
        indent=indent,
    )

    # Build Logging config
    logging_section = yaml_config.get("logging") or {}

    level = (_get_optional_env("CATALOG_LOG_LEVEL") or logging_section.get("level", "INFO")).upper()
    if level not in _VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{level}'. Expected one of: {', '.join(_VALID_LOG_LEVELS)}."
        )

    logging_config = LoggingConfig(
        level=level,
        format=logging_section.get("format", DEFAULT_LOG_FORMAT),
    )

    return AppConfig(
        storage=storage_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.
    Config file is selected based on APP_ENV environment variable.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If a setting has an invalid value.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_environment() -> str:
    """Get current environment name.

    Returns:
        'dev', 'test', or 'default' based on APP_ENV.
    """
    app_env = os.environ.get("APP_ENV", "").lower()
    return app_env if app_env in ("dev", "test") else "default"


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _config
    _config = None
