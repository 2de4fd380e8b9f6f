import logging

from catalog_store.config import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """Configure root logging from the logging section of the app config."""
    logging.basicConfig(level=config.level, format=config.format)
