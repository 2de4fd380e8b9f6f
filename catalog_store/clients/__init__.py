"""Client modules for catalog storage."""

from catalog_store.clients.json_file_client import JsonFileClient

__all__ = ["JsonFileClient"]
