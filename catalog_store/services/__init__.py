"""Service modules."""

from catalog_store.services.catalog_service import CatalogStore

__all__ = ["CatalogStore"]
