"""Data models module."""

from catalog_store.models.error_kind import ErrorKind
from catalog_store.models.product import REQUIRED_FIELDS, Product

__all__ = ["ErrorKind", "Product", "REQUIRED_FIELDS"]
