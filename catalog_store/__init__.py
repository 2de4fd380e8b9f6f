"""File-backed product catalog store."""

from catalog_store.exceptions import (
    CatalogError,
    DuplicateCodeError,
    DuplicateIdError,
    NotFoundError,
    ParseError,
    ValidationError,
)
from catalog_store.models import ErrorKind, Product
from catalog_store.services import CatalogStore

__all__ = [
    "CatalogError",
    "CatalogStore",
    "DuplicateCodeError",
    "DuplicateIdError",
    "ErrorKind",
    "NotFoundError",
    "ParseError",
    "Product",
    "ValidationError",
]
