"""Errors raised by the catalog store.

Every error carries an ``ErrorKind`` so callers can branch on the kind of
failure without matching on exception classes.
"""

from pathlib import Path
from typing import Any, Union

from catalog_store.models.error_kind import ErrorKind


class CatalogError(Exception):
    """Base class for catalog store failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Raised when a candidate product is missing a required field."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' is required.")


class DuplicateCodeError(CatalogError):
    """Raised when a product code is already used by another product."""

    kind = ErrorKind.DUPLICATE_CODE

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"Code '{code}' is already used by another product.")


class DuplicateIdError(CatalogError):
    """Raised when an explicit product id is already taken."""

    kind = ErrorKind.DUPLICATE_ID

    def __init__(self, product_id: Any):
        self.product_id = product_id
        super().__init__(f"ID {product_id} is already used by another product.")


class NotFoundError(CatalogError):
    """Raised when updating a product that does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, product_id: Any):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found.")


class ParseError(CatalogError):
    """Raised when the catalog file content cannot be parsed."""

    kind = ErrorKind.PARSE

    def __init__(self, path: Union[str, Path], detail: str):
        self.path = Path(path)
        super().__init__(f"Malformed catalog file {self.path}: {detail}")
