"""Catalog store service: CRUD over a single JSON catalog file.

Every operation is a whole-file read-modify-write cycle:
- load the full collection from the file
- apply one mutation and check invariants (required fields, unique id and code)
- write the full collection back

Nothing is cached between calls, so the file is always the source of truth.
Concurrent writers are not supported; the last write wins.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..clients import JsonFileClient
from ..config import StorageConfig
from ..exceptions import (
    DuplicateCodeError,
    DuplicateIdError,
    NotFoundError,
    ParseError,
    ValidationError,
)
from ..models import REQUIRED_FIELDS, Product

logger = logging.getLogger(__name__)


class CatalogStore:
    """Product catalog persisted as one JSON array."""

    def __init__(
        self,
        path: Union[str, Path],
        atomic_writes: bool = True,
        indent: int = 2,
    ):
        """Initialize the catalog store.

        Args:
            path: Path to the JSON catalog file. It need not exist yet.
            atomic_writes: Write through a temp file and rename it into place.
            indent: Indentation used when writing the file.
        """
        self._path = Path(path)
        self._client = JsonFileClient(self._path, indent=indent, atomic_writes=atomic_writes)

    @classmethod
    def from_config(cls, config: StorageConfig) -> "CatalogStore":
        """Create a store from the storage section of the app config."""
        return cls(config.path, atomic_writes=config.atomic_writes, indent=config.indent)

    @property
    def path(self) -> Path:
        """Path to the backing JSON catalog file."""
        return self._path

    def load(self) -> List[Product]:
        """Load every product currently persisted.

        Returns:
            Products in file order; empty if the file is missing or blank.

        Raises:
            ParseError: If the file is not a JSON array of product objects.
        """
        data = self._client.read()
        if data is None:
            return []

        if not isinstance(data, list):
            raise ParseError(self._path, f"expected a JSON array, got {type(data).__name__}")

        products = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ParseError(self._path, f"entry {index} is not a JSON object")
            try:
                products.append(Product.from_dict(item))
            except KeyError as e:
                raise ParseError(self._path, f"entry {index} is missing field '{e.args[0]}'") from e

        logger.debug(f"Loaded {len(products)} products from {self._path}")
        return products

    def list_all(self) -> List[Product]:
        """Return every product, same as load()."""
        return self.load()

    def get_by_id(self, product_id: Any) -> Optional[Product]:
        """Get a product by its ID.

        IDs match only when both value and kind agree, so True never matches 1.

        Returns:
            The Product if found, None otherwise.
        """
        for product in self.load():
            if _same_id(product.id, product_id):
                return product
        return None

    def insert(self, candidate: Mapping[str, Any]) -> Product:
        """Insert a new product and assign it an ID.

        ``status`` defaults to True and ``thumbnails`` to an empty list.
        Caller fields are merged over the defaults, so an explicit ``id``
        that is not already taken is kept.

        Args:
            candidate: Product fields; every field in REQUIRED_FIELDS must be present.

        Returns:
            The created Product.

        Raises:
            ValidationError: If a required field is missing (the first one is named).
            DuplicateCodeError: If another product already uses the code.
            DuplicateIdError: If an explicit ``id`` is already taken.
        """
        for field_name in REQUIRED_FIELDS:
            if field_name not in candidate:
                logger.warning(f"Rejected product without '{field_name}'")
                raise ValidationError(field_name)

        products = self.load()

        code = candidate["code"]
        if any(product.code == code for product in products):
            logger.warning(f"Rejected product with duplicate code '{code}'")
            raise DuplicateCodeError(code)

        if "id" in candidate and any(_same_id(product.id, candidate["id"]) for product in products):
            logger.warning(f"Rejected product with duplicate id {candidate['id']}")
            raise DuplicateIdError(candidate["id"])

        record = {
            "id": self.generate_unique_id(products),
            "status": True,
            "thumbnails": [],
            **candidate,
        }
        product = Product.from_dict(_as_stored(record))

        products.append(product)
        self.persist(products)

        logger.info(f"Inserted product {product.id} with code '{product.code}'")
        return product

    @staticmethod
    def generate_unique_id(products: Iterable[Product]) -> int:
        """Return the smallest positive integer not used as a product ID.

        IDs freed by deletions are handed out again.
        """
        existing_ids = {product.id for product in products}
        new_id = 1
        while new_id in existing_ids:
            new_id += 1
        return new_id

    def update(self, product_id: Any, patch: Mapping[str, Any]) -> Product:
        """Merge ``patch`` into an existing product.

        Any ``id`` key in the patch is ignored; IDs never change.

        Returns:
            The updated Product.

        Raises:
            NotFoundError: If no product has ``product_id``. The file is left untouched.
        """
        products = self.load()

        index = self._find_index(products, product_id)
        if index is None:
            logger.warning(f"Cannot update product {product_id}: not found")
            raise NotFoundError(product_id)

        fields_to_update = {key: value for key, value in patch.items() if key != "id"}
        products[index] = Product.from_dict(
            _as_stored({**products[index].to_dict(), **fields_to_update})
        )
        self.persist(products)

        logger.info(f"Updated product {product_id}: {', '.join(fields_to_update) or 'no fields'}")
        return products[index]

    def delete(self, product_id: Any) -> None:
        """Delete a product. Deleting a missing ID is a no-op."""
        products = self.load()
        remaining = [product for product in products if not _same_id(product.id, product_id)]
        self.persist(remaining)

        if len(remaining) < len(products):
            logger.info(f"Deleted product {product_id}")
        else:
            logger.debug(f"No product {product_id} to delete")

    def persist(self, products: Iterable[Product]) -> None:
        """Overwrite the catalog file with ``products``."""
        self._client.write([product.to_dict() for product in products])

    @staticmethod
    def _find_index(products: List[Product], product_id: Any) -> Optional[int]:
        for index, product in enumerate(products):
            if _same_id(product.id, product_id):
                return index
        return None


def _same_id(stored_id: Any, product_id: Any) -> bool:
    # bool is an int subclass; True must not match ID 1
    return stored_id == product_id and isinstance(stored_id, bool) == isinstance(product_id, bool)


def _as_stored(record: Mapping[str, Any]) -> Any:
    """Copy a record through JSON so it holds exactly what a later load returns."""
    return json.loads(json.dumps(record, ensure_ascii=False))
