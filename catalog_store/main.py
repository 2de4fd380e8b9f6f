"""Demonstration driver: seeds a catalog file and updates one product."""

import logging

from catalog_store.config import get_config
from catalog_store.exceptions import CatalogError
from catalog_store.logging_setup import setup_logging
from catalog_store.services import CatalogStore

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "title": "Product 1",
        "description": "Description of product 1",
        "price": 100,
        "thumbnail": "image1.jpg",
        "code": "aABC12a3",
        "stock": 10,
        "category": "clothing",
    },
    {
        "title": "Product 2",
        "description": "Description of product 2",
        "price": 150,
        "thumbnail": "image2.jpg",
        "code": "DEF45s6s",
        "stock": 20,
        "category": "clothing",
    },
]


def run_demo(store: CatalogStore) -> None:
    """Insert the sample products and update the first one.

    Failures are logged with their error kind; the demo keeps going.
    """
    for candidate in SAMPLE_PRODUCTS:
        try:
            product = store.insert(candidate)
            print(f"Added product {product.id}: {product.title}")
        except CatalogError as e:
            logger.error(f"Error adding product ({e.kind.value}): {e.message}")

    try:
        product = store.update(1, {"price": 120, "stock": 15})
        print(f"Updated product {product.id}: price={product.price}, stock={product.stock}")
    except CatalogError as e:
        logger.error(f"Error updating product ({e.kind.value}): {e.message}")


def main() -> None:
    config = get_config()
    setup_logging(config.logging)

    store = CatalogStore.from_config(config.storage)
    logger.info(f"Using catalog file {store.path}")

    run_demo(store)

    for product in store.list_all():
        print(f"  [{product.id}] {product.code} {product.title} price={product.price} stock={product.stock}")


if __name__ == "__main__":
    main()
