"""YAML loader for the product catalog and order history."""

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import Catalog, Dataset, Order, Product

log = logging.getLogger(__name__)

SAMPLE_DATASET_PATH = Path(__file__).parent / "data" / "sample.yaml"

_PRODUCT_FIELDS = ("id", "name", "category", "price", "quantity", "popularity")


class DatasetError(ValueError):
    """Raised when a dataset document is structurally invalid."""


def _parse_product(raw: Any, index: int) -> Product:
    if not isinstance(raw, dict):
        raise DatasetError(f"products[{index}]: expected a mapping, got {raw!r}")

    missing = [name for name in _PRODUCT_FIELDS if name not in raw]
    if missing:
        raise DatasetError(f"products[{index}]: missing fields {', '.join(missing)}")

    try:
        popularity = int(raw["popularity"])
        product = Product(
            id=raw["id"],
            name=str(raw["name"]).strip(),
            category=str(raw["category"]),
            price=float(raw["price"]),
            quantity=int(raw["quantity"]),
            popularity=popularity,
        )
    except (TypeError, ValueError) as exc:
        raise DatasetError(f"products[{index}]: {exc}") from exc

    if not 0 <= popularity <= 100:
        raise DatasetError(
            f"products[{index}]: popularity {popularity} outside 0-100"
        )
    return product


def parse_catalog(raw_products: Any) -> Catalog:
    """Build a catalog keyed by product id from raw mappings."""
    if not isinstance(raw_products, list):
        raise DatasetError("products: expected a list")

    catalog: Catalog = {}
    for index, raw in enumerate(raw_products):
        product = _parse_product(raw, index)
        if product.id in catalog:
            raise DatasetError(f"products[{index}]: duplicate id {product.id!r}")
        catalog[product.id] = product
    return catalog


def parse_orders(raw_orders: Any) -> tuple[Order, ...]:
    """Normalize raw order lists into tuples of product ids.

    Ids are not checked against the catalog.
    """
    if raw_orders is None:
        return tuple()
    if not isinstance(raw_orders, list):
        raise DatasetError("orders: expected a list")

    orders: list[Order] = []
    for index, raw in enumerate(raw_orders):
        if not isinstance(raw, list):
            raise DatasetError(f"orders[{index}]: expected a list of product ids")
        orders.append(tuple(raw))
    return tuple(orders)


def load_dataset(path: str | Path) -> Dataset:
    """Load catalog and orders from a YAML document.

    Args:
        path: YAML file with top-level ``products`` and ``orders`` keys

    Returns:
        Parsed dataset

    Raises:
        FileNotFoundError: if the file does not exist
        DatasetError: if the document is not a valid dataset
    """
    source = Path(path)
    with open(source, "r", encoding="utf-8") as f:
        try:
            document = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise DatasetError(f"{source}: invalid YAML: {exc}") from exc

    if not isinstance(document, dict):
        raise DatasetError(f"{source}: expected a mapping at top level")

    dataset = Dataset(
        catalog=parse_catalog(document.get("products")),
        orders=parse_orders(document.get("orders")),
    )
    log.info(
        f"Loaded {len(dataset.catalog)} products and {len(dataset.orders)} orders from {source}"
    )
    return dataset


def load_sample_dataset() -> Dataset:
    """Load the bundled demo dataset."""
    return load_dataset(SAMPLE_DATASET_PATH)
