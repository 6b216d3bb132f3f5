"""Catalog records read by the graph builder and the scorer."""

from collections.abc import Hashable
from dataclasses import dataclass

ProductId = Hashable
Order = tuple[ProductId, ...]


@dataclass(frozen=True)
class Product:
    """A catalog item."""

    id: ProductId
    name: str
    category: str
    price: float
    quantity: int
    popularity: int


Catalog = dict[ProductId, Product]


@dataclass(frozen=True)
class Dataset:
    """Catalog plus the order history it was shipped with."""

    catalog: Catalog
    orders: tuple[Order, ...]


def compare_ids(a: ProductId, b: ProductId) -> int:
    """Order two product ids, negative when ``a`` sorts first.

    Ids of types that cannot be compared (an ``int`` catalog id against a
    ``str`` id from order history) are ordered by type name, then repr.
    """
    if a == b:
        return 0
    try:
        return -1 if a < b else 1
    except TypeError:
        left = (type(a).__name__, repr(a))
        right = (type(b).__name__, repr(b))
        if left == right:
            return 0
        return -1 if left < right else 1
