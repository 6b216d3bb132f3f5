"""Resolve free-text or numeric user input to a catalog product."""

from .models import Catalog, Product


def find_product(catalog: Catalog, query: str) -> Product | None:
    """Find a product by numeric id or case-insensitive name match.

    An all-digit query is an id lookup only, as an int key and then as the
    raw string key. Otherwise an exact name match wins over the first
    substring match in catalog order.
    """
    trimmed = (query or "").strip()
    if not trimmed:
        return None

    if trimmed.isascii() and trimmed.isdigit():
        product = catalog.get(int(trimmed))
        if product is None:
            product = catalog.get(trimmed)
        return product

    keyword = trimmed.lower()
    matches = [
        product for product in catalog.values() if keyword in product.name.lower()
    ]
    if not matches:
        return None

    for product in matches:
        if product.name.lower() == keyword:
            return product
    return matches[0]
