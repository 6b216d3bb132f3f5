"""Product catalog, order history and product lookup."""

from .loader import DatasetError, load_dataset, load_sample_dataset
from .lookup import find_product
from .models import Catalog, Dataset, Order, Product

__all__ = [
    "Catalog",
    "Dataset",
    "DatasetError",
    "Order",
    "Product",
    "find_product",
    "load_dataset",
    "load_sample_dataset",
]
