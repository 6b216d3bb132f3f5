"""Typed contracts for the recommendation pass."""

from dataclasses import dataclass

from ..catalog.models import Product, ProductId


@dataclass(frozen=True)
class Candidate:
    product_id: ProductId
    score: float
    distance: int


@dataclass(frozen=True)
class RankedEntry:
    product_id: ProductId
    score: float
    distance: int
    product: Product | None
