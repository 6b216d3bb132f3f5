"""Configuration for graph construction and recommendation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecommendConfig:
    """Constants controlling edge weights, traversal depth and output."""

    k: int = 5
    max_depth: int = 2
    min_depth: int = 1
    max_depth_limit: int = 4

    co_purchase_weight: float = 3.0
    category_weight: float = 1.0

    default_popularity: int = 50
    score_digits: int = 4

    def clamp_depth(self, depth: int | None) -> int:
        """Clamp traversal depth to supported range."""
        if depth is None:
            return self.max_depth
        if depth < self.min_depth:
            return self.min_depth
        if depth > self.max_depth_limit:
            return self.max_depth_limit
        return depth

    def normalize_depth(self, depth: int | None) -> int:
        """Replace missing or too-small depths with the default, cap the rest."""
        if depth is None or depth < self.min_depth:
            return self.max_depth
        return self.clamp_depth(depth)

    def normalize_k(self, k: int | None) -> int:
        """Replace missing or non-positive result counts with the default."""
        if k is None or k <= 0:
            return self.k
        return k


DEFAULT_RECOMMEND_CONFIG = RecommendConfig()
