"""Bounded breadth-first scoring and top-k selection."""

import logging
from collections import deque

from ..catalog.models import Catalog, ProductId, compare_ids
from ..graph.builder import ProductGraph
from .config import DEFAULT_RECOMMEND_CONFIG, RecommendConfig
from .heap import MaxHeap
from .types import Candidate, RankedEntry

log = logging.getLogger(__name__)


def compare_candidates(a: Candidate, b: Candidate) -> float:
    """Higher score first; equal scores fall back to the smaller id."""
    if a.score != b.score:
        return a.score - b.score
    return -compare_ids(a.product_id, b.product_id)


def _popularity(
    catalog: Catalog, product_id: ProductId, config: RecommendConfig
) -> float:
    product = catalog.get(product_id)
    if product is None:
        return config.default_popularity
    return product.popularity


def score_neighborhood(
    graph: ProductGraph,
    catalog: Catalog,
    source_id: ProductId,
    *,
    max_depth: int,
    config: RecommendConfig = DEFAULT_RECOMMEND_CONFIG,
) -> tuple[dict[ProductId, float], dict[ProductId, int]]:
    """Accumulate depth-decayed scores for everything reachable from source.

    Each node is expanded at most once, but a node collects a contribution
    from every edge that reaches it during the run.

    Returns:
        Tuple of (score by id, minimum hop distance by id)
    """
    scores: dict[ProductId, float] = {}
    distances: dict[ProductId, int] = {}
    if not graph.has_product(source_id):
        return scores, distances

    visited: set[ProductId] = {source_id}
    queue: deque[tuple[ProductId, int]] = deque([(source_id, 0)])

    while queue:
        current_id, depth = queue.popleft()
        if depth >= max_depth:
            continue

        for neighbor_id, weight in graph.neighbors(current_id).items():
            if neighbor_id == source_id:
                continue

            next_depth = depth + 1
            previous = distances.get(neighbor_id)
            if previous is None or next_depth < previous:
                distances[neighbor_id] = next_depth

            popularity = _popularity(catalog, neighbor_id, config)
            contribution = weight * (popularity / 100) * (1 / next_depth)
            scores[neighbor_id] = scores.get(neighbor_id, 0.0) + contribution

            if neighbor_id not in visited:
                visited.add(neighbor_id)
                queue.append((neighbor_id, next_depth))

    return scores, distances


def recommend(
    graph: ProductGraph,
    catalog: Catalog,
    source_id: ProductId,
    k: int | None = None,
    config: RecommendConfig = DEFAULT_RECOMMEND_CONFIG,
    *,
    max_depth: int | None = None,
) -> list[RankedEntry]:
    """Rank products related to ``source_id``.

    Args:
        graph: Product graph from ``build_graph``
        catalog: Product records used for popularity and output
        source_id: Product to recommend from
        k: Maximum number of entries, defaults to ``config.k``
        config: Weights, defaults and rounding
        max_depth: Traversal depth, defaults to ``config.max_depth``

    Returns:
        At most ``k`` entries, highest score first. Empty when the source
        is not in the graph.
    """
    limit = config.k if k is None else k
    depth = config.max_depth if max_depth is None else max_depth

    if not graph.has_product(source_id):
        log.debug(f"Unknown source product {source_id!r}")
        return []

    scores, distances = score_neighborhood(
        graph, catalog, source_id, max_depth=depth, config=config
    )

    heap: MaxHeap[Candidate] = MaxHeap(compare_candidates)
    for candidate_id, score in scores.items():
        heap.push(
            Candidate(
                product_id=candidate_id,
                score=score,
                distance=distances[candidate_id],
            )
        )

    results: list[RankedEntry] = []
    while len(results) < limit and not heap.is_empty():
        top = heap.pop()
        results.append(
            RankedEntry(
                product_id=top.product_id,
                score=round(top.score, config.score_digits),
                distance=top.distance,
                product=catalog.get(top.product_id),
            )
        )

    log.debug(
        f"Recommended {len(results)} of {len(scores)} candidates for {source_id!r} "
        f"(depth={depth})"
    )
    return results
