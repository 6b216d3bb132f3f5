"""NetworkX graph builder for co-purchase and category similarity."""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Iterator

import networkx as nx

from ..catalog.models import Catalog, Order, ProductId
from ..recommend.config import DEFAULT_RECOMMEND_CONFIG, RecommendConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphStats:
    """Statistics about the graph."""

    nodes: int
    edges: int
    co_purchase_pairs: int
    category_pairs: int
    isolated: int


class ProductGraph:
    """Read-only weighted product graph.

    Edges are undirected, so ``weight(a, b) == weight(b, a)`` always holds.
    """

    def __init__(self, graph: nx.Graph):
        self.graph = nx.freeze(graph)

    def __contains__(self, product_id: object) -> bool:
        return self.graph.has_node(product_id)

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def has_product(self, product_id: ProductId) -> bool:
        return self.graph.has_node(product_id)

    def product_ids(self) -> Iterator[ProductId]:
        return iter(self.graph.nodes)

    def neighbors(self, product_id: ProductId) -> dict[ProductId, float]:
        """Map of neighbor id to accumulated edge weight."""
        if not self.graph.has_node(product_id):
            return {}
        return {
            neighbor: data["weight"]
            for neighbor, data in self.graph.adj[product_id].items()
        }

    def weight(self, a: ProductId, b: ProductId) -> float:
        """Edge weight between two products, 0.0 when not connected."""
        data = self.graph.get_edge_data(a, b)
        if data is None:
            return 0.0
        return data["weight"]

    def edge_details(self, a: ProductId, b: ProductId) -> dict | None:
        """Raw edge attributes (weight, co_purchases, same_category)."""
        data = self.graph.get_edge_data(a, b)
        return dict(data) if data is not None else None

    def stats(self) -> GraphStats:
        """Get statistics about the graph."""
        co_purchase_pairs = 0
        category_pairs = 0
        for _, _, data in self.graph.edges(data=True):
            if data.get("co_purchases"):
                co_purchase_pairs += 1
            if data.get("same_category"):
                category_pairs += 1
        return GraphStats(
            nodes=self.graph.number_of_nodes(),
            edges=self.graph.number_of_edges(),
            co_purchase_pairs=co_purchase_pairs,
            category_pairs=category_pairs,
            isolated=nx.number_of_isolates(self.graph),
        )


def _increment_edge(
    graph: nx.Graph, a: ProductId, b: ProductId, weight: float
) -> dict | None:
    if weight <= 0:
        return None
    if graph.has_edge(a, b):
        data = graph.edges[a, b]
        data["weight"] += weight
    else:
        graph.add_edge(a, b, weight=weight, co_purchases=0, same_category=False)
        data = graph.edges[a, b]
    return data


def build_graph(
    catalog: Catalog,
    orders: Iterable[Order],
    config: RecommendConfig = DEFAULT_RECOMMEND_CONFIG,
) -> ProductGraph:
    """Build the weighted product graph.

    Every pair of ids inside an order adds ``config.co_purchase_weight``;
    every pair of distinct catalog products in the same category adds
    ``config.category_weight``. Contributions sum. Ids that only appear in
    orders become nodes too.
    """
    graph = nx.Graph()
    graph.add_nodes_from(catalog)

    order_count = 0
    for order in orders:
        order_count += 1
        for a, b in combinations(order, 2):
            if a == b:
                continue
            data = _increment_edge(graph, a, b, config.co_purchase_weight)
            if data is not None:
                data["co_purchases"] += 1

    # O(n^2) over the catalog; fine for small and medium catalogs
    for a, b in combinations(list(catalog), 2):
        if catalog[a].category != catalog[b].category:
            continue
        data = _increment_edge(graph, a, b, config.category_weight)
        if data is not None:
            data["same_category"] = True

    unknown = [node for node in graph.nodes if node not in catalog]
    if unknown:
        log.debug(f"Orders reference {len(unknown)} ids outside the catalog: {unknown}")

    product_graph = ProductGraph(graph)
    log.info(
        f"Built graph from {len(catalog)} products and {order_count} orders: "
        f"{product_graph.graph.number_of_edges()} edges"
    )
    return product_graph
