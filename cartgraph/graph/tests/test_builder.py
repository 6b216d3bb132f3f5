"""Tests for the weighted product graph builder."""

import networkx as nx
import pytest

from cartgraph.catalog.loader import load_sample_dataset
from cartgraph.catalog.models import Product
from cartgraph.graph.builder import build_graph
from cartgraph.recommend.config import RecommendConfig


def _product(product_id: int, name: str, category: str, popularity: int) -> Product:
    return Product(
        id=product_id,
        name=name,
        category=category,
        price=10.0,
        quantity=1,
        popularity=popularity,
    )


@pytest.fixture
def catalog():
    """Small catalog where only Laptop and Mouse share a category."""
    products = [
        _product(1, "Laptop", "Electronics", 95),
        _product(3, "Mouse", "Electronics", 65),
        _product(4, "Keyboard", "Input", 70),
        _product(5, "Monitor", "Displays", 80),
        _product(6, "Webcam", "Video", 68),
        _product(7, "USB-C Hub", "Cables", 60),
        _product(10, "Desk Lamp", "Furniture", 60),
        _product(20, "External SSD", "Storage", 77),
        _product(30, "Stapler", "Stationery", 40),
        _product(31, "Pen Pack", "Stationery", 45),
    ]
    return {p.id: p for p in products}


@pytest.fixture
def orders():
    return [(1, 3, 4, 6), (1, 5, 20), (1, 3, 10), (1, 20, 7)]


def test_every_catalog_product_is_a_node(catalog):
    """Products without any qualifying pair still get an empty entry."""
    graph = build_graph(catalog, [])

    for product_id in catalog:
        assert product_id in graph
    assert graph.neighbors(4) == {}
    assert graph.weight(1, 3) == 1.0


def test_co_purchase_and_category_weights_sum(catalog, orders):
    graph = build_graph(catalog, orders)

    # Two shared orders plus the shared category
    assert graph.weight(1, 3) == pytest.approx(7.0)
    assert graph.weight(1, 20) == pytest.approx(6.0)
    assert graph.weight(4, 6) == pytest.approx(3.0)
    assert graph.weight(4, 5) == 0.0


def test_category_only_pair_has_unit_weight(catalog, orders):
    graph = build_graph(catalog, orders)

    assert graph.weight(30, 31) == 1.0
    assert graph.neighbors(30) == {31: 1.0}
    assert graph.neighbors(31) == {30: 1.0}


def test_edges_are_symmetric(catalog, orders):
    graph = build_graph(catalog, orders)

    for product_id in graph.product_ids():
        for neighbor_id, weight in graph.neighbors(product_id).items():
            assert graph.neighbors(neighbor_id)[product_id] == weight


def test_repeated_id_in_order_does_not_create_self_loop(catalog):
    graph = build_graph(catalog, [(3, 3, 4)])

    assert 3 not in graph.neighbors(3)
    # 3-4 is counted once per position pair
    assert graph.weight(3, 4) == pytest.approx(6.0)


def test_unknown_ids_in_orders_become_nodes(catalog):
    graph = build_graph(catalog, [(1, 999)])

    assert 999 in graph
    assert graph.weight(999, 1) == pytest.approx(3.0)


def test_zero_weights_do_not_materialize_edges(catalog, orders):
    config = RecommendConfig(category_weight=0.0)
    graph = build_graph(catalog, orders, config)

    assert graph.weight(30, 31) == 0.0
    assert graph.neighbors(30) == {}
    assert graph.weight(1, 3) == pytest.approx(6.0)


def test_graph_is_frozen(catalog, orders):
    graph = build_graph(catalog, orders)

    with pytest.raises(nx.NetworkXError):
        graph.graph.add_edge(1, 30, weight=1.0)


def test_stats_and_edge_details(catalog, orders):
    graph = build_graph(catalog, orders)
    stats = graph.stats()

    assert stats.nodes == 10
    assert stats.edges == 14
    assert stats.co_purchase_pairs == 13
    assert stats.category_pairs == 2
    assert stats.isolated == 0

    details = graph.edge_details(1, 3)
    assert details == {"weight": 7.0, "co_purchases": 2, "same_category": True}
    assert graph.edge_details(4, 5) is None


class TestSampleDataset:
    """Graph built from the bundled dataset."""

    @pytest.fixture(scope="class")
    def sample(self):
        dataset = load_sample_dataset()
        return dataset, build_graph(dataset.catalog, dataset.orders)

    def test_all_products_present(self, sample):
        dataset, graph = sample
        assert len(graph) == 25
        assert all(product_id in graph for product_id in dataset.catalog)

    def test_laptop_mouse_weight(self, sample):
        _, graph = sample
        assert graph.weight(1, 3) == pytest.approx(7.0)

    def test_lower_bound_from_order_counts(self, sample):
        """weight >= 3 * shared orders (+1 for a shared category)."""
        dataset, graph = sample
        ids = sorted(dataset.catalog)
        for index, a in enumerate(ids):
            for b in ids[index + 1 :]:
                shared = sum(1 for order in dataset.orders if a in order and b in order)
                expected = 3.0 * shared
                if dataset.catalog[a].category == dataset.catalog[b].category:
                    expected += 1.0
                assert graph.weight(a, b) >= expected
                assert graph.weight(a, b) == graph.weight(b, a)
