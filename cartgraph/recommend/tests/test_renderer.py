from cartgraph.catalog.models import Product
from cartgraph.graph.builder import GraphStats
from cartgraph.recommend.renderer import render_graph_stats, render_recommendations
from cartgraph.recommend.types import RankedEntry

_LAPTOP = Product(
    id=1, name="Laptop", category="Electronics", price=1200, quantity=8, popularity=95
)
_MOUSE = Product(
    id=3, name="Mouse", category="Electronics", price=25.5, quantity=150, popularity=65
)


def test_render_recommendations_lists_entries():
    text = render_recommendations(
        _LAPTOP,
        [
            RankedEntry(product_id=3, score=4.55, distance=1, product=_MOUSE),
            RankedEntry(product_id=99, score=1.5, distance=2, product=None),
        ],
    )

    assert 'Top 2 recommendations for "Laptop" (ID: 1)' in text
    assert "1. Mouse (ID: 3)" in text
    assert "Score: 4.5500" in text
    assert "Distance: 1" in text
    assert "Price: $25.50" in text
    assert "Popularity: 65" in text
    assert "2. (unknown product) (ID: 99)" in text


def test_render_recommendations_empty():
    text = render_recommendations(_LAPTOP, [])

    assert "Top 0 recommendations" in text
    assert "No recommendations found" in text


def test_render_graph_stats():
    stats = GraphStats(nodes=3, edges=2, co_purchase_pairs=1, category_pairs=1, isolated=0)

    assert render_graph_stats(stats) == (
        "nodes=3 edges=2 co_purchase=1 same_category=1 isolated=0"
    )
