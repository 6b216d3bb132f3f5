"""Plain-text rendering of recommendation results."""

from ..catalog.models import Product
from ..graph.builder import GraphStats
from .types import RankedEntry

_WIDTH = 72


def _format_price(price: float) -> str:
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price:.2f}"


def _format_entry(rank: int, entry: RankedEntry) -> list[str]:
    product = entry.product
    if product is None:
        return [
            f"{rank}. (unknown product) (ID: {entry.product_id})",
            f"   > Score: {entry.score:.4f}   > Distance: {entry.distance}",
        ]
    return [
        f"{rank}. {product.name} (ID: {product.id})",
        f"   > Score: {entry.score:.4f}   > Distance: {entry.distance}"
        f"   > Category: {product.category}",
        f"   > Price: {_format_price(product.price)}   > Popularity: {product.popularity}",
    ]


def render_recommendations(source: Product, entries: list[RankedEntry]) -> str:
    """Render a ranked list as a boxed text block."""
    lines = [
        "=" * _WIDTH,
        f'Top {len(entries)} recommendations for "{source.name}" (ID: {source.id})',
        "-" * _WIDTH,
    ]
    if not entries:
        lines.append(
            "No recommendations found for this product with the current dataset/settings."
        )
    for rank, entry in enumerate(entries, 1):
        lines.extend(_format_entry(rank, entry))
        lines.append("-" * _WIDTH)
    lines.append("=" * _WIDTH)
    return "\n".join(lines)


def render_graph_stats(stats: GraphStats) -> str:
    """One-line graph summary."""
    return (
        f"nodes={stats.nodes} edges={stats.edges} "
        f"co_purchase={stats.co_purchase_pairs} same_category={stats.category_pairs} "
        f"isolated={stats.isolated}"
    )
