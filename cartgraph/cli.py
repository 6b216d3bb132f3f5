"""CLI for cartgraph."""

from dataclasses import asdict
from functools import cmp_to_key
import json
import logging
from pathlib import Path

import click

from .catalog.loader import DatasetError, load_dataset, load_sample_dataset
from .catalog.lookup import find_product
from .catalog.models import Dataset, Product, compare_ids
from .graph.builder import ProductGraph, build_graph
from .recommend.config import DEFAULT_RECOMMEND_CONFIG, RecommendConfig
from .recommend.renderer import render_graph_stats, render_recommendations
from .recommend.traversal import recommend as run_recommend


class _AppState:
    """Dataset and graph, loaded on first use."""

    def __init__(self, data_path: Path | None, config: RecommendConfig):
        self.data_path = data_path
        self.config = config
        self._dataset: Dataset | None = None
        self._graph: ProductGraph | None = None

    @property
    def dataset(self) -> Dataset:
        if self._dataset is None:
            try:
                if self.data_path is None:
                    self._dataset = load_sample_dataset()
                else:
                    self._dataset = load_dataset(self.data_path)
            except DatasetError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._dataset

    @property
    def graph(self) -> ProductGraph:
        if self._graph is None:
            dataset = self.dataset
            self._graph = build_graph(dataset.catalog, dataset.orders, self.config)
        return self._graph

    def resolve(self, query: str) -> Product | None:
        return find_product(self.dataset.catalog, query)


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        return None


def _compare_neighbors(a: tuple, b: tuple) -> float:
    """Heaviest edge first, then by product id."""
    if a[1] != b[1]:
        return b[1] - a[1]
    return compare_ids(a[0], b[0])


@click.group()
@click.option(
    "--data",
    "data_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML dataset with products and orders (default: bundled sample)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, data_path: Path | None, verbose: bool):
    """cartgraph - Related product recommendations from purchase history."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = _AppState(data_path, DEFAULT_RECOMMEND_CONFIG)


@cli.command()
@click.argument("query", type=str)
@click.option("--count", "-k", type=int, default=None, help="Number of results")
@click.option(
    "--depth",
    "-d",
    type=int,
    default=None,
    help="Max graph depth (1-4); values below 1 use the default 2",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format: table (human) or json",
)
@click.pass_obj
def recommend(
    state: _AppState, query: str, count: int | None, depth: int | None, format: str
):
    """Recommend products related to QUERY (id or name)."""
    product = state.resolve(query)
    if product is None:
        click.echo(f"No product found matching: {query}", err=True)
        raise SystemExit(1)

    config = state.config
    entries = run_recommend(
        state.graph,
        state.dataset.catalog,
        product.id,
        config.normalize_k(count),
        config,
        max_depth=config.normalize_depth(depth),
    )

    if format == "json":
        payload = {
            "source": asdict(product),
            "recommendations": [asdict(entry) for entry in entries],
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        click.echo(render_recommendations(product, entries))


@cli.command()
@click.argument("query", type=str)
@click.pass_obj
def inspect(state: _AppState, query: str):
    """Inspect a product's weighted neighbors in the graph."""
    product = state.resolve(query)
    if product is None:
        click.echo(f"No product found matching: {query}", err=True)
        raise SystemExit(1)

    graph = state.graph
    catalog = state.dataset.catalog
    click.echo(f"\nProduct: {product.name}")
    click.echo(f"ID: {product.id}")
    click.echo(f"Category: {product.category}  Popularity: {product.popularity}")

    neighbors = sorted(
        graph.neighbors(product.id).items(), key=cmp_to_key(_compare_neighbors)
    )
    if not neighbors:
        click.echo("\nNo neighbors.")
        return

    click.echo(f"\nNeighbors ({len(neighbors)}):")
    for neighbor_id, weight in neighbors:
        details = graph.edge_details(product.id, neighbor_id) or {}
        other = catalog.get(neighbor_id)
        name = other.name if other else "Unknown"
        click.echo(
            f"  [{weight:.1f}] {name} ({neighbor_id}) "
            f"co_purchases={details.get('co_purchases', 0)} "
            f"same_category={'yes' if details.get('same_category') else 'no'}"
        )


@cli.command()
@click.pass_obj
def stats(state: _AppState):
    """Show graph statistics."""
    click.echo(render_graph_stats(state.graph.stats()))


@cli.command()
@click.pass_obj
def interactive(state: _AppState):
    """Prompt for products and print recommendations until 'exit'."""
    config = state.config
    graph = state.graph
    catalog = state.dataset.catalog

    click.echo("\nSmart Product Recommendation - Interactive CLI")
    click.echo(
        "Type a product ID or a product name (e.g., '1' or 'Laptop'). Type 'exit' to quit.\n"
    )

    while True:
        answer = click.prompt(
            "Enter product ID or name ('exit' to quit)",
            default="",
            show_default=False,
        ).strip()
        if not answer:
            continue
        if answer.lower() == "exit":
            click.echo("Goodbye")
            return

        product = find_product(catalog, answer)
        if product is None:
            click.echo(
                "No product found matching that input. "
                "Try ID or name (e.g., '1' or 'Laptop').\n"
            )
            continue

        k = config.normalize_k(
            _parse_int(
                click.prompt(
                    f"How many recommendations would you like? (default {config.k})",
                    default="",
                    show_default=False,
                )
            )
        )
        depth = _parse_int(
            click.prompt(
                f"Max graph depth to search ({config.min_depth}-{config.max_depth_limit}, "
                f"default {config.max_depth})",
                default="",
                show_default=False,
            )
        )

        entries = run_recommend(
            graph,
            catalog,
            product.id,
            k,
            config,
            max_depth=config.normalize_depth(depth),
        )
        click.echo("\n" + render_recommendations(product, entries) + "\n")


if __name__ == "__main__":
    cli()
