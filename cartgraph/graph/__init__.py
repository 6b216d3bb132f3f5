"""Weighted product graph construction."""

from .builder import GraphStats, ProductGraph, build_graph

__all__ = ["GraphStats", "ProductGraph", "build_graph"]
