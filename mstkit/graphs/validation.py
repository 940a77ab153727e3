"""Precondition checks shared by the spanning tree and components algorithms."""

import math
from typing import Optional

from .core import Graph, GraphEdge


def check_undirected(graph: Graph) -> None:
    """
    Reject a missing or directed graph.

    Raises:
        TypeError: If graph is None.
        ValueError: If graph is directed.
    """
    if graph is None:
        raise TypeError("Graph must not be None")
    if graph.is_directed():
        raise ValueError("Directed graph: an undirected graph is required")


def find_invalid_weight(graph: Graph) -> Optional[GraphEdge]:
    """Return the first edge with a missing, negative or NaN weight, or None."""
    for edge in graph.get_edges():
        if not edge.has_weight():
            return edge
        weight = edge.weight
        if math.isnan(weight) or weight < 0:
            return edge
    return None


def check_weights(graph: Graph) -> None:
    """
    Require every edge of graph to carry a non-negative weight.

    Raises:
        ValueError: If some edge is unweighted or has a negative or NaN weight.
    """
    edge = find_invalid_weight(graph)
    if edge is not None:
        raise ValueError(
            f"Graph is not weighted or has negative weights: offending edge {edge!r}"
        )
