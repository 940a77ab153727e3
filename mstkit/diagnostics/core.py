"""Core diagnostic functions for spanning trees and graph partitions."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, AbstractSet, Collection, Iterable

if TYPE_CHECKING:
    from ..graphs.core import Graph, GraphEdge, GraphNode
    from ..graphs.mst import PrimTree


def total_weight(edges: Iterable["GraphEdge"]) -> float:
    """
    Sum the weights of a collection of weighted edges.

    Parameters
    ----------
    edges:
        Edges that all carry a weight.

    Returns
    -------
    float
        Accurate floating point sum of the weights.
    """
    return math.fsum(edge.weight for edge in edges)


def is_acyclic(edges: Iterable["GraphEdge"]) -> bool:
    """
    Check whether a collection of undirected edges contains no cycle.

    The edges are replayed into a fresh disjoint-set forest; a cycle exists
    iff some edge joins two nodes that are already in the same set.

    Parameters
    ----------
    edges:
        Undirected edges.

    Returns
    -------
    bool
        True if the edges form a forest, False otherwise.
    """
    from ..graphs.disjoint_sets import ForestDisjointSets

    forest = ForestDisjointSets()
    for edge in edges:
        for node in (edge.node1, edge.node2):
            if node not in forest:
                forest.make_set(node)
        rep1 = forest.find_set(edge.node1)
        rep2 = forest.find_set(edge.node2)
        if rep1 == rep2:
            return False
        forest.union(rep1, rep2)
    return True


def assert_acyclic(edges: Iterable["GraphEdge"]) -> None:
    """
    Assert that a collection of undirected edges contains no cycle.

    Raises
    ------
    ValueError
        If the edges contain a cycle.
    """
    if not is_acyclic(edges):
        raise ValueError("Edge set contains a cycle.")


def assert_spanning_forest(graph: "Graph", edges: Collection["GraphEdge"]) -> None:
    """
    Assert that ``edges`` is a spanning forest of ``graph``.

    A spanning forest uses only graph edges, has no cycle, and has exactly
    ``node_count - K`` edges, where K is the number of connected components
    of the graph.

    Parameters
    ----------
    graph:
        Undirected graph the forest was computed from.
    edges:
        Candidate forest.

    Raises
    ------
    ValueError
        If any of the conditions above does not hold.
    """
    from ..graphs.components import connected_components

    graph_edges = set(graph.get_edges())
    foreign = [edge for edge in edges if edge not in graph_edges]
    if foreign:
        raise ValueError(f"Forest uses edges that are not in the graph: {foreign}")

    assert_acyclic(edges)

    expected = graph.node_count() - len(connected_components(graph))
    if len(edges) != expected:
        raise ValueError(
            f"Spanning forest should have {expected} edges, found {len(edges)}."
        )


def assert_partition(
    graph: "Graph", components: Collection[AbstractSet["GraphNode"]]
) -> None:
    """
    Assert that ``components`` partitions the nodes of ``graph``.

    Parameters
    ----------
    graph:
        Graph whose nodes are partitioned.
    components:
        Collection of node sets.

    Raises
    ------
    ValueError
        If a component is empty, two components overlap, or the union of
        the components differs from the node set.
    """
    covered = set()
    for component in components:
        if not component:
            raise ValueError("Partition contains an empty component.")
        overlap = covered.intersection(component)
        if overlap:
            raise ValueError(f"Components overlap on {sorted(map(repr, overlap))}.")
        covered.update(component)

    nodes = set(graph.get_nodes())
    if covered != nodes:
        missing = nodes - covered
        extra = covered - nodes
        raise ValueError(
            f"Components do not cover the graph: missing {sorted(map(repr, missing))}, "
            f"unknown {sorted(map(repr, extra))}."
        )


def assert_prim_tree(graph: "Graph", tree: "PrimTree") -> None:
    """
    Assert that a Prim result is a valid tree rooted at its source.

    Every reached node other than the source must hang from a reached
    parent through a graph edge whose weight equals its distance, and its
    predecessor chain must lead back to the source within
    ``node_count - 1`` steps. Unreached nodes must carry no predecessor and
    an infinite distance.

    Parameters
    ----------
    graph:
        Graph the tree was computed from.
    tree:
        Result of PrimMST.compute_msp.

    Raises
    ------
    ValueError
        If the tree is inconsistent.
    """
    from ..graphs.core import NodeColor

    states = tree.states
    if states[tree.source].previous is not None or states[tree.source].distance != 0:
        raise ValueError("Source node must have no predecessor and distance 0.")

    max_steps = max(graph.node_count() - 1, 0)
    for node, state in states.items():
        if state.color is not NodeColor.VISITED:
            if state.previous is not None or not math.isinf(state.distance):
                raise ValueError(f"Unreached node {node!r} carries tree state.")
            continue
        if node == tree.source:
            continue

        parent = state.previous
        if parent is None or states[parent].color is not NodeColor.VISITED:
            raise ValueError(f"Node {node!r} is reached but has no reached parent.")
        edge = graph.get_edge(parent, node)
        if edge is None or edge.weight != state.distance:
            raise ValueError(
                f"Node {node!r} is not attached to {parent!r} by an edge of weight "
                f"{state.distance}."
            )

        current, steps = node, 0
        while current != tree.source:
            current = states[current].previous
            steps += 1
            if current is None or steps > max_steps:
                raise ValueError(f"Predecessor chain of {node!r} does not reach the source.")
