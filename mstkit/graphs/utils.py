"""
Utility functions for spanning tree results.

Provides helpers to reset node scratch state, walk a Prim tree back to its
root, and recover the graph edges that make up a Prim tree.
"""

from typing import List, Optional

from .core import Graph, GraphEdge, GraphNode, NodeColor, NodeLike
from .mst import PrimTree


def reset_node_state(graph: Graph) -> None:
    """
    Reset the scratch attributes of every node in graph.

    After the call every node is UNVISITED with distance +inf and no
    predecessor.

    Args:
        graph: Graph whose nodes are reset.

    Raises:
        TypeError: If graph is None.
    """
    if graph is None:
        raise TypeError("Graph must not be None")
    for node in graph.get_nodes():
        node.reset()


def path_to_source(tree: PrimTree, node: NodeLike) -> Optional[List[GraphNode]]:
    """
    Follow predecessor links from node back to the root of a Prim tree.

    Args:
        tree: Result of PrimMST.compute_msp.
        node: Node (or label) to start from.

    Returns:
        List of nodes from node to the source (inclusive), or None if node
        was not reached.

    Raises:
        KeyError: If node is not in the tree's graph.
        ValueError: If the predecessor chain is cyclic or does not end at
            the source.

    Example:
        >>> path = path_to_source(tree, 'D')
        >>> [n.label for n in path]
        ['D', 'C', 'B', 'A']
    """
    if tree.color(node) is not NodeColor.VISITED:
        return None

    start = node if isinstance(node, GraphNode) else GraphNode(node)
    path = [start]
    seen = {start}
    current = tree.previous(start)
    while current is not None:
        if current in seen:
            raise ValueError(f"Predecessor chain of {path[0]!r} contains a cycle")
        seen.add(current)
        path.append(current)
        current = tree.previous(current)

    if path[-1] != tree.source:
        raise ValueError(f"Predecessor chain of {path[0]!r} does not reach the source")
    return path


def tree_edges(graph: Graph, tree: PrimTree) -> List[GraphEdge]:
    """
    Return the graph edges that form a Prim tree.

    Args:
        graph: Graph the tree was computed from.
        tree: Result of PrimMST.compute_msp.

    Returns:
        List of GraphEdge, in the order their child nodes joined the tree.

    Raises:
        ValueError: If a tree edge is missing from graph.
    """
    edges = []
    for parent, child, _ in tree.edges():
        edge = graph.get_edge(parent, child)
        if edge is None:
            raise ValueError(f"No edge between {parent!r} and {child!r} in graph")
        edges.append(edge)
    return edges
