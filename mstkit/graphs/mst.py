"""
Minimum spanning tree algorithms: Kruskal and Prim.

Kruskal uses a disjoint-set forest for cycle detection. Prim grows a single
tree from a source node, rescanning the frontier edges on every step.

Both algorithms require an undirected graph whose edges all carry a
non-negative weight; the checks run before any work is done. Instances are
reusable across sequential calls but must not be shared between threads
without external locking.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal), 23.2 (Prim).
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from ..diagnostics.core import assert_prim_tree, assert_spanning_forest
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Graph, GraphEdge, GraphNode, NodeColor, NodeLike
from .disjoint_sets import ForestDisjointSets
from .validation import check_undirected, check_weights

logger = get_logger(__name__)


def sort_edges_by_weight(edges: Sequence[GraphEdge]) -> List[GraphEdge]:
    """
    Sort weighted edges by ascending weight.

    The sort is stable: edges of equal weight keep their input order.

    Args:
        edges: Edges that all carry a weight.

    Returns:
        New list of the same edges in ascending weight order.
    """
    weights = np.fromiter((edge.weight for edge in edges), dtype=float, count=len(edges))
    order = np.argsort(weights, kind="stable")
    return [edges[i] for i in order]


class KruskalMST:
    """
    Kruskal's algorithm for minimum spanning trees.

    The disjoint-set forest is held by the instance and cleared at the start
    of every call.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> G.add_edge('A', 'C', 3.0)
        >>> len(KruskalMST().compute_msp(G))
        2
    """

    def __init__(self):
        self._disjoint_sets: ForestDisjointSets = ForestDisjointSets()

    def compute_msp(self, graph: Graph) -> Set[GraphEdge]:
        """
        Compute a minimum spanning tree of an undirected weighted graph.

        Edges are considered once, in ascending weight order (ties in the
        graph's edge order). An edge is kept iff its endpoints lie in
        different sets, which are then merged.

        Args:
            graph: Undirected graph with non-negative edge weights.

        Returns:
            Set of graph edges forming the tree. For a graph with K
            connected components the result is a spanning forest of
            node_count - K edges.

        Raises:
            TypeError: If graph is None.
            ValueError: If graph is directed, or some edge is unweighted or
                has a negative weight.

        Complexity: O(E log E) for sorting plus near-linear union-find work.
        """
        check_undirected(graph)
        check_weights(graph)

        self._disjoint_sets.clear()
        disjoint_sets = self._disjoint_sets
        for node in graph.get_nodes():
            disjoint_sets.make_set(node)

        edges = sort_edges_by_weight(graph.get_edges())
        mst: Set[GraphEdge] = set()

        for edge in edges:
            rep1 = disjoint_sets.find_set(edge.node1)
            rep2 = disjoint_sets.find_set(edge.node2)
            if rep1 != rep2:
                mst.add(edge)
                disjoint_sets.union(rep1, rep2)

        logger.debug(
            "Kruskal kept %d of %d edges over %d nodes",
            len(mst),
            len(edges),
            graph.node_count(),
        )

        if is_debug_enabled():
            assert_spanning_forest(graph, mst)

        return mst


@dataclass
class NodeState:
    """Per-run state of one node in Prim's algorithm."""

    color: NodeColor = NodeColor.UNVISITED
    distance: float = math.inf
    previous: Optional[GraphNode] = None


@dataclass
class PrimTree:
    """
    Result of one run of Prim's algorithm.

    Attributes:
        source: Root of the tree.
        states: Mapping node -> NodeState for every node of the graph.
        order: Reached nodes in the order they joined the tree, source first.
    """

    source: GraphNode
    states: Dict[GraphNode, NodeState] = field(default_factory=dict)
    order: List[GraphNode] = field(default_factory=list)

    def _state(self, node: NodeLike) -> NodeState:
        key = node if isinstance(node, GraphNode) else GraphNode(node)
        if key not in self.states:
            raise KeyError(f"Node {key.label!r} not in tree")
        return self.states[key]

    def color(self, node: NodeLike) -> NodeColor:
        return self._state(node).color

    def distance(self, node: NodeLike) -> float:
        """Weight of the edge that attached node to the tree (0 for the source)."""
        return self._state(node).distance

    def previous(self, node: NodeLike) -> Optional[GraphNode]:
        """Parent of node in the tree, or None for the source and unreached nodes."""
        return self._state(node).previous

    def reached_nodes(self) -> List[GraphNode]:
        return list(self.order)

    def edges(self) -> List[Tuple[GraphNode, GraphNode, float]]:
        """
        Return the tree edges as (parent, child, weight) in insertion order.
        """
        return [
            (self.states[node].previous, node, self.states[node].distance)
            for node in self.order
            if node != self.source
        ]

    def total_weight(self) -> float:
        """Sum of the weights of the tree edges."""
        return math.fsum(weight for _, _, weight in self.edges())

    def __contains__(self, node: object) -> bool:
        if node is None:
            return False
        key = node if isinstance(node, GraphNode) else GraphNode(node)
        return key in self.states and self.states[key].color is NodeColor.VISITED

    def __len__(self) -> int:
        return len(self.order)


def _lightest_edge(frontier: List[GraphEdge]) -> Optional[GraphEdge]:
    """Return the first edge of minimum weight, or None if frontier is empty."""
    lightest: Optional[GraphEdge] = None
    for edge in frontier:
        if lightest is None or edge.weight < lightest.weight:
            lightest = edge
    return lightest


class PrimMST:
    """
    Prim's algorithm for minimum spanning trees.

    The tree state lives in a per-run map returned as a PrimTree. With
    ``annotate_nodes`` (the default) the final state is also copied into the
    ``color``, ``distance`` and ``previous`` attributes of every graph node,
    so the tree can be read back from the nodes themselves. Two concurrent
    annotating runs over the same graph overwrite each other's node state.

    The frontier is rebuilt from scratch on every step and scanned linearly,
    which costs O(V * E) overall. This is intended for small and medium
    graphs.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> tree = PrimMST().compute_msp(G, G.get_node('A'))
        >>> tree.previous('C')
        GraphNode('B')
    """

    def __init__(self, annotate_nodes: bool = True):
        """
        Args:
            annotate_nodes: If True, write the result into the graph nodes'
                scratch attributes after each run.
        """
        self.annotate_nodes = annotate_nodes

    def compute_msp(self, graph: Graph, source: NodeLike) -> PrimTree:
        """
        Compute a minimum spanning tree rooted at source.

        Nodes not connected to source stay UNVISITED with distance +inf and
        no predecessor.

        Args:
            graph: Undirected graph with non-negative edge weights.
            source: Root node (or its label); must belong to graph.

        Returns:
            PrimTree describing the tree.

        Raises:
            TypeError: If graph or source is None.
            ValueError: If source is not in graph, graph is directed, or
                some edge is unweighted or has a negative weight.
        """
        if graph is None or source is None:
            raise TypeError("Graph and source node must not be None")
        root = graph.get_node(source)
        if root is None:
            raise ValueError(f"Source node {source!r} is not present in the graph")
        check_undirected(graph)
        check_weights(graph)

        states = {node: NodeState() for node in graph.get_nodes()}
        states[root].color = NodeColor.VISITED
        states[root].distance = 0.0
        visited: List[GraphNode] = [root]
        frontier: List[GraphEdge] = []

        for _ in range(graph.node_count() - 1):
            seen = set(frontier)
            for node in visited:
                for edge in graph.get_edges_of(node):
                    if edge not in seen:
                        seen.add(edge)
                        frontier.append(edge)

            frontier = [
                edge
                for edge in frontier
                if states[edge.node1].color is not NodeColor.VISITED
                or states[edge.node2].color is not NodeColor.VISITED
            ]
            for edge in frontier:
                for end in (edge.node1, edge.node2):
                    if states[end].color is NodeColor.UNVISITED:
                        states[end].color = NodeColor.DISCOVERED

            edge = _lightest_edge(frontier)
            if edge is None:
                # Nothing left that is reachable from the source
                break

            if states[edge.node1].color is NodeColor.VISITED:
                parent, child = edge.node1, edge.node2
            else:
                parent, child = edge.node2, edge.node1

            state = states[child]
            state.color = NodeColor.VISITED
            state.previous = parent
            state.distance = edge.weight
            visited.append(child)

        tree = PrimTree(source=root, states=states, order=visited)
        logger.debug(
            "Prim reached %d of %d nodes from %r",
            len(visited),
            graph.node_count(),
            root,
        )

        if self.annotate_nodes:
            for node, state in states.items():
                node.color = state.color
                node.distance = state.distance
                node.previous = state.previous

        if is_debug_enabled():
            assert_prim_tree(graph, tree)

        return tree


def kruskal_mst(graph: Graph) -> Set[GraphEdge]:
    """
    Kruskal's algorithm for minimum spanning tree.

    Shortcut for ``KruskalMST().compute_msp(graph)``.
    """
    return KruskalMST().compute_msp(graph)


def prim_mst(graph: Graph, source: NodeLike, annotate_nodes: bool = True) -> PrimTree:
    """
    Prim's algorithm for minimum spanning tree.

    Shortcut for ``PrimMST(annotate_nodes).compute_msp(graph, source)``.
    """
    return PrimMST(annotate_nodes=annotate_nodes).compute_msp(graph, source)
