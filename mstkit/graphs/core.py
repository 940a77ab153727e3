"""
Core graph data structures.

Provides GraphNode, GraphEdge and Graph, the in-memory graph consumed by the
spanning tree and connected components algorithms. Nodes and edges are kept
in insertion order so that every algorithm sees a deterministic iteration
order.
"""

import math
from enum import IntEnum
from typing import Dict, Hashable, Iterator, List, Optional, Union


class NodeColor(IntEnum):
    """Traversal state of a node during Prim's algorithm."""

    UNVISITED = 0
    DISCOVERED = 1
    VISITED = 2


class GraphNode:
    """
    Graph node identified by its label.

    Besides the label, a node carries three scratch attributes written by
    Prim's algorithm: ``color``, ``distance`` (weight of the edge that
    attached it to the tree) and ``previous`` (its parent in the tree).
    Scratch attributes do not take part in equality or hashing.

    Attributes:
        label: Hashable label identifying the node.
        color: Traversal state.
        distance: Tentative distance, +inf when unreached.
        previous: Predecessor in the last computed tree, or None.
    """

    __slots__ = ("label", "color", "distance", "previous")

    def __init__(self, label: Hashable):
        if label is None:
            raise TypeError("Node label must not be None")
        self.label = label
        self.color = NodeColor.UNVISITED
        self.distance = math.inf
        self.previous: Optional["GraphNode"] = None

    def reset(self) -> None:
        """Restore the scratch attributes to their unvisited defaults."""
        self.color = NodeColor.UNVISITED
        self.distance = math.inf
        self.previous = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self.label == other.label

    def __hash__(self) -> int:
        return hash(self.label)

    def __repr__(self) -> str:
        return f"GraphNode({self.label!r})"


class GraphEdge:
    """
    Undirected edge between two nodes with an optional weight.

    Two edges are equal when they join the same pair of nodes, regardless of
    endpoint order and weight.

    Attributes:
        node1: First endpoint.
        node2: Second endpoint.
    """

    __slots__ = ("node1", "node2", "_weight")

    def __init__(self, node1: GraphNode, node2: GraphNode, weight: Optional[float] = None):
        if node1 is None or node2 is None:
            raise TypeError("Edge endpoints must not be None")
        self.node1 = node1
        self.node2 = node2
        self._weight = None if weight is None else float(weight)

    def has_weight(self) -> bool:
        """Return True if the edge carries a weight."""
        return self._weight is not None

    @property
    def weight(self) -> Optional[float]:
        """Edge weight, or None for an unweighted edge."""
        return self._weight

    @weight.setter
    def weight(self, value: Optional[float]) -> None:
        self._weight = None if value is None else float(value)

    def other(self, node: GraphNode) -> GraphNode:
        """
        Return the endpoint opposite to ``node``.

        Raises:
            ValueError: If node is not an endpoint of this edge.
        """
        if node == self.node1:
            return self.node2
        if node == self.node2:
            return self.node1
        raise ValueError(f"{node!r} is not an endpoint of {self!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphEdge):
            return NotImplemented
        return (self.node1 == other.node1 and self.node2 == other.node2) or (
            self.node1 == other.node2 and self.node2 == other.node1
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.node1, self.node2)))

    def __repr__(self) -> str:
        if self.has_weight():
            return f"GraphEdge({self.node1.label!r}, {self.node2.label!r}, {self._weight!r})"
        return f"GraphEdge({self.node1.label!r}, {self.node2.label!r})"


NodeLike = Union[GraphNode, Hashable]


class Graph:
    """
    Graph with adjacency-list representation.

    Only undirected graphs are accepted by the algorithms in this package;
    the ``directed`` flag exists so they can reject the others. An
    undirected edge is stored once and listed in the incidence list of both
    of its endpoints.

    Complexity:
        - add_node: O(1) amortized
        - add_edge: O(1) amortized
        - get_edges_of: O(deg(v))
        - get_nodes / get_edges: O(V) / O(E)
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self.directed = directed
        self._nodes: Dict[GraphNode, GraphNode] = {}
        self._adj: Dict[GraphNode, Dict[GraphEdge, GraphEdge]] = {}
        self._edges: Dict[GraphEdge, GraphEdge] = {}

    @staticmethod
    def _as_node(node: NodeLike) -> GraphNode:
        return node if isinstance(node, GraphNode) else GraphNode(node)

    def add_node(self, node: NodeLike) -> GraphNode:
        """
        Add a node to the graph.

        Args:
            node: A GraphNode or a label to wrap in one.

        Returns:
            The node stored in the graph; an already present equal node is
            returned unchanged.
        """
        node = self._as_node(node)
        if node not in self._nodes:
            self._nodes[node] = node
            self._adj[node] = {}
        return self._nodes[node]

    def add_edge(self, u: NodeLike, v: NodeLike, weight: Optional[float] = None) -> GraphEdge:
        """
        Add an edge between u and v, adding missing endpoints.

        Edges are identified by their unordered endpoint pair, so adding an
        edge between an already joined pair only updates its weight.

        Args:
            u: First endpoint (node or label).
            v: Second endpoint (node or label).
            weight: Optional edge weight.

        Returns:
            The edge stored in the graph.
        """
        node1 = self.add_node(u)
        node2 = self.add_node(v)
        edge = GraphEdge(node1, node2, weight)

        existing = self._edges.get(edge)
        if existing is not None:
            existing.weight = weight
            return existing

        self._edges[edge] = edge
        self._adj[node1][edge] = edge
        if not self.directed:
            self._adj[node2][edge] = edge
        return edge

    def is_directed(self) -> bool:
        return self.directed

    def get_nodes(self) -> List[GraphNode]:
        """Return all nodes in insertion order."""
        return list(self._nodes)

    def get_edges(self) -> List[GraphEdge]:
        """Return all edges in insertion order, each undirected edge once."""
        return list(self._edges)

    def get_edges_of(self, node: NodeLike) -> List[GraphEdge]:
        """
        Return the edges incident to a node in insertion order.

        Raises:
            KeyError: If node is not in graph.
        """
        node = self._as_node(node)
        if node not in self._adj:
            raise KeyError(f"Node {node.label!r} not in graph")
        return list(self._adj[node])

    def get_node(self, node: NodeLike) -> Optional[GraphNode]:
        """Return the stored node equal to ``node``, or None if absent."""
        return self._nodes.get(self._as_node(node))

    def get_edge(self, u: NodeLike, v: NodeLike) -> Optional[GraphEdge]:
        """Return the stored edge joining u and v, or None if absent."""
        return self._edges.get(GraphEdge(self._as_node(u), self._as_node(v)))

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, node: object) -> bool:
        if node is None:
            return False
        return self._as_node(node) in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={len(self._nodes)}, edges={len(self._edges)})"
