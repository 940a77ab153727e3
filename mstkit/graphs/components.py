"""
Connected components of undirected graphs via a disjoint-set forest.

Edge weights are irrelevant here and are not checked.
"""

from typing import FrozenSet, Set

from ..diagnostics.core import assert_partition
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Graph, GraphNode
from .disjoint_sets import ForestDisjointSets
from .validation import check_undirected

logger = get_logger(__name__)


class ConnectedComponentsComputer:
    """
    Computes the connected components of an undirected graph.

    Every node starts in its own set, the endpoints of every edge are
    merged, and the surviving sets are the components. The disjoint-set
    forest is held by the instance and cleared at the start of every call,
    so an instance is reusable but not thread-safe.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_node('C')
        >>> len(ConnectedComponentsComputer().compute_connected_components(G))
        2
    """

    def __init__(self):
        self._disjoint_sets: ForestDisjointSets = ForestDisjointSets()

    def compute_connected_components(self, graph: Graph) -> Set[FrozenSet[GraphNode]]:
        """
        Partition the nodes of graph into connected components.

        Args:
            graph: Undirected graph.

        Returns:
            Set of components, each a frozenset of nodes. Components are
            pairwise disjoint and together cover every node; an empty graph
            has no components.

        Raises:
            TypeError: If graph is None.
            ValueError: If graph is directed.

        Complexity: O(V + E alpha(V)).
        """
        check_undirected(graph)

        self._disjoint_sets.clear()
        disjoint_sets = self._disjoint_sets
        for node in graph.get_nodes():
            disjoint_sets.make_set(node)

        for edge in graph.get_edges():
            rep1 = disjoint_sets.find_set(edge.node1)
            rep2 = disjoint_sets.find_set(edge.node2)
            if rep1 != rep2:
                disjoint_sets.union(rep1, rep2)

        components = {
            frozenset(disjoint_sets.get_current_elements_of_set_containing(rep))
            for rep in disjoint_sets.get_current_representatives()
        }
        logger.debug(
            "Found %d connected components over %d nodes",
            len(components),
            graph.node_count(),
        )

        if is_debug_enabled():
            assert_partition(graph, components)

        return components


def connected_components(graph: Graph) -> Set[FrozenSet[GraphNode]]:
    """
    Connected components of an undirected graph.

    Shortcut for ``ConnectedComponentsComputer().compute_connected_components(graph)``.
    """
    return ConnectedComponentsComputer().compute_connected_components(graph)
