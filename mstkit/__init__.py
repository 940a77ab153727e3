"""mstkit - minimum spanning trees and connected components of undirected graphs."""

__version__ = "0.1.0"

# Graph algorithms
from .graphs import (
    ConnectedComponentsComputer,
    ForestDisjointSets,
    Graph,
    GraphEdge,
    GraphNode,
    KruskalMST,
    NodeColor,
    NodeState,
    PrimMST,
    PrimTree,
    connected_components,
    kruskal_mst,
    path_to_source,
    prim_mst,
    reset_node_state,
    sort_edges_by_weight,
    tree_edges,
)

# Diagnostics
from .diagnostics import (
    assert_acyclic,
    assert_partition,
    assert_prim_tree,
    assert_spanning_forest,
    debug_context,
    is_acyclic,
    is_debug_enabled,
    set_debug_enabled,
    total_weight,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    # Graphs
    "Graph",
    "GraphNode",
    "GraphEdge",
    "NodeColor",
    "ForestDisjointSets",
    "KruskalMST",
    "PrimMST",
    "PrimTree",
    "NodeState",
    "ConnectedComponentsComputer",
    "kruskal_mst",
    "prim_mst",
    "connected_components",
    "sort_edges_by_weight",
    "reset_node_state",
    "path_to_source",
    "tree_edges",
    # Diagnostics
    "total_weight",
    "is_acyclic",
    "assert_acyclic",
    "assert_spanning_forest",
    "assert_partition",
    "assert_prim_tree",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
