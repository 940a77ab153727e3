"""
Graph algorithms package for mstkit.

This package provides:
- Graph data structures (Graph, GraphNode, GraphEdge)
- A disjoint-set forest (ForestDisjointSets)
- Minimum spanning trees (Kruskal, Prim)
- Connected components

All algorithms take an undirected graph, validate it before doing any work,
and iterate nodes and edges in insertion order.
"""

from .core import Graph, GraphEdge, GraphNode, NodeColor
from .disjoint_sets import ForestDisjointSets
from .mst import (
    KruskalMST,
    NodeState,
    PrimMST,
    PrimTree,
    kruskal_mst,
    prim_mst,
    sort_edges_by_weight,
)
from .components import ConnectedComponentsComputer, connected_components
from .utils import path_to_source, reset_node_state, tree_edges

__all__ = [
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
]

# Example usage:
# from mstkit.graphs import Graph, kruskal_mst, prim_mst
#
# G = Graph()
# G.add_edge('A', 'B', 1.0)
# G.add_edge('B', 'C', 2.0)
# G.add_edge('A', 'C', 3.0)
# mst = kruskal_mst(G)              # {GraphEdge('A', 'B', 1.0), GraphEdge('B', 'C', 2.0)}
# tree = prim_mst(G, 'A')
# tree.previous('C')                # GraphNode('B')
