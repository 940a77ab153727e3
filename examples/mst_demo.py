"""Spanning tree example: Kruskal, Prim and connected components on one graph.

Builds a small road network made of two disconnected regions, computes its
minimum spanning forest with Kruskal's algorithm, grows a tree from one city
with Prim's algorithm, and lists the connected regions.
"""

from __future__ import annotations

import mstkit as mk


def main() -> None:
    """Run the three algorithms and print their results."""
    G = mk.Graph()
    G.add_edge("A", "B", 1.0)
    G.add_edge("B", "C", 2.0)
    G.add_edge("A", "C", 3.0)
    G.add_edge("C", "D", 4.0)
    # Second region, not reachable from A
    G.add_edge("X", "Y", 2.5)
    G.add_edge("Y", "Z", 1.5)
    G.add_edge("X", "Z", 3.5)

    forest = mk.kruskal_mst(G)
    print("Kruskal spanning forest:")
    for edge in sorted(forest, key=lambda e: (e.weight, str(e.node1.label))):
        print(f"  {edge.node1.label} - {edge.node2.label}  ({edge.weight})")
    print(f"  total weight: {mk.total_weight(forest)}")

    tree = mk.prim_mst(G, "A")
    print("Prim tree from A:")
    for node in G.get_nodes():
        if node.previous is not None:
            print(f"  {node.label} <- {node.previous.label}  ({node.distance})")
        elif node.label != "A":
            print(f"  {node.label} not reached")
    print(f"  total weight: {tree.total_weight()}")

    path = mk.path_to_source(tree, "D")
    print("Path from D to A: " + " -> ".join(str(n.label) for n in path))

    components = mk.connected_components(G)
    print(f"Connected components: {len(components)}")
    for component in sorted(components, key=lambda c: sorted(str(n.label) for n in c)):
        print("  {" + ", ".join(sorted(str(n.label) for n in component)) + "}")


if __name__ == "__main__":
    main()
