"""Integration tests for the graphs package within mstkit."""


def test_graphs_import_from_main():
    """Test that graph algorithms can be imported from the main package."""
    from mstkit import (
        ConnectedComponentsComputer,
        Graph,
        KruskalMST,
        PrimMST,
        connected_components,
        kruskal_mst,
        prim_mst,
    )

    assert Graph is not None
    assert KruskalMST is not None
    assert PrimMST is not None
    assert ConnectedComponentsComputer is not None
    assert kruskal_mst is not None
    assert prim_mst is not None
    assert connected_components is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import mstkit
    import mstkit.graphs

    assert set(mstkit.graphs.__all__).issubset(set(mstkit.__all__))
    for name in mstkit.__all__:
        assert hasattr(mstkit, name), f"{name} listed in __all__ but missing"


def test_graphs_functional_integration():
    """Test the three algorithms together on one graph."""
    from mstkit import (
        Graph,
        connected_components,
        kruskal_mst,
        path_to_source,
        prim_mst,
        total_weight,
    )

    G = Graph()
    G.add_edge("A", "B", 1.0)
    G.add_edge("B", "C", 2.0)
    G.add_edge("A", "C", 3.0)
    G.add_edge("C", "D", 4.0)
    G.add_edge("X", "Y", 1.5)

    components = connected_components(G)
    forest = kruskal_mst(G)
    tree = prim_mst(G, "A")

    assert len(components) == 2
    assert len(forest) == G.node_count() - len(components)
    assert total_weight(forest) == tree.total_weight() + 1.5
    assert [n.label for n in path_to_source(tree, "D")] == ["D", "C", "B", "A"]
    assert path_to_source(tree, "X") is None
