"""Tests for minimum spanning tree algorithms."""

import math

import pytest

from mstkit.diagnostics import is_acyclic, total_weight
from mstkit.graphs import (
    Graph,
    GraphNode,
    KruskalMST,
    NodeColor,
    PrimMST,
    connected_components,
    kruskal_mst,
    prim_mst,
    sort_edges_by_weight,
)


def scenario_graph() -> Graph:
    """A-B (1), B-C (2), A-C (3), C-D (4)."""
    G = Graph()
    G.add_edge("A", "B", 1.0)
    G.add_edge("B", "C", 2.0)
    G.add_edge("A", "C", 3.0)
    G.add_edge("C", "D", 4.0)
    return G


def edge_labels(edges):
    return {frozenset((e.node1.label, e.node2.label)) for e in edges}


def invalid_weight_graphs():
    """Graphs with one bad edge among valid ones."""
    unweighted = scenario_graph()
    unweighted.add_edge("D", "E")
    negative = scenario_graph()
    negative.add_edge("D", "E", -0.5)
    nan = scenario_graph()
    nan.add_edge("D", "E", float("nan"))
    return [unweighted, negative, nan]


class TestSortEdges:
    """Tests for the stable weight sort."""

    def test_stable_ties(self):
        """Test that equal weights keep their input order."""
        G = Graph()
        e1 = G.add_edge("A", "B", 2.0)
        e2 = G.add_edge("C", "D", 1.0)
        e3 = G.add_edge("E", "F", 2.0)
        e4 = G.add_edge("G", "H", 1.0)

        assert sort_edges_by_weight(G.get_edges()) == [e2, e4, e1, e3]

    def test_empty(self):
        """Test sorting no edges."""
        assert sort_edges_by_weight([]) == []


class TestKruskal:
    """Tests for Kruskal's algorithm."""

    def test_kruskal_scenario(self):
        """Test Kruskal on the four-node reference graph."""
        mst = KruskalMST().compute_msp(scenario_graph())

        assert edge_labels(mst) == {
            frozenset(("A", "B")),
            frozenset(("B", "C")),
            frozenset(("C", "D")),
        }
        assert total_weight(mst) == 7.0

    def test_kruskal_returns_graph_edges(self):
        """Test that the result holds the graph's own edge objects."""
        G = scenario_graph()
        mst = kruskal_mst(G)
        graph_edges = {id(e) for e in G.get_edges()}
        assert all(id(e) in graph_edges for e in mst)

    def test_kruskal_disconnected_forest(self):
        """Test Kruskal on disconnected graph (returns forest)."""
        G = Graph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("C", "D", 2.0)
        G.add_edge("D", "E", 2.0)
        G.add_edge("C", "E", 1.0)
        G.add_node("F")

        mst = kruskal_mst(G)
        # 6 nodes, 3 components
        assert len(mst) == 3
        assert total_weight(mst) == 4.0

    def test_kruskal_tie_breaking_follows_edge_order(self):
        """Test that among equal weights the earlier edge wins."""
        G = Graph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "C", 1.0)
        G.add_edge("A", "C", 1.0)

        assert edge_labels(kruskal_mst(G)) == {frozenset(("A", "B")), frozenset(("B", "C"))}

    def test_kruskal_zero_weights(self):
        """Test that zero weights are accepted."""
        G = Graph()
        G.add_edge("A", "B", 0.0)
        G.add_edge("B", "C", 0)
        assert len(kruskal_mst(G)) == 2

    def test_kruskal_ignores_self_loops(self):
        """Test that a self loop never enters the tree."""
        G = Graph()
        G.add_edge("A", "A", 0.0)
        G.add_edge("A", "B", 5.0)
        assert edge_labels(kruskal_mst(G)) == {frozenset(("A", "B"))}

    def test_kruskal_empty_and_single_node(self):
        """Test Kruskal on graphs without edges."""
        assert kruskal_mst(Graph()) == set()
        G = Graph()
        G.add_node("A")
        assert kruskal_mst(G) == set()

    def test_kruskal_does_not_mutate_graph(self):
        """Test that Kruskal leaves nodes, edges and scratch state alone."""
        G = scenario_graph()
        edges_before = [(e, e.weight) for e in G.get_edges()]
        kruskal_mst(G)
        assert [(e, e.weight) for e in G.get_edges()] == edges_before
        assert all(n.color is NodeColor.UNVISITED for n in G.get_nodes())

    def test_kruskal_none_graph(self):
        """Test that a missing graph raises TypeError."""
        with pytest.raises(TypeError):
            KruskalMST().compute_msp(None)

    def test_kruskal_directed_graph(self):
        """Test that a directed graph is rejected."""
        G = Graph(directed=True)
        G.add_edge("A", "B", 1.0)
        with pytest.raises(ValueError, match="Directed"):
            kruskal_mst(G)

    def test_kruskal_directed_checked_before_weights(self):
        """Test that directedness is reported before bad weights."""
        G = Graph(directed=True)
        G.add_edge("A", "B", -1.0)
        with pytest.raises(ValueError, match="Directed"):
            kruskal_mst(G)

    @pytest.mark.parametrize("graph", invalid_weight_graphs())
    def test_kruskal_rejects_invalid_weights(self, graph):
        """Test that one unweighted, negative or NaN edge is enough to fail."""
        with pytest.raises(ValueError, match="not weighted or has negative weights"):
            kruskal_mst(graph)

    def test_kruskal_instance_reuse(self):
        """Test that one instance gives independent results across graphs."""
        kruskal = KruskalMST()
        first = kruskal.compute_msp(scenario_graph())

        G = Graph()
        G.add_edge("X", "Y", 3.0)
        second = kruskal.compute_msp(G)

        assert len(first) == 3
        assert edge_labels(second) == {frozenset(("X", "Y"))}
        assert kruskal.compute_msp(scenario_graph()) == first

    def test_kruskal_failed_call_keeps_instance_usable(self):
        """Test that a rejected call does not break later calls."""
        kruskal = KruskalMST()
        with pytest.raises(ValueError):
            kruskal.compute_msp(invalid_weight_graphs()[1])
        assert len(kruskal.compute_msp(scenario_graph())) == 3

    @pytest.mark.parametrize("edge_prob", [0.0, 0.1, 0.3, 0.8])
    def test_kruskal_forest_size(self, random_graph, edge_prob):
        """Test that the forest has node_count - components edges."""
        G = random_graph(25, edge_prob=edge_prob)
        mst = kruskal_mst(G)
        assert len(mst) == G.node_count() - len(connected_components(G))

    def test_kruskal_connected_size(self, random_graph):
        """Test that a connected graph yields node_count - 1 edges."""
        G = random_graph(30, edge_prob=0.2, connected=True)
        assert len(kruskal_mst(G)) == 29

    def test_kruskal_acyclic(self, random_graph):
        """Test that the result never contains a cycle."""
        for _ in range(5):
            G = random_graph(20, edge_prob=0.4)
            assert is_acyclic(kruskal_mst(G))


class TestPrim:
    """Tests for Prim's algorithm."""

    def test_prim_scenario(self):
        """Test Prim from A on the four-node reference graph."""
        G = scenario_graph()
        tree = PrimMST().compute_msp(G, G.get_node("A"))

        assert tree.previous("B") == GraphNode("A")
        assert tree.previous("C") == GraphNode("B")
        assert tree.previous("D") == GraphNode("C")
        assert tree.previous("A") is None
        assert {label: tree.distance(label) for label in "BCD"} == {"B": 1.0, "C": 2.0, "D": 4.0}
        assert tree.distance("A") == 0.0
        assert tree.total_weight() == 7.0
        assert [n.label for n in tree.reached_nodes()] == ["A", "B", "C", "D"]

    def test_prim_annotates_nodes(self):
        """Test that node scratch attributes encode the tree."""
        G = scenario_graph()
        prim_mst(G, "A")

        a, b, c, d = (G.get_node(x) for x in "ABCD")
        assert d.previous is c and c.previous is b and b.previous is a
        assert a.previous is None
        assert (a.distance, b.distance, c.distance, d.distance) == (0.0, 1.0, 2.0, 4.0)
        assert all(n.color is NodeColor.VISITED for n in G.get_nodes())

    def test_prim_without_annotation(self):
        """Test that annotate_nodes=False leaves the nodes untouched."""
        G = scenario_graph()
        tree = prim_mst(G, "A", annotate_nodes=False)

        assert tree.total_weight() == 7.0
        for node in G.get_nodes():
            assert node.color is NodeColor.UNVISITED
            assert math.isinf(node.distance)
            assert node.previous is None

    def test_prim_overwrites_stale_state(self):
        """Test that a second run ignores the scratch state of the first."""
        G = scenario_graph()
        prim_mst(G, "A")
        prim_mst(G, "D")

        a, b, c, d = (G.get_node(x) for x in "ABCD")
        assert d.previous is None and d.distance == 0.0
        assert c.previous is d
        assert b.previous is c
        assert a.previous is b

    def test_prim_after_graph_mutation(self):
        """Test a rerun after adding an edge and a node."""
        G = scenario_graph()
        prim = PrimMST()
        prim.compute_msp(G, "A")

        G.add_edge("A", "D", 0.5)
        G.add_node("E")
        tree = prim.compute_msp(G, "A")

        assert tree.previous("D") == GraphNode("A")
        assert tree.total_weight() == 3.5
        e = G.get_node("E")
        assert e.color is NodeColor.UNVISITED
        assert math.isinf(e.distance)

    def test_prim_disconnected(self):
        """Test that nodes outside the source's component stay unreached."""
        G = Graph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("C", "D", 2.0)

        tree = prim_mst(G, "A")

        assert tree.previous("B") == GraphNode("A")
        for label in "CD":
            assert tree.color(label) is NodeColor.UNVISITED
            assert math.isinf(tree.distance(label))
            assert tree.previous(label) is None
            assert label not in tree
        assert len(tree) == 2
        assert tree.total_weight() == 1.0

    def test_prim_single_node(self):
        """Test Prim on a single node graph."""
        G = Graph()
        G.add_node("A")
        tree = prim_mst(G, "A")
        assert tree.edges() == []
        assert tree.distance("A") == 0.0
        assert "A" in tree

    def test_prim_equal_weights(self):
        """Test that ties still give a tree of minimum weight."""
        G = Graph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("A", "C", 1.0)
        G.add_edge("B", "C", 1.0)

        tree = prim_mst(G, "A")
        assert len(tree.edges()) == 2
        assert tree.total_weight() == 2.0

    def test_prim_unknown_node_lookup(self):
        """Test that tree lookups of foreign nodes raise KeyError."""
        tree = prim_mst(scenario_graph(), "A")
        with pytest.raises(KeyError):
            tree.distance("Z")
        assert "Z" not in tree

    def test_prim_none_arguments(self):
        """Test that a missing graph or source raises TypeError."""
        G = scenario_graph()
        with pytest.raises(TypeError):
            PrimMST().compute_msp(None, G.get_node("A"))
        with pytest.raises(TypeError):
            PrimMST().compute_msp(G, None)

    def test_prim_source_not_in_graph(self):
        """Test that a foreign source is rejected."""
        with pytest.raises(ValueError, match="not present"):
            prim_mst(scenario_graph(), "Z")

    def test_prim_source_checked_before_direction(self):
        """Test that a missing source is reported before directedness."""
        G = Graph(directed=True)
        G.add_edge("A", "B", 1.0)
        with pytest.raises(ValueError, match="not present"):
            prim_mst(G, "Z")

    def test_prim_directed_graph(self):
        """Test that a directed graph is rejected."""
        G = Graph(directed=True)
        G.add_edge("A", "B", 1.0)
        with pytest.raises(ValueError, match="Directed"):
            prim_mst(G, "A")

    @pytest.mark.parametrize("graph", invalid_weight_graphs())
    def test_prim_rejects_invalid_weights(self, graph):
        """Test that one unweighted, negative or NaN edge is enough to fail."""
        with pytest.raises(ValueError, match="not weighted or has negative weights"):
            prim_mst(graph, "A")

    def test_prim_rejected_call_leaves_nodes_alone(self):
        """Test that validation happens before any node is touched."""
        G = invalid_weight_graphs()[1]
        with pytest.raises(ValueError):
            prim_mst(G, "A")
        assert all(n.color is NodeColor.UNVISITED for n in G.get_nodes())

    def test_prim_tree_validity(self, random_graph):
        """Test that every predecessor chain reaches the source without cycles."""
        G = random_graph(25, edge_prob=0.2, connected=True)
        source = G.get_nodes()[7]
        tree = prim_mst(G, source)
        n = G.node_count()

        for node in G.get_nodes():
            if node == source:
                continue
            assert node.previous is not None
            current, steps = node, 0
            while current != source:
                current = current.previous
                steps += 1
                assert steps <= n - 1

    def test_prim_vs_kruskal(self, random_graph):
        """Test that Prim and Kruskal produce the same MST weight from every source."""
        for _ in range(3):
            G = random_graph(15, edge_prob=0.3, connected=True)
            kruskal_weight = total_weight(kruskal_mst(G))
            for source in G.get_nodes():
                prim_mst(G, source)
                prim_weight = math.fsum(
                    n.distance for n in G.get_nodes() if n != source
                )
                assert prim_weight == pytest.approx(kruskal_weight)
