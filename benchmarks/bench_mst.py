"""Benchmark the spanning tree and connected components algorithms."""

import time
from typing import Dict

import numpy as np

import mstkit as mk


def random_connected_graph(n_nodes: int, edge_prob: float, seed: int = 0) -> mk.Graph:
    """Build a random connected graph with uniform weights in [0, 1)."""
    rng = np.random.default_rng(seed)
    G = mk.Graph()
    order = rng.permutation(n_nodes)
    for u, v in zip(order[:-1], order[1:]):
        G.add_edge(int(u), int(v), float(rng.random()))
    for i in range(n_nodes):
        for j in range(i + 1, n_nodes):
            if rng.random() < edge_prob and G.get_edge(i, j) is None:
                G.add_edge(i, j, float(rng.random()))
    return G


def benchmark_mst(n_nodes: int, edge_prob: float = 0.1) -> Dict[str, float]:
    """Time Kruskal, Prim and connected components on one random graph.

    Args:
        n_nodes: Number of nodes.
        edge_prob: Probability of each extra node pair being joined.

    Returns:
        Dictionary with timing results.
    """
    G = random_connected_graph(n_nodes, edge_prob)
    source = G.get_nodes()[0]

    start = time.perf_counter()
    forest = mk.kruskal_mst(G)
    kruskal_time = time.perf_counter() - start

    start = time.perf_counter()
    tree = mk.prim_mst(G, source)
    prim_time = time.perf_counter() - start

    start = time.perf_counter()
    mk.connected_components(G)
    components_time = time.perf_counter() - start

    return {
        "n_nodes": n_nodes,
        "n_edges": G.edge_count(),
        "kruskal_sec": kruskal_time,
        "prim_sec": prim_time,
        "components_sec": components_time,
        "weight_gap": abs(mk.total_weight(forest) - tree.total_weight()),
    }


if __name__ == "__main__":
    print("Benchmarking spanning trees...")

    for n in (50, 100, 200):
        results = benchmark_mst(n_nodes=n)
        print(f"{results['n_nodes']} nodes, {results['n_edges']} edges:")
        print(f"  Kruskal:    {results['kruskal_sec']*1e3:.2f} ms")
        print(f"  Prim:       {results['prim_sec']*1e3:.2f} ms")
        print(f"  Components: {results['components_sec']*1e3:.2f} ms")
        print(f"  Weight gap: {results['weight_gap']:.2e}")
