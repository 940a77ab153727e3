"""Pytest configuration and shared fixtures for mstkit tests.

This module provides:
- A deterministic numpy RNG fixture
- A factory fixture building random undirected weighted graphs
"""

import os
from typing import Callable

import numpy as np
import pytest

from mstkit.graphs import Graph


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set the global numpy seed for reproducibility."""
    np.random.seed(_seed())


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random undirected graphs with integer-valued float weights.

    Args (of the returned callable):
        n_nodes: Number of nodes, labelled 0..n_nodes-1.
        edge_prob: Probability of each node pair being joined.
        connected: If True, a random spanning path is added first.
        max_weight: Weights are drawn uniformly from 0..max_weight.
    """

    def _make(
        n_nodes: int,
        edge_prob: float = 0.3,
        connected: bool = False,
        max_weight: int = 20,
    ) -> Graph:
        G = Graph()
        for i in range(n_nodes):
            G.add_node(i)

        if connected and n_nodes > 1:
            order = rng.permutation(n_nodes)
            for u, v in zip(order[:-1], order[1:]):
                G.add_edge(int(u), int(v), float(rng.integers(0, max_weight + 1)))

        for i in range(n_nodes):
            for j in range(i + 1, n_nodes):
                if rng.random() < edge_prob and G.get_edge(i, j) is None:
                    G.add_edge(i, j, float(rng.integers(0, max_weight + 1)))
        return G

    return _make
