"""Pytest configuration and shared fixtures for graphsteps tests.

This module provides:
- A deterministic numpy RNG fixture
- A factory for random connected weighted graphs
- A fixture that restores the global debug-mode flag after each test
"""

import os
from typing import Callable, List, Tuple

import numpy as np
import pytest

from graphsteps.diagnostics import is_debug_enabled, set_debug_enabled
from graphsteps.graphs import Edge

RandomGraph = Tuple[List[int], List[Edge]]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


def make_connected_graph(
    rng: np.random.Generator,
    n: int,
    extra_edge_prob: float = 0.4,
    max_weight: int = 20,
) -> RandomGraph:
    """Build a random connected graph on nodes 0..n-1 with integer weights.

    A random spanning tree guarantees connectivity; every other pair is then
    joined with probability extra_edge_prob.
    """
    nodes = list(range(n))
    edges: List[Edge] = []
    order = rng.permutation(n).tolist()
    for pos in range(1, n):
        parent = order[int(rng.integers(0, pos))]
        edges.append(Edge(parent, order[pos], int(rng.integers(1, max_weight + 1))))

    linked = {frozenset((e.first, e.second)) for e in edges}
    for i in range(n):
        for j in range(i + 1, n):
            if frozenset((i, j)) not in linked and rng.random() < extra_edge_prob:
                edges.append(Edge(i, j, int(rng.integers(1, max_weight + 1))))
    return nodes, edges


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., RandomGraph]:
    """Factory fixture: random_graph(n, extra_edge_prob=0.4, max_weight=20)."""

    def factory(n: int, extra_edge_prob: float = 0.4, max_weight: int = 20) -> RandomGraph:
        return make_connected_graph(rng, n, extra_edge_prob, max_weight)

    return factory


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture so tests that toggle debug mode cannot leak it."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
