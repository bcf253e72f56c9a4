"""
All-pairs shortest paths: Floyd-Warshall over an indexed graph.

Used as an independent oracle for the Dijkstra engine in tests and
benchmarks. The k-loop is vectorized with numpy broadcasting.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

import numpy as np

from .core import AdjacencyStructure


def distance_matrix(adjacency: AdjacencyStructure) -> np.ndarray:
    """
    Direct-edge distance matrix: 0 on the diagonal, the lightest parallel
    edge between i and j, inf where there is no edge.
    """
    n = len(adjacency)
    dist = np.full((n, n), np.inf, dtype=np.float64)
    np.fill_diagonal(dist, 0.0)
    for i, j, weight in adjacency.edges:
        if weight < dist[i, j]:
            dist[i, j] = weight
            dist[j, i] = weight
    return dist


def floyd_warshall(adjacency: AdjacencyStructure) -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs shortest distances.

    Args:
        adjacency: Indexed undirected graph.

    Returns:
        (n, n) float64 array; entry [i, j] is the shortest distance between
        i and j, or inf if they are in different components.

    Complexity: O(n^3).

    Example:
        >>> adj = build_adjacency(["A", "B", "C"], [Edge("A", "B", 1.0), Edge("B", "C", 2.0)])  # doctest: +SKIP
        >>> floyd_warshall(adj)[0, 2]  # doctest: +SKIP
        3.0
    """
    dist = distance_matrix(adjacency)
    for k in range(len(adjacency)):
        dist = np.minimum(dist, dist[:, k : k + 1] + dist[k : k + 1, :])
    return dist
