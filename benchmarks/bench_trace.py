"""Benchmark the shortest-path and spanning-tree trace engines."""

import time
from typing import Dict, List, Tuple

import numpy as np

from graphsteps.graphs import (
    Edge,
    IndexedMinHeap,
    minimum_spanning_tree_trace,
    shortest_path_trace,
)


def random_connected_graph(
    n_nodes: int, avg_degree: float = 4.0, seed: int = 0
) -> Tuple[List[int], List[Edge]]:
    """Random spanning tree plus extra edges until the average degree is reached."""
    rng = np.random.default_rng(seed)
    edges = [
        Edge(int(rng.integers(0, i)), i, float(rng.integers(1, 100)))
        for i in range(1, n_nodes)
    ]
    n_extra = max(int(n_nodes * avg_degree / 2) - len(edges), 0)
    for u, v in rng.integers(0, n_nodes, size=(n_extra, 2)):
        edges.append(Edge(int(u), int(v), float(rng.integers(1, 100))))
    return list(range(n_nodes)), edges


def benchmark_engines(n_nodes: int, avg_degree: float = 4.0, n_runs: int = 5) -> Dict[str, float]:
    """Benchmark both engines on the same random graph.

    Args:
        n_nodes: Number of nodes.
        avg_degree: Target average node degree.
        n_runs: Number of timed runs per engine.

    Returns:
        Dictionary with timing results.
    """
    nodes, edges = random_connected_graph(n_nodes, avg_degree)

    # Warmup
    shortest_path_trace(nodes, edges)
    minimum_spanning_tree_trace(nodes, edges)

    start = time.perf_counter()
    for _ in range(n_runs):
        sp = shortest_path_trace(nodes, edges)
    sp_time = (time.perf_counter() - start) / n_runs

    start = time.perf_counter()
    for _ in range(n_runs):
        mst = minimum_spanning_tree_trace(nodes, edges)
    mst_time = (time.perf_counter() - start) / n_runs

    return {
        "n_nodes": n_nodes,
        "n_edges": len(edges),
        "dijkstra_sec": sp_time,
        "prim_sec": mst_time,
        "dijkstra_steps": len(sp.steps),
        "prim_steps": len(mst.steps),
    }


def benchmark_heap(n_keys: int, seed: int = 0) -> Dict[str, float]:
    """Benchmark insert, decrease_key and extract_min on the indexed heap."""
    rng = np.random.default_rng(seed)
    priorities = rng.random(n_keys)

    start = time.perf_counter()
    heap = IndexedMinHeap(n_keys)
    for key in range(n_keys):
        heap.insert(key, float(priorities[key]))
    for key in range(n_keys):
        heap.decrease_key(key, float(priorities[key]) / 2)
    while heap:
        heap.extract_min()
    total_time = time.perf_counter() - start

    return {
        "n_keys": n_keys,
        "total_time_sec": total_time,
        "ops_per_sec": 3 * n_keys / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking trace engines...")

    for n in [100, 1000, 10000]:
        results = benchmark_engines(n_nodes=n)
        print(f"{n} nodes, {results['n_edges']} edges:")
        print(f"  Dijkstra: {results['dijkstra_sec']*1e3:.2f} ms ({results['dijkstra_steps']} steps)")
        print(f"  Prim:     {results['prim_sec']*1e3:.2f} ms ({results['prim_steps']} steps)")

    heap_results = benchmark_heap(n_keys=100000)
    print(f"Indexed heap (100k keys): {heap_results['ops_per_sec']:.0f} ops/sec")
