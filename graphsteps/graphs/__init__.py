"""
Graph algorithm tracing package for graphsteps.

This package provides:
- Graph input types (Node, Edge) and the indexer (build_adjacency)
- An indexed binary min-heap with decrease-key
- Dijkstra (shortest path) and Prim (minimum spanning tree) engines that
  record every relaxation attempt and finalization as a Step trace
- Result assembly with internal consistency checks
- Connectivity pre-check, Kruskal and Floyd-Warshall cross-checks

Index 0 is always the start node and index n-1 the shortest-path target;
indices follow the input node order.
"""

from .allpairs import distance_matrix, floyd_warshall
from .connectivity import is_connected, reachable_from
from .core import AdjacencyStructure, Edge, Node, build_adjacency, node_id
from .heap import IndexedMinHeap
from .mst import UnionFind, kruskal_mst, minimum_spanning_tree_trace, run_prim
from .result import Result, assemble_shortest_path, assemble_spanning_tree, validate_result
from .shortest import run_dijkstra, shortest_path_trace
from .trace import (
    MINIMUM_SPANNING_TREE,
    SHORTEST_PATH,
    EngineRun,
    ParentLink,
    RunState,
    Step,
    SubStep,
    TraceConfig,
    TraceEdge,
    traverse,
)

__all__ = [
    "Node",
    "Edge",
    "AdjacencyStructure",
    "build_adjacency",
    "node_id",
    "IndexedMinHeap",
    "TraceEdge",
    "SubStep",
    "Step",
    "ParentLink",
    "TraceConfig",
    "RunState",
    "EngineRun",
    "traverse",
    "SHORTEST_PATH",
    "MINIMUM_SPANNING_TREE",
    "run_dijkstra",
    "shortest_path_trace",
    "run_prim",
    "minimum_spanning_tree_trace",
    "UnionFind",
    "kruskal_mst",
    "Result",
    "assemble_shortest_path",
    "assemble_spanning_tree",
    "validate_result",
    "is_connected",
    "reachable_from",
    "floyd_warshall",
    "distance_matrix",
]

# Example usage:
# from graphsteps.graphs import Edge, shortest_path_trace
#
# result = shortest_path_trace(
#     ["A", "B", "C"],
#     [Edge("A", "B", 1.0), Edge("B", "C", 2.0), Edge("A", "C", 5.0)],
# )
# result.total  # 3.0
# [(s.source, s.target) for s in result.steps]  # [(0, 1), (1, 2)]
