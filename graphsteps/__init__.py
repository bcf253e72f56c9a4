"""graphsteps - step-recording Dijkstra and Prim engines for graph animation."""

__version__ = "0.1.0"

# Error taxonomy
from .errors import (
    ConnectivityError,
    DisconnectedGraphError,
    DuplicateKeyError,
    EmptyQueueError,
    GraphStepsError,
    HeapError,
    InvalidGraphError,
    PriorityIncreaseError,
    TraceConsistencyError,
    UnknownKeyError,
    UnreachableTargetError,
)

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Graph algorithms
from .graphs import (
    AdjacencyStructure,
    Edge,
    IndexedMinHeap,
    Node,
    Result,
    Step,
    SubStep,
    TraceConfig,
    TraceEdge,
    assemble_shortest_path,
    assemble_spanning_tree,
    build_adjacency,
    floyd_warshall,
    is_connected,
    kruskal_mst,
    minimum_spanning_tree_trace,
    run_dijkstra,
    run_prim,
    shortest_path_trace,
)

# I/O
from .io import graph_from_json, load_json_graph, result_to_json

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Errors
    "GraphStepsError",
    "InvalidGraphError",
    "HeapError",
    "DuplicateKeyError",
    "UnknownKeyError",
    "PriorityIncreaseError",
    "EmptyQueueError",
    "ConnectivityError",
    "UnreachableTargetError",
    "DisconnectedGraphError",
    "TraceConsistencyError",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Graphs
    "Node",
    "Edge",
    "AdjacencyStructure",
    "build_adjacency",
    "IndexedMinHeap",
    "TraceEdge",
    "SubStep",
    "Step",
    "TraceConfig",
    "Result",
    "run_dijkstra",
    "run_prim",
    "assemble_shortest_path",
    "assemble_spanning_tree",
    "shortest_path_trace",
    "minimum_spanning_tree_trace",
    "is_connected",
    "kruskal_mst",
    "floyd_warshall",
    # I/O
    "graph_from_json",
    "load_json_graph",
    "result_to_json",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
