"""
Shortest-path engine: Dijkstra with a recorded trace.

The source is node index 0 and the target is index n-1. The run stops as
soon as the target is finalized, so nodes farther away than the target
never appear in the trace.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Iterable, List, Optional

from graphsteps.errors import InvalidGraphError, UnreachableTargetError
from graphsteps.logging import get_logger

from .core import AdjacencyStructure, Edge, NodeRef, build_adjacency
from .result import Result, assemble_shortest_path
from .trace import SHORTEST_PATH, EngineRun, RunState, TraceConfig, TraceEdge, traverse

logger = get_logger(__name__)


def _path_distance(distance_u: float, weight: float) -> float:
    return distance_u + weight


def _walk_parents(state: RunState, source: int, target: int) -> List[TraceEdge]:
    """Collect path edges from target back to source."""
    edges: List[TraceEdge] = []
    node = target
    while node != source:
        link = state.parents[node]
        if link is None:
            raise UnreachableTargetError(
                f"Node {node} on the path to target {target} has no parent"
            )
        edges.append(TraceEdge(link.node, node, link.weight))
        node = link.node
    return edges


def run_dijkstra(adjacency: AdjacencyStructure) -> EngineRun:
    """
    Dijkstra's algorithm from index 0 to index n-1, recording every step.

    Args:
        adjacency: Indexed graph with non-negative weights.

    Returns:
        EngineRun whose edges run target -> source.

    Raises:
        InvalidGraphError: If the graph has no nodes.
        UnreachableTargetError: If the target cannot be reached from the
            source.

    Complexity: O((V + E) log V).

    Example:
        >>> adj = build_adjacency([0, 1, 2], [Edge(0, 1, 1.0), Edge(1, 2, 2.0)])
        >>> run = run_dijkstra(adj)
        >>> run.expected_total
        3.0
    """
    n = len(adjacency)
    if n == 0:
        raise InvalidGraphError("Shortest path requires at least one node")

    source, target = adjacency.start, adjacency.target
    logger.debug("Running dijkstra over %d nodes, %d -> %d", n, source, target)

    state = traverse(adjacency, _path_distance, stop_at=target)
    if not state.stopped_early:
        logger.warning(
            "Target %r unreachable from source %r",
            adjacency.node_ids[target],
            adjacency.node_ids[source],
        )
        raise UnreachableTargetError(
            f"Target {adjacency.node_ids[target]!r} is not reachable from "
            f"source {adjacency.node_ids[source]!r}"
        )

    edges = _walk_parents(state, source, target)
    logger.debug(
        "Dijkstra finalized %d nodes, path has %d edges", len(state.finalized), len(edges)
    )
    return EngineRun(
        kind=SHORTEST_PATH,
        node_ids=adjacency.node_ids,
        steps=tuple(state.steps),
        edges=tuple(edges),
        expected_total=state.priorities[target],
    )


def shortest_path_trace(
    nodes: Iterable[NodeRef],
    edges: Iterable[Edge],
    config: Optional[TraceConfig] = None,
) -> Result:
    """
    Index a user graph, run Dijkstra and assemble the Result.

    The first node is the source and the last node is the target.

    Args:
        nodes: Node objects or ids, in index order.
        edges: Undirected weighted edges.
        config: Optional TraceConfig.

    Returns:
        Result with the path in source -> target order.

    Raises:
        InvalidGraphError: If the input cannot be indexed or is empty.
        UnreachableTargetError: If the target is not reachable.

    Example:
        >>> result = shortest_path_trace(
        ...     [0, 1, 2, 3],
        ...     [Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 4), Edge(2, 3, 1)],
        ... )
        >>> result.total
        4.0
    """
    adjacency = build_adjacency(nodes, edges)
    return assemble_shortest_path(run_dijkstra(adjacency), config)
