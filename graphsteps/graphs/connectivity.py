"""
Connectivity pre-check for callers.

Both engines require a connected graph. Callers are expected to check this
up front and show a user-facing message instead of letting an engine fail.
"""

from collections import deque
from typing import Iterable, List

from .core import AdjacencyStructure, Edge, NodeRef, build_adjacency


def reachable_from(adjacency: AdjacencyStructure, start: int = 0) -> List[int]:
    """
    Breadth-first search over an indexed graph.

    Args:
        adjacency: Indexed graph.
        start: Index to search from.

    Returns:
        Indices reachable from start, in BFS order (start first).

    Complexity: O(V + E).
    """
    if len(adjacency) == 0:
        return []

    visited = [False] * len(adjacency)
    visited[start] = True
    order = [start]
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v, _ in adjacency.neighbors(u):
            if not visited[v]:
                visited[v] = True
                order.append(v)
                queue.append(v)

    return order


def is_connected(nodes: Iterable[NodeRef], edges: Iterable[Edge]) -> bool:
    """
    Return True if every node can reach every other node.

    An empty graph counts as connected.

    Raises:
        InvalidGraphError: If the input cannot be indexed.

    Example:
        >>> is_connected(["a", "b", "c"], [Edge("a", "b", 1.0)])
        False
    """
    adjacency = build_adjacency(nodes, edges)
    return len(reachable_from(adjacency)) == len(adjacency)
