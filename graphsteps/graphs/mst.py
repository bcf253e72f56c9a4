"""
Minimum spanning tree: Prim with a recorded trace, Kruskal as a cross-check.

Prim grows the tree from node index 0; a node's priority is the weight of
the cheapest known edge connecting it to the tree. Kruskal works on the
indexed edge list with a union-find and records no trace; it exists to
verify Prim's total independently.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

from typing import Iterable, List, Optional, Tuple

from graphsteps.errors import DisconnectedGraphError
from graphsteps.logging import get_logger

from .core import AdjacencyStructure, Edge, NodeRef, build_adjacency
from .result import Result, assemble_spanning_tree
from .trace import MINIMUM_SPANNING_TREE, EngineRun, TraceConfig, TraceEdge, traverse

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) over indices 0..n-1 with path compression and union by rank.

    Used by Kruskal's algorithm for cycle detection.
    """

    def __init__(self, n: int):
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n

    def find(self, x: int) -> int:
        """Find root of x with path compression."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Union sets containing x and y using union by rank.

        Returns:
            True if x and y were in different sets, False otherwise.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


def kruskal_mst(
    n: int, edges: Iterable[Tuple[int, int, float]]
) -> List[Tuple[int, int, float]]:
    """
    Kruskal's algorithm over indexed edges.

    Args:
        n: Number of nodes (indices 0..n-1).
        edges: Iterable of (i, j, weight) tuples, e.g. AdjacencyStructure.edges.

    Returns:
        MST edges in the order they were accepted (non-decreasing weight).
        For a disconnected graph this is a spanning forest.

    Complexity: O(E log E).

    Example:
        >>> kruskal_mst(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 3.0)])
        [(0, 1, 1.0), (1, 2, 2.0)]
    """
    # Stable sort keeps input order among equal weights
    edge_list = sorted(edges, key=lambda e: e[2])

    uf = UnionFind(n)
    mst_edges: List[Tuple[int, int, float]] = []
    for i, j, weight in edge_list:
        if uf.union(i, j):
            mst_edges.append((i, j, weight))
    return mst_edges


def _edge_weight(_weight_u: float, weight: float) -> float:
    return weight


def run_prim(adjacency: AdjacencyStructure) -> EngineRun:
    """
    Prim's algorithm rooted at index 0, recording every step.

    Args:
        adjacency: Indexed, connected graph.

    Returns:
        EngineRun whose edges are the tree edges in discovery order.

    Raises:
        DisconnectedGraphError: If some node cannot be reached from the root.

    Complexity: O((V + E) log V).

    Example:
        >>> adj = build_adjacency([0, 1, 2], [Edge(0, 1, 1.0), Edge(1, 2, 2.0), Edge(0, 2, 3.0)])
        >>> [(e.source, e.target) for e in run_prim(adj).edges]
        [(0, 1), (1, 2)]
    """
    n = len(adjacency)
    logger.debug("Running prim over %d nodes", n)

    state = traverse(adjacency, _edge_weight)
    if state.stranded is not None:
        finalized = set(state.finalized)
        missing = [adjacency.node_ids[i] for i in range(n) if i not in finalized]
        logger.warning("Spanning tree cannot reach %d node(s): %r", len(missing), missing)
        raise DisconnectedGraphError(
            f"Graph is disconnected: node {adjacency.node_ids[state.stranded]!r} "
            f"is not reachable from root {adjacency.node_ids[adjacency.start]!r}"
        )

    edges = tuple(TraceEdge(step.source, step.target, step.weight) for step in state.steps)
    expected = 0.0
    for node in state.finalized:
        expected += state.priorities[node]

    logger.debug("Prim finalized %d nodes, tree has %d edges", len(state.finalized), len(edges))
    return EngineRun(
        kind=MINIMUM_SPANNING_TREE,
        node_ids=adjacency.node_ids,
        steps=tuple(state.steps),
        edges=edges,
        expected_total=expected,
    )


def minimum_spanning_tree_trace(
    nodes: Iterable[NodeRef],
    edges: Iterable[Edge],
    config: Optional[TraceConfig] = None,
) -> Result:
    """
    Index a user graph, run Prim from the first node and assemble the Result.

    Args:
        nodes: Node objects or ids; the first one is the root.
        edges: Undirected weighted edges.
        config: Optional TraceConfig.

    Returns:
        Result whose answer holds n-1 tree edges.

    Raises:
        InvalidGraphError: If the input cannot be indexed.
        DisconnectedGraphError: If the graph is not connected.
    """
    adjacency = build_adjacency(nodes, edges)
    return assemble_spanning_tree(run_prim(adjacency), config)
