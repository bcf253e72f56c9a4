"""
Core graph data structures and the graph indexer.

User-level graphs are a collection of Node objects and a collection of
undirected, weighted Edge objects that reference nodes by id. The engines
never see those objects: build_adjacency converts them into a dense,
integer-indexed AdjacencyStructure where index 0 is the start node and
index n-1 is the shortest-path target.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional, Tuple, Union

from graphsteps.errors import InvalidGraphError
from graphsteps.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Node:
    """
    A user-drawn node.

    Attributes:
        id: Hashable identifier, unique within a graph.
        x: Horizontal canvas position (display only).
        y: Vertical canvas position (display only).
    """

    id: Hashable
    x: float = 0.0
    y: float = 0.0


NodeRef = Union[Node, Hashable]


@dataclass(frozen=True)
class Edge:
    """
    An undirected weighted edge between two nodes.

    Attributes:
        first: Id of one endpoint (a Node is also accepted).
        second: Id of the other endpoint (a Node is also accepted).
        weight: Non-negative edge weight.
        id: Optional edge identifier, carried for the caller's benefit.
    """

    first: NodeRef
    second: NodeRef
    weight: float
    id: Optional[Hashable] = None


def node_id(ref: NodeRef) -> Hashable:
    """Return the id of a Node, or the reference itself if it is already an id."""
    return ref.id if isinstance(ref, Node) else ref


@dataclass(frozen=True)
class AdjacencyStructure:
    """
    Dense undirected adjacency list over node indices 0..n-1.

    Attributes:
        slots: slots[i] is the tuple of (neighbor_index, weight) pairs of
            node i. Every edge between i and j appears in slot i and slot j;
            a self-loop appears twice in its own slot.
        node_ids: node_ids[i] is the id of the node assigned index i.
        edges: Indexed (i, j, weight) triples in input edge order.

    Complexity:
        - neighbors: O(1)
        - index_of: O(1)
    """

    slots: Tuple[Tuple[Tuple[int, float], ...], ...]
    node_ids: Tuple[Hashable, ...]
    edges: Tuple[Tuple[int, int, float], ...] = ()
    _index: Dict[Hashable, int] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.node_ids) != len(self.slots):
            raise InvalidGraphError(
                f"node_ids has {len(self.node_ids)} entries for {len(self.slots)} slots"
            )
        if not self._index and self.node_ids:
            object.__setattr__(
                self, "_index", {key: i for i, key in enumerate(self.node_ids)}
            )

    def __len__(self) -> int:
        return len(self.slots)

    def neighbors(self, index: int) -> Tuple[Tuple[int, float], ...]:
        """
        Return the (neighbor_index, weight) pairs of a node.

        Raises:
            IndexError: If index is outside 0..n-1.
        """
        return self.slots[index]

    def index_of(self, node: NodeRef) -> int:
        """
        Return the index assigned to a node.

        Raises:
            InvalidGraphError: If the node is not part of the graph.
        """
        key = node_id(node)
        if key not in self._index:
            raise InvalidGraphError(f"Node {key!r} not in graph")
        return self._index[key]

    @property
    def start(self) -> int:
        """Index of the source / spanning-tree root."""
        return 0

    @property
    def target(self) -> int:
        """Index of the shortest-path target (-1 for an empty graph)."""
        return len(self.slots) - 1


def _checked_weight(weight: object, edge_no: int) -> float:
    try:
        value = float(weight)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidGraphError(
            f"Edge {edge_no} has non-numeric weight {weight!r}"
        ) from None
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidGraphError(
            f"Edge weights must be finite and non-negative. "
            f"Found weight {weight!r} on edge {edge_no}"
        )
    return value


def build_adjacency(nodes: Iterable[NodeRef], edges: Iterable[Edge]) -> AdjacencyStructure:
    """
    Index a node/edge collection into an AdjacencyStructure.

    Nodes are indexed in input order. Parallel edges and self-loops are kept
    as given.

    Args:
        nodes: Node objects or bare node ids. Order defines the indices.
        edges: Edges whose endpoints reference nodes by id.

    Returns:
        AdjacencyStructure with symmetric slots.

    Raises:
        InvalidGraphError: If a node id repeats, an edge references an
            unknown node, or an edge weight is negative or not a number.

    Complexity: O(V + E).

    Example:
        >>> adj = build_adjacency(["a", "b"], [Edge("a", "b", 2.0)])
        >>> adj.neighbors(0)
        ((1, 2.0),)
    """
    index: Dict[Hashable, int] = {}
    node_ids: List[Hashable] = []
    for node in nodes:
        key = node_id(node)
        if key in index:
            raise InvalidGraphError(f"Duplicate node id {key!r}")
        index[key] = len(node_ids)
        node_ids.append(key)

    slots: List[List[Tuple[int, float]]] = [[] for _ in node_ids]
    indexed_edges: List[Tuple[int, int, float]] = []

    for edge_no, edge in enumerate(edges):
        first, second = node_id(edge.first), node_id(edge.second)
        for endpoint in (first, second):
            if endpoint not in index:
                raise InvalidGraphError(
                    f"Edge {edge_no} references unknown node {endpoint!r}"
                )
        weight = _checked_weight(edge.weight, edge_no)
        i, j = index[first], index[second]
        slots[i].append((j, weight))
        slots[j].append((i, weight))
        indexed_edges.append((i, j, weight))

    logger.debug("Indexed graph with %d nodes and %d edges", len(node_ids), len(indexed_edges))

    return AdjacencyStructure(
        slots=tuple(tuple(slot) for slot in slots),
        node_ids=tuple(node_ids),
        edges=tuple(indexed_edges),
        _index=index,
    )
