"""
Trace records and the shared frontier traversal.

Dijkstra and Prim run the same loop: every node starts in the frontier,
the minimum-priority node is extracted and finalized, a Step is emitted for
the edge that attached it, and its still-unfinalized neighbors are relaxed.
The two engines differ only in how a candidate priority is computed and in
whether the loop may stop early, so both are expressed as calls to
traverse() with a relaxation function and an optional stop node.

All per-run state lives in a RunState created by traverse() and handed back
to the calling engine; nothing is shared between runs.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from .core import AdjacencyStructure
from .heap import IndexedMinHeap

SHORTEST_PATH = "shortest_path"
MINIMUM_SPANNING_TREE = "minimum_spanning_tree"


@dataclass(frozen=True)
class TraceEdge:
    """
    An undirected edge between two node indices, as seen by the playback layer.

    Used for relaxation attempts (SubStep) and for answer edges.
    """

    source: int
    target: int
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "weight": self.weight}


SubStep = TraceEdge


@dataclass(frozen=True)
class Step:
    """
    Finalization of one node.

    Attributes:
        source: Index of the parent that attached the node.
        target: Index of the finalized node.
        weight: Priority of the node when it was extracted (distance from
            the source for Dijkstra, connecting edge weight for Prim).
        sub_steps: Relaxation attempts made since the previous Step, in
            the order they were tried.
    """

    source: int
    target: int
    weight: float
    sub_steps: Tuple[SubStep, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "weight": self.weight,
            "subSteps": [sub.to_dict() for sub in self.sub_steps],
        }


@dataclass(frozen=True)
class ParentLink:
    """Edge that last improved a node's priority."""

    node: int
    weight: float


@dataclass(frozen=True)
class TraceConfig:
    """
    Per-run options for the engines.

    Attributes:
        consistency_tol: Absolute tolerance when cross-checking the answer
            total against the engine's own priorities.
        check_trace: Validate the finished Result even when debug mode is off.
    """

    consistency_tol: float = 1e-9
    check_trace: bool = False

    def __post_init__(self) -> None:
        """Validate TraceConfig invariants."""
        if math.isnan(self.consistency_tol) or self.consistency_tol < 0:
            raise ValueError(
                f"consistency_tol must be non-negative, got {self.consistency_tol}."
            )


RelaxFn = Callable[[float, float], float]


@dataclass
class RunState:
    """
    Mutable bookkeeping of one traversal.

    Attributes:
        priorities: Current priority of every node (inf until reached).
        parents: Parent link of every node; None for the start node and for
            nodes not reached yet.
        in_frontier: False once a node has been extracted.
        steps: Steps emitted so far, in finalization order.
        finalized: Node indices in the order they were finalized.
        stranded: First node extracted with infinite priority, if any.
        stopped_early: True if the loop ended at the stop node.
    """

    priorities: List[float]
    parents: List[Optional[ParentLink]]
    in_frontier: List[bool]
    steps: List[Step] = field(default_factory=list)
    finalized: List[int] = field(default_factory=list)
    stranded: Optional[int] = None
    stopped_early: bool = False

    @classmethod
    def fresh(cls, n: int, start: int) -> "RunState":
        priorities = [math.inf] * n
        if n:
            priorities[start] = 0.0
        return cls(
            priorities=priorities,
            parents=[None] * n,
            in_frontier=[True] * n,
        )


@dataclass(frozen=True)
class EngineRun:
    """
    Raw engine output handed to the result assembler.

    Attributes:
        kind: SHORTEST_PATH or MINIMUM_SPANNING_TREE.
        node_ids: Index -> node id mapping of the traversed graph.
        steps: Emitted steps in finalization order.
        edges: Answer edges in discovery order. For shortest paths this is
            target -> source, as found by walking parent links.
        expected_total: The engine's own view of the answer weight (target
            distance, or sum of the finalized priorities for a tree).
    """

    kind: str
    node_ids: Tuple[Hashable, ...]
    steps: Tuple[Step, ...]
    edges: Tuple[TraceEdge, ...]
    expected_total: float


def traverse(
    adjacency: AdjacencyStructure,
    relax: RelaxFn,
    stop_at: Optional[int] = None,
) -> RunState:
    """
    Run the frontier/finalize/relax loop from adjacency.start.

    The loop ends when the frontier is empty, when stop_at is finalized, or
    when the extracted node has infinite priority (recorded in
    RunState.stranded; the caller decides which error that is).

    Args:
        adjacency: Indexed graph.
        relax: relax(priority_of_active, edge_weight) -> candidate priority.
        stop_at: Node index that ends the run once finalized.

    Returns:
        The RunState of the finished traversal.

    Complexity: O((V + E) log V).
    """
    n = len(adjacency)
    state = RunState.fresh(n, adjacency.start)
    frontier = IndexedMinHeap(n)
    for node in range(n):
        frontier.insert(node, state.priorities[node])

    sub_steps: List[SubStep] = []
    while not frontier.is_empty():
        u, priority_u = frontier.extract_min()
        state.in_frontier[u] = False

        if math.isinf(priority_u):
            state.stranded = u
            break

        state.finalized.append(u)
        link = state.parents[u]
        if link is not None:
            state.steps.append(Step(link.node, u, priority_u, tuple(sub_steps)))

        if u == stop_at:
            state.stopped_early = True
            break

        sub_steps = []
        for v, weight in adjacency.neighbors(u):
            if not state.in_frontier[v]:
                continue
            sub_steps.append(SubStep(u, v, weight))
            candidate = relax(priority_u, weight)
            if candidate < state.priorities[v]:
                state.priorities[v] = candidate
                state.parents[v] = ParentLink(u, weight)
                frontier.decrease_key(v, candidate)

    return state
