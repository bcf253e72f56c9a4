"""
Result assembly: turn raw engine runs into caller-facing results.

Shortest-path runs discover their path target -> source and are reversed
here; spanning-tree edges keep discovery order. In both cases the answer
total is recomputed from the answer edges and cross-checked against the
engine's own priorities.
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple, Union

from graphsteps.diagnostics import (
    assert_path_chain,
    assert_spanning_tree_size,
    assert_total_consistent,
    assert_unique_targets,
    is_debug_enabled,
)
from graphsteps.errors import TraceConsistencyError
from graphsteps.logging import get_logger

from .trace import (
    MINIMUM_SPANNING_TREE,
    SHORTEST_PATH,
    EngineRun,
    Step,
    SubStep,
    TraceConfig,
    TraceEdge,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Result:
    """
    Fully materialized outcome of one engine run.

    Attributes:
        kind: SHORTEST_PATH or MINIMUM_SPANNING_TREE.
        steps: One Step per finalized non-start node, in finalization order.
        answer: Path edges in start -> target order, or spanning-tree edges
            in discovery order.
        total: Sum of the answer edge weights.
        node_ids: Index -> node id mapping, for display.
    """

    kind: str
    steps: Tuple[Step, ...]
    answer: Tuple[TraceEdge, ...]
    total: float
    node_ids: Tuple[Hashable, ...] = ()

    def flatten(self) -> Iterator[Union[SubStep, Step]]:
        """
        Yield events in playback order: each step's sub-steps, then the step.

        Example:
            >>> [type(e).__name__ for e in result.flatten()]  # doctest: +SKIP
            ['TraceEdge', 'TraceEdge', 'Step', 'TraceEdge', 'Step']
        """
        for step in self.steps:
            yield from step.sub_steps
            yield step

    def answer_by_id(self) -> List[Tuple[Hashable, Hashable, float]]:
        """Answer edges as (node_id, node_id, weight) triples."""
        return [
            (self.node_ids[edge.source], self.node_ids[edge.target], edge.weight)
            for edge in self.answer
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "steps": [step.to_dict() for step in self.steps],
            "answer": [edge.to_dict() for edge in self.answer],
            "total": self.total,
            "nodeIds": list(self.node_ids),
        }


def _finish(run: EngineRun, answer: Tuple[TraceEdge, ...], config: Optional[TraceConfig]) -> Result:
    config = config or TraceConfig()
    total = sum((edge.weight for edge in answer), 0.0)

    try:
        assert_total_consistent(total, run.expected_total, atol=config.consistency_tol)
        result = Result(
            kind=run.kind,
            steps=run.steps,
            answer=answer,
            total=total,
            node_ids=run.node_ids,
        )
        if config.check_trace or is_debug_enabled():
            validate_result(result)
    except TraceConsistencyError as exc:
        logger.warning("Inconsistent %s trace: %s", run.kind, exc)
        raise

    return result


def validate_result(result: Result) -> None:
    """
    Run every structural check on an assembled result.

    Raises:
        TraceConsistencyError: If any check fails.
    """
    n = len(result.node_ids)
    assert_unique_targets(result.steps, n)
    assert_total_consistent(result.total, sum((e.weight for e in result.answer), 0.0))
    if result.kind == SHORTEST_PATH:
        assert_path_chain(result.answer, 0, n - 1)
    elif result.kind == MINIMUM_SPANNING_TREE:
        assert_spanning_tree_size(result.answer, n)
        assert_spanning_tree_size(result.steps, n)


def assemble_shortest_path(run: EngineRun, config: Optional[TraceConfig] = None) -> Result:
    """
    Wrap a Dijkstra run, reversing its path into start -> target order.

    Raises:
        ValueError: If run is not a shortest-path run.
        TraceConsistencyError: If the path weight disagrees with the
            target's distance.
    """
    if run.kind != SHORTEST_PATH:
        raise ValueError(f"Expected a {SHORTEST_PATH} run, got {run.kind!r}")
    return _finish(run, tuple(reversed(run.edges)), config)


def assemble_spanning_tree(run: EngineRun, config: Optional[TraceConfig] = None) -> Result:
    """
    Wrap a Prim run, keeping tree edges in discovery order.

    Raises:
        ValueError: If run is not a spanning-tree run.
        TraceConsistencyError: If the tree weight disagrees with the sum of
            finalized priorities.
    """
    if run.kind != MINIMUM_SPANNING_TREE:
        raise ValueError(f"Expected a {MINIMUM_SPANNING_TREE} run, got {run.kind!r}")
    return _finish(run, run.edges, config)
