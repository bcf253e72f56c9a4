"""Consistency checks for recorded traces.

The helpers operate on anything with ``source``, ``target`` and ``weight``
attributes (steps, sub-steps and answer edges) so they can be used on raw
engine output as well as on assembled results.
"""

from __future__ import annotations

from typing import Any, Sequence

from graphsteps.errors import TraceConsistencyError


def assert_total_consistent(total: float, expected: float, atol: float = 1e-9) -> None:
    """
    Assert that an answer total matches the engine's own running priority.

    Parameters
    ----------
    total:
        Sum of the answer edge weights.
    expected:
        Target distance (shortest path) or sum of finalized priorities
        (spanning tree).
    atol:
        Absolute tolerance.

    Raises
    ------
    TraceConsistencyError
        If the two values differ by more than atol.
    """
    if abs(total - expected) > atol:
        raise TraceConsistencyError(
            f"Answer total {total} does not match engine total {expected} "
            f"(atol={atol})."
        )


def assert_unique_targets(steps: Sequence[Any], n_nodes: int, start: int = 0) -> None:
    """
    Assert that every step finalizes a distinct, valid, non-start node.

    Also checks that every sub-step of a step was made from a node that was
    already finalized at that point.

    Raises
    ------
    TraceConsistencyError
        On a repeated, out-of-range or start target, or on a sub-step
        issued from a node that was not finalized yet.
    """
    finalized = {start}
    for i, step in enumerate(steps):
        if not 0 <= step.target < n_nodes:
            raise TraceConsistencyError(
                f"Step {i} targets {step.target}, outside [0, {n_nodes})."
            )
        if step.target in finalized:
            raise TraceConsistencyError(
                f"Step {i} finalizes node {step.target} a second time."
            )
        if step.source not in finalized:
            raise TraceConsistencyError(
                f"Step {i} attaches node {step.target} to unfinalized node {step.source}."
            )
        for sub in step.sub_steps:
            if sub.source not in finalized:
                raise TraceConsistencyError(
                    f"Step {i} has a sub-step from unfinalized node {sub.source}."
                )
        finalized.add(step.target)


def assert_path_chain(edges: Sequence[Any], start: int, target: int) -> None:
    """
    Assert that edges form a contiguous walk from start to target.

    An empty edge list is accepted only when start == target.

    Raises
    ------
    TraceConsistencyError
        If the edges do not chain from start to target.
    """
    current = start
    for i, edge in enumerate(edges):
        if edge.source != current:
            raise TraceConsistencyError(
                f"Path edge {i} starts at {edge.source}, expected {current}."
            )
        current = edge.target
    if current != target:
        raise TraceConsistencyError(f"Path ends at {current}, expected {target}.")


def assert_spanning_tree_size(edges: Sequence[Any], n_nodes: int) -> None:
    """
    Assert that a spanning tree over n_nodes has exactly n_nodes - 1 edges.

    Raises
    ------
    TraceConsistencyError
        If the edge count is wrong.
    """
    expected = max(n_nodes - 1, 0)
    if len(edges) != expected:
        raise TraceConsistencyError(
            f"Spanning tree over {n_nodes} nodes has {len(edges)} edges, "
            f"expected {expected}."
        )
