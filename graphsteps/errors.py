"""
Exception hierarchy for the graph indexer, the indexed heap and the engines.

Every error derives from GraphStepsError. Heap errors signal internal
invariant failures; connectivity errors signal that the caller skipped the
connectivity pre-check. None of them carry a partial result.
"""


class GraphStepsError(Exception):
    """Base class for all graphsteps errors."""


class InvalidGraphError(GraphStepsError, ValueError):
    """Input nodes/edges cannot be indexed (unknown endpoint, bad weight, ...)."""


class HeapError(GraphStepsError):
    """Indexed heap contract violation."""


class DuplicateKeyError(HeapError):
    """A key was inserted while already present in the heap."""


class UnknownKeyError(HeapError, KeyError):
    """An operation referenced a key that is not in the heap."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class PriorityIncreaseError(HeapError):
    """decrease_key was called with a priority that is not strictly lower."""


class EmptyQueueError(HeapError, IndexError):
    """extract_min was called on an empty heap."""


class ConnectivityError(GraphStepsError):
    """The graph is not connected where the algorithm requires it."""


class UnreachableTargetError(ConnectivityError):
    """Shortest-path target was never finalized."""


class DisconnectedGraphError(ConnectivityError):
    """Some node could not be attached to the spanning tree."""


class TraceConsistencyError(GraphStepsError):
    """A finished trace failed its internal cross-checks."""


__all__ = [
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
]
