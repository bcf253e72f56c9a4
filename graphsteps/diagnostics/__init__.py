"""Diagnostics and debugging utilities for graphsteps."""

from .core import (
    assert_path_chain,
    assert_spanning_tree_size,
    assert_total_consistent,
    assert_unique_targets,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_total_consistent",
    "assert_unique_targets",
    "assert_path_chain",
    "assert_spanning_tree_size",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
