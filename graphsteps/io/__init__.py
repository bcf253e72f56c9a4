"""JSON import/export for graphs and recorded traces."""

from .json_trace import (
    TRACE_VERSION,
    dump_json_graph,
    dump_json_result,
    graph_from_json,
    graph_to_json,
    load_json_graph,
    result_to_json,
)
from .schema import json_graph_schema, validate_json_graph

__all__ = [
    "TRACE_VERSION",
    "graph_from_json",
    "graph_to_json",
    "result_to_json",
    "dump_json_result",
    "dump_json_graph",
    "load_json_graph",
    "json_graph_schema",
    "validate_json_graph",
]
