"""JSON import and export for graphs and recorded traces.

Graphs are read from and written to the saved-graph shape described in
schema.py. Results are exported with the key names the playback layer
iterates over (``from``, ``to``, ``weight``, ``subSteps``).
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from graphsteps.graphs import Edge, Node, Result, node_id

from .schema import endpoint_id, validate_json_graph

TRACE_VERSION = "graphsteps-trace-1.0"


def graph_from_json(obj: dict) -> Tuple[List[Node], List[Edge]]:
    """
    Convert a JSON graph object to node and edge lists.

    Parameters
    ----------
    obj : dict
        JSON graph object following the schema defined in schema.py.

    Returns
    -------
    tuple
        (nodes, edges) ready for build_adjacency or the *_trace functions.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    validate_json_graph(obj)

    nodes = [
        Node(id=item["id"], x=float(item.get("x", 0.0)), y=float(item.get("y", 0.0)))
        for item in obj["nodes"]
    ]
    edges = [
        Edge(
            first=endpoint_id(item["firstNode"]),
            second=endpoint_id(item["secondNode"]),
            weight=item["weight"],
            id=item.get("id"),
        )
        for item in obj["edges"]
    ]
    return nodes, edges


def graph_to_json(
    nodes: Sequence[Node], edges: Sequence[Edge], graph_id: Optional[str] = None
) -> dict:
    """
    Convert node and edge lists to a JSON graph object.

    Edge endpoints are written as full node objects, as the front end saves
    them.
    """
    node_objs: Dict[Any, Dict[str, Any]] = {}
    for node in nodes:
        node_objs[node.id] = {"id": node.id, "x": node.x, "y": node.y}

    edge_objs = []
    for edge in edges:
        first, second = node_id(edge.first), node_id(edge.second)
        edge_obj: Dict[str, Any] = {
            "weight": edge.weight,
            "firstNode": node_objs.get(first, first),
            "secondNode": node_objs.get(second, second),
        }
        if edge.id is not None:
            edge_obj["id"] = edge.id
        edge_objs.append(edge_obj)

    result: Dict[str, Any] = {"nodes": list(node_objs.values()), "edges": edge_objs}
    if graph_id is not None:
        result["id"] = graph_id
    return result


def result_to_json(result: Result, metadata: Optional[dict] = None) -> dict:
    """
    Convert a Result to a JSON object for the playback layer.

    Parameters
    ----------
    result : Result
        Assembled engine result.
    metadata : dict, optional
        Extra JSON-serializable information (producer, notes, ...).
    """
    obj: Dict[str, Any] = {"version": TRACE_VERSION}
    obj.update(result.to_dict())
    if metadata:
        obj["metadata"] = metadata
    return obj


def dump_json_result(result: Result, path: str) -> None:
    """Write a Result to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result_to_json(result), f, indent=2, ensure_ascii=False)


def dump_json_graph(nodes: Sequence[Node], edges: Sequence[Edge], path: str) -> None:
    """Write a graph to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(graph_to_json(nodes, edges), f, indent=2, ensure_ascii=False)


def load_json_graph(path: str) -> Tuple[List[Node], List[Edge]]:
    """
    Load a graph from a JSON file.

    Raises
    ------
    ValueError
        If the file is not valid JSON or does not follow the schema.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON graph file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    return graph_from_json(obj)


__all__ = [
    "TRACE_VERSION",
    "graph_from_json",
    "graph_to_json",
    "result_to_json",
    "dump_json_result",
    "dump_json_graph",
    "load_json_graph",
]
