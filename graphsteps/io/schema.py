"""JSON graph schema definition and validation.

Graphs are exchanged in the shape the drawing front end saves them in:

Schema Structure:
    {
        "id": <string>,                         # optional
        "canvas": {"width": <number>, "height": <number>},   # optional
        "nodes": [
            {"id": <string|integer>, "x": <number>, "y": <number>},
            ...
        ],
        "edges": [
            {
                "id": <string|integer>,         # optional
                "weight": <number>,
                "firstNode": <node object or node id>,
                "secondNode": <node object or node id>,
            },
            ...
        ]
    }

Node order is significant: the first node is the start and the last node
is the shortest-path target.
"""

from __future__ import annotations

from typing import Any


def json_graph_schema() -> dict:
    """
    Return the JSON schema (as a Python dict) for the graph format.

    This is a structural schema description, not a full JSON Schema validator.

    Returns
    -------
    dict
        Schema description with field definitions and constraints.
    """
    return {
        "id": {
            "type": "string",
            "description": "Saved graph identifier, e.g. 'graph-1a2b'",
            "required": False,
        },
        "canvas": {
            "type": "dict",
            "description": "Canvas size the node positions refer to",
            "required": False,
        },
        "nodes": {
            "type": "list",
            "description": "Nodes in index order",
            "required": True,
            "items": {
                "id": {"type": "string|integer", "required": True},
                "x": {"type": "number", "required": False, "default": 0.0},
                "y": {"type": "number", "required": False, "default": 0.0},
            },
        },
        "edges": {
            "type": "list",
            "description": "Undirected weighted edges",
            "required": True,
            "items": {
                "id": {"type": "string|integer", "required": False},
                "weight": {"type": "number", "required": True, "min": 0},
                "firstNode": {"type": "node|string|integer", "required": True},
                "secondNode": {"type": "node|string|integer", "required": True},
            },
        },
    }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_node_id(value: Any) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


def endpoint_id(value: Any) -> Any:
    """Return the node id of an edge endpoint given as a node object or a bare id."""
    if isinstance(value, dict):
        return value.get("id")
    return value


def validate_json_graph(obj: dict) -> None:
    """
    Validate a JSON graph object against the schema.

    Performs structural validation: required fields, types and basic
    constraints. Endpoint existence is left to the graph indexer.

    Parameters
    ----------
    obj : dict
        JSON object to validate.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON graph must be a dictionary object.")

    if "id" in obj and not isinstance(obj["id"], str):
        raise ValueError("Field 'id' must be a string.")
    if "canvas" in obj and not isinstance(obj["canvas"], dict):
        raise ValueError("Field 'canvas' must be a dictionary.")

    if "nodes" not in obj:
        raise ValueError("JSON graph missing required field 'nodes'.")
    if not isinstance(obj["nodes"], list):
        raise ValueError("Field 'nodes' must be a list.")

    for i, node in enumerate(obj["nodes"]):
        if not isinstance(node, dict):
            raise ValueError(f"Node at index {i} must be a dictionary object.")
        if "id" not in node:
            raise ValueError(f"Node at index {i} missing required field 'id'.")
        if not _is_node_id(node["id"]):
            raise ValueError(
                f"Node at index {i}: field 'id' must be a string or integer, "
                f"got {type(node['id']).__name__}."
            )
        for coord in ("x", "y"):
            if coord in node and not _is_number(node[coord]):
                raise ValueError(f"Node at index {i}: field '{coord}' must be a number.")

    if "edges" not in obj:
        raise ValueError("JSON graph missing required field 'edges'.")
    if not isinstance(obj["edges"], list):
        raise ValueError("Field 'edges' must be a list.")

    for i, edge in enumerate(obj["edges"]):
        if not isinstance(edge, dict):
            raise ValueError(f"Edge at index {i} must be a dictionary object.")

        if "weight" not in edge:
            raise ValueError(f"Edge at index {i} missing required field 'weight'.")
        if not _is_number(edge["weight"]):
            raise ValueError(
                f"Edge at index {i}: field 'weight' must be a number, "
                f"got {type(edge['weight']).__name__}."
            )
        if edge["weight"] < 0:
            raise ValueError(
                f"Edge at index {i}: field 'weight' must be >= 0, got {edge['weight']}."
            )

        for end in ("firstNode", "secondNode"):
            if end not in edge:
                raise ValueError(f"Edge at index {i} missing required field '{end}'.")
            if not _is_node_id(endpoint_id(edge[end])):
                raise ValueError(
                    f"Edge at index {i}: field '{end}' must be a node object "
                    f"with an 'id' or a node id."
                )

        if "id" in edge and not _is_node_id(edge["id"]):
            raise ValueError(f"Edge at index {i}: field 'id' must be a string or integer.")


__all__ = ["json_graph_schema", "validate_json_graph", "endpoint_id"]
