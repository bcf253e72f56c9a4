"""Tests for JSON graph and trace import/export."""

from __future__ import annotations

import json
import os

import pytest

from graphsteps.graphs import Edge, Node, shortest_path_trace
from graphsteps.io import (
    TRACE_VERSION,
    dump_json_graph,
    dump_json_result,
    graph_from_json,
    graph_to_json,
    json_graph_schema,
    load_json_graph,
    result_to_json,
    validate_json_graph,
)

SAVED_GRAPH = {
    "id": "graph-1a2b",
    "canvas": {"height": 600, "width": 800},
    "nodes": [
        {"id": "n0", "x": 10, "y": 20},
        {"id": "n1", "x": 110, "y": 20},
        {"id": "n2", "x": 60, "y": 90},
    ],
    "edges": [
        {
            "id": "e0",
            "weight": 4,
            "firstNode": {"id": "n0", "x": 10, "y": 20},
            "secondNode": {"id": "n1", "x": 110, "y": 20},
        },
        {"id": "e1", "weight": 1, "firstNode": "n0", "secondNode": "n2"},
        {"weight": 2, "firstNode": {"id": "n2"}, "secondNode": {"id": "n1"}},
    ],
}


class TestGraphFromJSON:
    """Tests for reading the saved-graph shape."""

    def test_nodes_and_edges(self):
        """Node objects and bare ids are both accepted as endpoints."""
        nodes, edges = graph_from_json(SAVED_GRAPH)

        assert nodes == [Node("n0", 10.0, 20.0), Node("n1", 110.0, 20.0), Node("n2", 60.0, 90.0)]
        assert edges == [
            Edge("n0", "n1", 4, "e0"),
            Edge("n0", "n2", 1, "e1"),
            Edge("n2", "n1", 2),
        ]

    def test_loaded_graph_runs(self):
        """A loaded graph feeds straight into an engine."""
        nodes, edges = graph_from_json(SAVED_GRAPH)
        result = shortest_path_trace(nodes, edges)
        assert result.total == 1.0
        assert result.answer_by_id() == [("n0", "n2", 1.0)]

    def test_missing_positions_default(self):
        """x and y are optional."""
        nodes, _ = graph_from_json({"nodes": [{"id": 1}], "edges": []})
        assert nodes == [Node(1, 0.0, 0.0)]


class TestValidateJSONGraph:
    """Tests for structural validation."""

    @pytest.mark.parametrize(
        "obj, message",
        [
            ([], "dictionary"),
            ({"edges": []}, "'nodes'"),
            ({"nodes": []}, "'edges'"),
            ({"nodes": [{"x": 1}], "edges": []}, "missing required field 'id'"),
            ({"nodes": [{"id": 1.5}], "edges": []}, "string or integer"),
            ({"nodes": [{"id": "a", "x": "left"}], "edges": []}, "'x' must be a number"),
            ({"nodes": [], "edges": [{"firstNode": "a", "secondNode": "b"}]}, "'weight'"),
            (
                {"nodes": [], "edges": [{"weight": -1, "firstNode": "a", "secondNode": "b"}]},
                ">= 0",
            ),
            (
                {"nodes": [], "edges": [{"weight": True, "firstNode": "a", "secondNode": "b"}]},
                "must be a number",
            ),
            ({"nodes": [], "edges": [{"weight": 1, "firstNode": "a"}]}, "'secondNode'"),
            (
                {"nodes": [], "edges": [{"weight": 1, "firstNode": {}, "secondNode": "b"}]},
                "'firstNode'",
            ),
        ],
    )
    def test_invalid(self, obj, message):
        with pytest.raises(ValueError, match=message):
            validate_json_graph(obj)

    def test_valid(self):
        """The sample saved graph validates."""
        validate_json_graph(SAVED_GRAPH)

    def test_schema_description(self):
        """The schema lists the required top-level fields."""
        schema = json_graph_schema()
        assert schema["nodes"]["required"] is True
        assert schema["edges"]["required"] is True
        assert schema["id"]["required"] is False


class TestRoundTrip:
    """Tests for writing and reading files."""

    def test_graph_to_json_writes_node_objects(self):
        """Endpoints are written as full node objects."""
        nodes = [Node("a", 1.0, 2.0), Node("b", 3.0, 4.0)]
        obj = graph_to_json(nodes, [Edge("a", "b", 5.0, "e")], graph_id="graph-x")

        assert obj["id"] == "graph-x"
        assert obj["edges"][0]["firstNode"] == {"id": "a", "x": 1.0, "y": 2.0}
        assert obj["edges"][0]["id"] == "e"
        validate_json_graph(obj)

    def test_graph_file_round_trip(self, tmp_path):
        """dump_json_graph and load_json_graph preserve the graph."""
        nodes, edges = graph_from_json(SAVED_GRAPH)
        path = os.path.join(tmp_path, "graph.json")

        dump_json_graph(nodes, edges, path)
        loaded_nodes, loaded_edges = load_json_graph(path)

        assert loaded_nodes == nodes
        assert [(e.first, e.second, e.weight) for e in loaded_edges] == [
            (e.first, e.second, e.weight) for e in edges
        ]

    def test_result_to_json(self):
        """Exported traces carry a version and playback key names."""
        nodes, edges = graph_from_json(SAVED_GRAPH)
        obj = result_to_json(shortest_path_trace(nodes, edges), metadata={"producer": "tests"})

        assert obj["version"] == TRACE_VERSION
        assert obj["metadata"] == {"producer": "tests"}
        assert obj["nodeIds"] == ["n0", "n1", "n2"]
        assert [step["to"] for step in obj["steps"]] == [2]
        assert "subSteps" in obj["steps"][0]

    def test_dump_json_result(self, tmp_path):
        """dump_json_result writes valid JSON."""
        nodes, edges = graph_from_json(SAVED_GRAPH)
        path = os.path.join(tmp_path, "trace.json")
        dump_json_result(shortest_path_trace(nodes, edges), path)

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        assert data["total"] == 1.0

    def test_load_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_json_graph(os.path.join(tmp_path, "nope.json"))

    def test_load_invalid_json(self, tmp_path):
        """Malformed JSON raises ValueError."""
        path = os.path.join(tmp_path, "bad.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_json_graph(path)
