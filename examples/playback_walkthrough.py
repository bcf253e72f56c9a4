"""Playback example: record and replay both traces on a small drawn graph.

This example builds a five-node graph the way the drawing front end would
save it, runs the shortest-path and spanning-tree engines, and prints the
flattened highlight sequence a playback loop would animate, followed by
the final answer edges.
"""

from __future__ import annotations

import graphsteps as gs

SAVED_GRAPH = {
    "id": "graph-demo",
    "canvas": {"width": 640, "height": 480},
    "nodes": [
        {"id": "A", "x": 40, "y": 240},
        {"id": "B", "x": 200, "y": 80},
        {"id": "C", "x": 200, "y": 400},
        {"id": "D", "x": 400, "y": 240},
        {"id": "E", "x": 600, "y": 240},
    ],
    "edges": [
        {"id": "e1", "weight": 4, "firstNode": "A", "secondNode": "B"},
        {"id": "e2", "weight": 1, "firstNode": "A", "secondNode": "C"},
        {"id": "e3", "weight": 2, "firstNode": "C", "secondNode": "B"},
        {"id": "e4", "weight": 5, "firstNode": "B", "secondNode": "D"},
        {"id": "e5", "weight": 8, "firstNode": "C", "secondNode": "D"},
        {"id": "e6", "weight": 3, "firstNode": "D", "secondNode": "E"},
    ],
}


def replay(title: str, result: gs.Result) -> None:
    """Print the flattened trace and the answer edges of a result."""
    names = result.node_ids
    print(f"{title}:")
    for edge in result.flatten():
        print(f"  highlight {names[edge.source]} -> {names[edge.target]} ({edge.weight:g})")
    answer = ", ".join(f"{a}-{b}" for a, b, _ in result.answer_by_id())
    print(f"  answer: {answer}")
    print(f"  total: {result.total:g}")


def main() -> None:
    """Run both engines on the demo graph."""
    nodes, edges = gs.graph_from_json(SAVED_GRAPH)

    # Same pre-check the front end runs before either engine
    if not gs.is_connected(nodes, edges):
        print("Please connect all nodes first")
        return

    replay("Shortest path", gs.shortest_path_trace(nodes, edges))
    replay("Minimum spanning tree", gs.minimum_spanning_tree_trace(nodes, edges))


if __name__ == "__main__":
    main()
