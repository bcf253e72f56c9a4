"""Tests for minimum spanning tree algorithms."""

import pytest

from graphsteps.errors import ConnectivityError, DisconnectedGraphError
from graphsteps.graphs import (
    MINIMUM_SPANNING_TREE,
    Edge,
    Step,
    SubStep,
    TraceEdge,
    UnionFind,
    build_adjacency,
    kruskal_mst,
    minimum_spanning_tree_trace,
    run_prim,
)

DIAMOND_NODES = [0, 1, 2, 3]
DIAMOND_EDGES = [Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 4), Edge(2, 3, 1)]


class TestUnionFind:
    """Tests for the union-find helper."""

    def test_union_and_find(self):
        """Union merges sets, a repeated union reports False."""
        uf = UnionFind(4)
        assert uf.union(0, 1)
        assert uf.union(2, 3)
        assert uf.find(0) == uf.find(1)
        assert uf.find(0) != uf.find(2)
        assert uf.union(1, 3)
        assert not uf.union(0, 2)

    def test_path_compression(self):
        """find points every visited node straight at the root."""
        uf = UnionFind(4)
        uf.parent = [0, 0, 1, 2]
        root = uf.find(3)
        assert root == 0
        assert uf.parent == [0, 0, 0, 0]


class TestKruskal:
    """Tests for Kruskal's algorithm."""

    def test_kruskal_simple(self):
        """Triangle keeps the two lightest edges."""
        mst = kruskal_mst(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 3.0)])
        assert mst == [(0, 1, 1.0), (1, 2, 2.0)]

    def test_kruskal_disconnected_forest(self):
        """Disconnected input yields a spanning forest."""
        mst = kruskal_mst(4, [(0, 1, 1.0), (2, 3, 2.0)])
        assert len(mst) == 2
        assert sum(w for _, _, w in mst) == 3.0

    def test_kruskal_ties_keep_input_order(self):
        """Equal weights are accepted in input order."""
        mst = kruskal_mst(3, [(1, 2, 1.0), (0, 1, 1.0), (0, 2, 1.0)])
        assert mst == [(1, 2, 1.0), (0, 1, 1.0)]

    def test_kruskal_empty(self):
        """No nodes, no edges."""
        assert kruskal_mst(0, []) == []


class TestPrim:
    """Tests for run_prim and minimum_spanning_tree_trace."""

    def test_concrete_scenario(self):
        """MST from root 0 is 0-1, 1-2, 2-3 with total 4."""
        result = minimum_spanning_tree_trace(DIAMOND_NODES, DIAMOND_EDGES)

        assert result.kind == MINIMUM_SPANNING_TREE
        assert result.answer == (
            TraceEdge(0, 1, 1.0),
            TraceEdge(1, 2, 2.0),
            TraceEdge(2, 3, 1.0),
        )
        assert result.total == 4.0

    def test_concrete_scenario_steps(self):
        """Step weights are connecting edge weights."""
        result = minimum_spanning_tree_trace(DIAMOND_NODES, DIAMOND_EDGES)

        assert result.steps == (
            Step(0, 1, 1.0, (SubStep(0, 1, 1.0), SubStep(0, 2, 4.0))),
            Step(1, 2, 2.0, (SubStep(1, 2, 2.0),)),
            Step(2, 3, 1.0, (SubStep(2, 3, 1.0),)),
        )

    def test_disconnected_graph(self):
        """Nodes {0,1,2} with only 0-1 fail instead of returning a partial tree."""
        with pytest.raises(DisconnectedGraphError, match="node 2"):
            minimum_spanning_tree_trace([0, 1, 2], [Edge(0, 1, 1)])

    def test_disconnected_is_connectivity_error(self):
        """DisconnectedGraphError belongs to the connectivity family."""
        with pytest.raises(ConnectivityError):
            run_prim(build_adjacency(["a", "b"], []))

    def test_no_early_termination(self):
        """Every node joins the tree, including ones past index n-1's distance."""
        result = minimum_spanning_tree_trace([0, 1, 2], [Edge(0, 2, 1), Edge(0, 1, 5)])

        assert sorted(s.target for s in result.steps) == [1, 2]
        assert result.total == 6.0

    def test_edge_weight_not_distance(self):
        """Priorities compare edge weights, so the tree differs from the path tree."""
        # Shortest-path tree from 0 would use 0-2 (3); MST uses 1-2 (2).
        result = minimum_spanning_tree_trace(
            [0, 1, 2], [Edge(0, 1, 2), Edge(1, 2, 2), Edge(0, 2, 3)]
        )
        assert result.answer == (TraceEdge(0, 1, 2.0), TraceEdge(1, 2, 2.0))
        assert result.total == 4.0

    def test_empty_graph(self):
        """An empty graph has an empty tree."""
        result = minimum_spanning_tree_trace([], [])
        assert result.steps == ()
        assert result.answer == ()
        assert result.total == 0.0

    def test_single_node(self):
        """A single node has an empty tree."""
        result = minimum_spanning_tree_trace(["a"], [])
        assert result.answer == ()
        assert result.total == 0.0

    def test_answer_matches_steps(self):
        """The answer is the steps reinterpreted as tree edges."""
        result = minimum_spanning_tree_trace(DIAMOND_NODES, DIAMOND_EDGES)
        assert [(e.source, e.target, e.weight) for e in result.answer] == [
            (s.source, s.target, s.weight) for s in result.steps
        ]

    def test_prim_vs_kruskal(self, random_graph):
        """Prim and Kruskal agree on total weight."""
        for n in range(2, 12):
            nodes, edges = random_graph(n)
            adj = build_adjacency(nodes, edges)
            prim_total = minimum_spanning_tree_trace(nodes, edges).total
            kruskal_total = sum(w for _, _, w in kruskal_mst(n, adj.edges))
            assert prim_total == kruskal_total

    def test_idempotent(self):
        """Running twice gives identical results."""
        assert minimum_spanning_tree_trace(DIAMOND_NODES, DIAMOND_EDGES) == (
            minimum_spanning_tree_trace(DIAMOND_NODES, DIAMOND_EDGES)
        )
