r"""
Tests for chain_bench.graphs.query module.
"""

import networkx as nx
import pytest

from chain_bench.config import GraphParams
from chain_bench.errors import InvariantViolation
from chain_bench.graphs import (
    GENESIS,
    assert_connected,
    build_graph_set,
    check_connectivity,
    create_blockdag,
    create_chain,
    export_edges,
    graph_summary,
    query_path_to_genesis,
)
from chain_bench.types import Shape


@pytest.fixture
def orphaned_graph() -> nx.DiGraph:
    """Chain 0..3 plus vertices 4 -> 5 that never reach genesis."""
    graph = create_chain(4)
    graph.add_edge(4, 5)
    return graph


class TestQueryPathToGenesis:
    def test_chain_latest(self):
        graph = create_chain(5)
        assert query_path_to_genesis(graph, 4) is True

    def test_missing_vertex(self):
        graph = create_chain(5)
        assert query_path_to_genesis(graph, 99) is False

    def test_genesis_always_true(self):
        assert query_path_to_genesis(create_chain(1), GENESIS) is True
        assert query_path_to_genesis(nx.DiGraph(), GENESIS) is True

    def test_disconnected_vertex(self, orphaned_graph):
        assert query_path_to_genesis(orphaned_graph, 4) is False
        assert query_path_to_genesis(orphaned_graph, 3) is True

    def test_graph_without_genesis(self):
        graph = nx.DiGraph()
        graph.add_edge(2, 1)
        assert query_path_to_genesis(graph, 2) is False

    def test_degenerate_blockdag(self):
        graph = create_blockdag(num_blocks=4, tx_per_block=1, k_internal=0, k_external=1, seed=3)
        assert query_path_to_genesis(graph, 3) is True

    @pytest.mark.parametrize("shape", list(Shape))
    def test_every_engine_vertex_reaches_genesis(self, shape):
        graph = build_graph_set(120, GraphParams(), seed=8)[shape]
        assert all(query_path_to_genesis(graph, v) for v in graph.nodes)

    def test_does_not_mutate_graph(self):
        graph = build_graph_set(60, GraphParams(), seed=1)[Shape.DAG]
        before = list(graph.edges)
        query_path_to_genesis(graph, 59)
        assert list(graph.edges) == before


class TestConnectivity:
    def test_connected(self):
        assert check_connectivity(create_chain(10)) == []
        assert_connected(create_chain(10))

    def test_reports_disconnected(self, orphaned_graph):
        assert check_connectivity(orphaned_graph) == [4, 5]

    def test_assert_connected_raises(self, orphaned_graph):
        with pytest.raises(InvariantViolation, match="2 vertices cannot reach genesis") as exc_info:
            assert_connected(orphaned_graph)
        assert exc_info.value.vertices == [4, 5]

    def test_missing_genesis(self):
        graph = nx.DiGraph()
        graph.add_edge(2, 1)
        assert check_connectivity(graph) == [1, 2]


class TestSummary:
    def test_chain_summary(self):
        summary = graph_summary(create_chain(5))
        assert summary == {
            "shape": "chain",
            "vertices": 5,
            "edges": 4,
            "mean_out_degree": 0.8,
            "max_out_degree": 1,
        }

    def test_export_edges_sorted(self):
        assert export_edges(create_chain(4)) == [(1, 0), (2, 1), (3, 2)]
