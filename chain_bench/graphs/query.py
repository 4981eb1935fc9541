r"""
Reachability queries and invariant checks.

    from chain_bench.graphs.query import query_path_to_genesis

    assert query_path_to_genesis(graph, 4)
    assert not query_path_to_genesis(graph, 99)  # not a vertex
"""

from typing import Any

import networkx as nx

from chain_bench.errors import InvariantViolation
from chain_bench.graphs.base import GENESIS

__all__ = [
    "assert_connected",
    "check_connectivity",
    "export_edges",
    "graph_summary",
    "query_path_to_genesis",
]


def query_path_to_genesis(graph: nx.DiGraph, start: int) -> bool:
    """Check whether a directed path leads from start to genesis.

    Args:
        graph: Graph to search.
        start: Vertex to start from.

    Returns:
        True if start is genesis or genesis is reachable from it, False if
        start is not a vertex of the graph or no path exists.
    """
    if start == GENESIS:
        return True
    if start not in graph or GENESIS not in graph:
        return False
    return nx.has_path(graph, start, GENESIS)


def check_connectivity(graph: nx.DiGraph) -> list[int]:
    """Return the vertices that cannot reach genesis, sorted."""
    if GENESIS not in graph:
        return sorted(graph.nodes)
    reachable = nx.ancestors(graph, GENESIS)
    reachable.add(GENESIS)
    return sorted(v for v in graph.nodes if v not in reachable)


def assert_connected(graph: nx.DiGraph) -> None:
    """Raise if any vertex lacks a path to genesis.

    Raises:
        InvariantViolation: Listing the disconnected vertices.
    """
    disconnected = check_connectivity(graph)
    if disconnected:
        raise InvariantViolation(disconnected)


def graph_summary(graph: nx.DiGraph) -> dict[str, Any]:
    """Summarize a graph's size and fan-out."""
    vertices = graph.number_of_nodes()
    edges = graph.number_of_edges()
    out_degrees = [d for _, d in graph.out_degree()]
    return {
        "shape": graph.graph.get("shape", "unknown"),
        "vertices": vertices,
        "edges": edges,
        "mean_out_degree": round(edges / vertices, 3) if vertices else 0.0,
        "max_out_degree": max(out_degrees, default=0),
    }


def export_edges(graph: nx.DiGraph) -> list[tuple[int, int]]:
    """Return the edge list sorted by (child, parent)."""
    return sorted(graph.edges())
