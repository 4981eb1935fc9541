r"""
Transaction-graph construction and reachability queries.

Available shapes:
    - chain: Linear chain, one parent per transaction
    - dag: Pure DAG, random parents among all older transactions
    - blockdag: Block DAG, random parents inside the block and in earlier blocks

    from chain_bench.graphs import build_graph_set, query_path_to_genesis

    graphs = build_graph_set(1000, GraphParams(), seed=42)
    assert query_path_to_genesis(graphs[Shape.DAG], 999)
"""

from chain_bench.graphs.base import (
    GENESIS,
    BaseGraphBuilder,
    GraphBuilderRegistry,
    GraphSet,
    build_graph_set,
    make_rng,
)
from chain_bench.graphs.blockdag import BlockDagBuilder, create_blockdag
from chain_bench.graphs.chain import ChainBuilder, create_chain
from chain_bench.graphs.dag import DagBuilder, create_dag
from chain_bench.graphs.query import (
    assert_connected,
    check_connectivity,
    export_edges,
    graph_summary,
    query_path_to_genesis,
)

__all__ = [
    "GENESIS",
    "BaseGraphBuilder",
    "BlockDagBuilder",
    "ChainBuilder",
    "DagBuilder",
    "GraphBuilderRegistry",
    "GraphSet",
    "assert_connected",
    "build_graph_set",
    "check_connectivity",
    "create_blockdag",
    "create_chain",
    "create_dag",
    "export_edges",
    "graph_summary",
    "make_rng",
    "query_path_to_genesis",
]
