r"""
Pure transaction DAG.

Every vertex picks a fixed number of distinct parents uniformly at random
among all older vertices.

    from chain_bench.graphs.dag import create_dag

    graph = create_dag(1000, 3, seed=42)
"""

import random

import networkx as nx

from chain_bench.config import GraphParams
from chain_bench.graphs.base import BaseGraphBuilder, GraphBuilderRegistry, new_graph, resolve_rng
from chain_bench.types import Shape

__all__ = ["DagBuilder", "create_dag"]


def create_dag(
    num_txs: int,
    avg_parents: int,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> nx.DiGraph:
    """Create a pure DAG.

    Vertex i selects min(avg_parents, i) distinct parents from 0..i-1.
    avg_parents is clamped to at least 1 so no vertex is parentless.

    Args:
        num_txs: Total vertex count including genesis.
        avg_parents: Parents per vertex.
        rng: Random source to draw from (takes precedence over seed).
        seed: Seed for a private random source when rng is not given.

    Returns:
        The constructed graph.
    """
    rng = resolve_rng(rng, seed)
    parents_per_tx = max(1, avg_parents)
    graph = new_graph(Shape.DAG, num_txs=max(1, num_txs), avg_parents=parents_per_tx)

    for tx in range(1, num_txs):
        graph.add_node(tx)
        for parent in rng.sample(range(tx), min(parents_per_tx, tx)):
            graph.add_edge(tx, parent)

    return graph


@GraphBuilderRegistry.register(Shape.DAG)
class DagBuilder(BaseGraphBuilder):
    """Pure DAG: each transaction references random older transactions."""

    def build(self, size: int, params: GraphParams, *, rng: random.Random) -> nx.DiGraph:
        return create_dag(size, params.dag_avg_parents, rng=rng)
