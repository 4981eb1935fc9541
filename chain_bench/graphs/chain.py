r"""
Linear transaction chain.

    from chain_bench.graphs.chain import create_chain

    graph = create_chain(5)  # 1->0, 2->1, 3->2, 4->3
"""

import random

import networkx as nx

from chain_bench.config import GraphParams
from chain_bench.graphs.base import BaseGraphBuilder, GraphBuilderRegistry, new_graph
from chain_bench.types import Shape

__all__ = ["ChainBuilder", "create_chain"]


def create_chain(num_txs: int) -> nx.DiGraph:
    """Create a linear chain where each vertex points to its predecessor.

    Args:
        num_txs: Total vertex count including genesis.

    Returns:
        Graph with edges i -> i-1 for every i >= 1.
    """
    graph = new_graph(Shape.CHAIN, num_txs=max(1, num_txs))
    for tx in range(1, num_txs):
        graph.add_edge(tx, tx - 1)
    return graph


@GraphBuilderRegistry.register(Shape.CHAIN)
class ChainBuilder(BaseGraphBuilder):
    """Linear chain: every transaction has exactly one parent."""

    def build(self, size: int, params: GraphParams, *, rng: random.Random) -> nx.DiGraph:
        return create_chain(size)
