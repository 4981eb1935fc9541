r"""
Block-structured transaction DAG.

Vertices are grouped into blocks of `tx_per_block` consecutive indices.
Each vertex references up to `k_internal` earlier vertices of its own
block and up to `k_external` vertices of earlier blocks. A vertex whose
selection comes out empty is linked to its predecessor, so every vertex
keeps a path to genesis whatever the parameters.

    from chain_bench.graphs.blockdag import create_blockdag

    graph = create_blockdag(num_blocks=100, tx_per_block=10, k_internal=2, k_external=1, seed=7)
"""

import math
import random

import networkx as nx

from chain_bench.config import GraphParams
from chain_bench.graphs.base import BaseGraphBuilder, GraphBuilderRegistry, new_graph, resolve_rng
from chain_bench.types import Shape

__all__ = ["BlockDagBuilder", "create_blockdag", "select_block_parents"]


def select_block_parents(
    tx: int,
    tx_per_block: int,
    k_internal: int,
    k_external: int,
    rng: random.Random,
) -> list[int]:
    """Choose the parents of one block-DAG vertex.

    Args:
        tx: Vertex index (>= 1).
        tx_per_block: Block size (>= 1).
        k_internal: Same-block parents to draw (>= 0).
        k_external: Earlier-block parents to draw (>= 1).
        rng: Random source.

    Returns:
        Distinct parent indices, all strictly lower than tx. Never empty.
    """
    block_start = (tx // tx_per_block) * tx_per_block

    internal = range(block_start, tx)
    external = range(0, block_start)

    selected = rng.sample(internal, min(k_internal, len(internal)))
    selected += rng.sample(external, min(k_external, len(external)))

    if not selected:
        return [max(0, tx - 1)]
    return list(dict.fromkeys(selected))


def create_blockdag(
    num_blocks: int,
    tx_per_block: int,
    k_internal: int,
    k_external: int,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> nx.DiGraph:
    """Create a block DAG with num_blocks * tx_per_block vertices.

    Args:
        num_blocks: Number of blocks.
        tx_per_block: Vertices per block (clamped to at least 1).
        k_internal: Same-block parents per vertex (clamped to at least 0).
        k_external: Earlier-block parents per vertex (clamped to at least 1).
        rng: Random source to draw from (takes precedence over seed).
        seed: Seed for a private random source when rng is not given.

    Returns:
        The constructed graph.
    """
    rng = resolve_rng(rng, seed)
    tx_per_block = max(1, tx_per_block)
    k_internal = max(0, k_internal)
    k_external = max(1, k_external)
    num_txs = max(0, num_blocks) * tx_per_block

    graph = new_graph(
        Shape.BLOCKDAG,
        num_txs=max(1, num_txs),
        num_blocks=max(0, num_blocks),
        tx_per_block=tx_per_block,
        k_internal=k_internal,
        k_external=k_external,
    )

    for tx in range(1, num_txs):
        graph.add_node(tx)
        for parent in select_block_parents(tx, tx_per_block, k_internal, k_external, rng):
            graph.add_edge(tx, parent)

    return graph


@GraphBuilderRegistry.register(Shape.BLOCKDAG)
class BlockDagBuilder(BaseGraphBuilder):
    """Block DAG: transactions grouped in blocks with internal and external parents."""

    def build(self, size: int, params: GraphParams, *, rng: random.Random) -> nx.DiGraph:
        tx_per_block = max(1, params.tx_per_block)
        num_blocks = math.ceil(size / tx_per_block) if size > 0 else 0
        return create_blockdag(
            num_blocks,
            tx_per_block,
            params.k_internal,
            params.k_external,
            rng=rng,
        )
