r"""
Query target selection.

Each graph size gets one fixed vertex per selector so that every shape is
queried at a comparable position.

    from chain_bench.targets import query_rng, select_targets

    targets = select_targets(1000, rng=query_rng(7))
    targets[TargetSelector.MIDDLE]  # 499
"""

import logging
import random
from collections.abc import Callable

from chain_bench.graphs.base import GENESIS, make_rng
from chain_bench.types import TargetSelector

__all__ = [
    "QUERY_SEED_OFFSET",
    "TargetSet",
    "latest",
    "middle",
    "near_genesis",
    "query_rng",
    "random_target",
    "select_targets",
]

log = logging.getLogger(__name__)

# Query seed shift, matching the original tool. Equal graph and query seeds give
# different streams; a graph seed equal to query seed + 1000 gives the same one.
QUERY_SEED_OFFSET = 1000

TargetSet = dict[TargetSelector, int]


def latest(num_txs: int) -> int:
    """Highest-indexed vertex."""
    if num_txs <= 1:
        return GENESIS
    return num_txs - 1


def middle(num_txs: int) -> int:
    """Vertex halfway between genesis and the latest vertex."""
    if num_txs <= 1:
        return GENESIS
    return (num_txs - 1) // 2


def near_genesis(num_txs: int) -> int:
    """Vertex 2, or the closest existing vertex to it."""
    if num_txs <= 1:
        return GENESIS
    return min(2, num_txs - 1)


def random_target(num_txs: int, *, rng: random.Random) -> int:
    """Uniformly random non-genesis vertex."""
    if num_txs <= 1:
        return GENESIS
    return rng.randint(1, num_txs - 1)


def query_rng(seed: int | None = None) -> random.Random:
    """Create the random source used for target selection.

    Args:
        seed: Query seed, or None for a nondeterministic source.
    """
    if seed is None:
        return make_rng(None)
    return make_rng(seed + QUERY_SEED_OFFSET)


_FIXED_SELECTORS: dict[TargetSelector, Callable[[int], int]] = {
    TargetSelector.LATEST: latest,
    TargetSelector.MIDDLE: middle,
    TargetSelector.NEAR_GENESIS: near_genesis,
}


def select_targets(num_txs: int, *, rng: random.Random) -> TargetSet:
    """Compute one target vertex per selector.

    Args:
        num_txs: Total vertex count of the graphs being queried.
        rng: Random source for the random selector.

    Returns:
        Mapping of selector to vertex id.
    """
    targets: TargetSet = {}
    for selector in TargetSelector:
        if selector is TargetSelector.RANDOM:
            targets[selector] = random_target(num_txs, rng=rng)
        else:
            targets[selector] = _FIXED_SELECTORS[selector](num_txs)
    log.debug("Targets for %d txs: %s", num_txs, {s.value: v for s, v in targets.items()})
    return targets
