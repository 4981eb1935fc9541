r"""
Tests for chain_bench.targets module.
"""

import random

import pytest

from chain_bench.config import GraphParams
from chain_bench.graphs import GENESIS, build_graph_set, make_rng
from chain_bench.targets import (
    QUERY_SEED_OFFSET,
    latest,
    middle,
    near_genesis,
    query_rng,
    random_target,
    select_targets,
)
from chain_bench.types import Shape, TargetSelector


class TestFixedSelectors:
    @pytest.mark.parametrize("num_txs", [0, 1])
    def test_genesis_only(self, num_txs):
        assert latest(num_txs) == GENESIS
        assert middle(num_txs) == GENESIS
        assert near_genesis(num_txs) == GENESIS
        assert random_target(num_txs, rng=query_rng(1)) == GENESIS

    def test_six_vertices(self):
        assert latest(6) == 5
        assert middle(6) == 2
        assert near_genesis(6) == 2

    def test_two_vertices(self):
        assert latest(2) == 1
        assert middle(2) == 0
        assert near_genesis(2) == 1

    def test_three_vertices(self):
        assert near_genesis(3) == 2


class TestRandomTarget:
    def test_never_genesis(self):
        rng = query_rng(3)
        draws = [random_target(10, rng=rng) for _ in range(500)]
        assert min(draws) == 1
        assert max(draws) == 9

    def test_two_vertices_always_one(self):
        rng = query_rng(None)
        assert {random_target(2, rng=rng) for _ in range(20)} == {1}

    def test_seeded_is_reproducible(self):
        assert random_target(10_000, rng=query_rng(5)) == random_target(10_000, rng=query_rng(5))

    def test_query_seed_is_offset(self):
        expected = random.Random(5 + QUERY_SEED_OFFSET).randint(1, 9_999)
        assert random_target(10_000, rng=query_rng(5)) == expected


class TestSelectTargets:
    def test_all_selectors_present(self):
        targets = select_targets(6, rng=query_rng(1))
        assert set(targets) == set(TargetSelector)
        assert targets[TargetSelector.LATEST] == 5
        assert targets[TargetSelector.MIDDLE] == 2
        assert targets[TargetSelector.NEAR_GENESIS] == 2
        assert 1 <= targets[TargetSelector.RANDOM] <= 5

    def test_genesis_only_graph(self):
        targets = select_targets(1, rng=query_rng(1))
        assert set(targets.values()) == {GENESIS}

    def test_query_seed_does_not_change_graphs(self):
        before = build_graph_set(100, GraphParams(), seed=12)
        select_targets(100, rng=query_rng(1))
        select_targets(100, rng=query_rng(2))
        after = build_graph_set(100, GraphParams(), seed=12)
        for shape in Shape:
            assert list(before[shape].edges) == list(after[shape].edges)

    def test_same_seed_for_graph_and_query_draws_differently(self):
        assert make_rng(4).randint(1, 10**9) != query_rng(4).randint(1, 10**9)

    def test_query_seed_shifted_by_offset_matches_graph_seed(self):
        graph_draw = make_rng(42 + QUERY_SEED_OFFSET).randint(1, 10**9)
        assert query_rng(42).randint(1, 10**9) == graph_draw
