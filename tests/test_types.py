r"""
Tests for chain_bench.types module.
"""

import pytest

from chain_bench.types import ChartRecord, JobResult, Metrics, Shape, Status, TargetSelector, TimingStats


class TestShape:
    def test_values(self):
        assert [s.value for s in Shape] == ["chain", "dag", "blockdag"]

    def test_label(self):
        assert Shape.CHAIN.label == "Chain"
        assert Shape.BLOCKDAG.label == "Blockdag"

    def test_from_string(self):
        assert Shape("dag") is Shape.DAG


class TestTargetSelector:
    def test_values(self):
        assert [t.value for t in TargetSelector] == ["latest", "middle", "near_genesis", "random"]

    def test_descriptions(self):
        assert TargetSelector.LATEST.description == "Latest Tx to Genesis"
        assert TargetSelector.NEAR_GENESIS.description == "Near Genesis Tx to Genesis"
        assert TargetSelector.RANDOM.description == "Random Tx to Genesis"


class TestStatus:
    def test_status_values(self):
        assert Status.SUCCESS.value == 1
        assert Status.FAILED.value == 2


class TestTimingStats:
    def test_conversions(self, sample_timing):
        assert sample_timing.mean_us == 2.0
        assert sample_timing.median_us == 2.0
        assert sample_timing.p99_us == 4.0

    def test_ops_per_second(self, sample_timing):
        assert sample_timing.ops_per_second == 500_000.0

    def test_ops_per_second_zero(self):
        stats = TimingStats(
            min_ns=0,
            max_ns=0,
            mean_ns=0.0,
            median_ns=0.0,
            std_ns=0.0,
            p99_ns=0.0,
            iterations=0,
        )
        assert stats.ops_per_second == float("inf")

    def test_immutable(self, sample_timing):
        with pytest.raises(AttributeError):
            sample_timing.min_ns = 0  # type: ignore


class TestJobResult:
    def test_ok(self, sample_result):
        assert sample_result.ok is True
        assert sample_result.error is None

    def test_failed(self, failed_result):
        assert failed_result.ok is False
        assert failed_result.metrics is None

    def test_memory_default(self, sample_timing):
        metrics = Metrics(timing=sample_timing, ips=1.0)
        assert metrics.memory_bytes is None


class TestChartRecord:
    def test_to_dict(self):
        record = ChartRecord(Shape.BLOCKDAG, TargetSelector.MIDDLE, 1000, 1234.5)
        assert record.to_dict() == {
            "GraphType": "Blockdag",
            "QueryTarget": "Middle Tx to Genesis",
            "TxCount": 1000,
            "IPS": 1234.5,
        }
