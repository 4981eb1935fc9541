r"""
Shared pytest fixtures for chain-bench tests.
"""

import pytest

from chain_bench.config import GraphParams, SuiteConfig
from chain_bench.runner.harness import HarnessConfig
from chain_bench.types import JobResult, Metrics, Status, TimingStats


@pytest.fixture
def default_params() -> GraphParams:
    """Default structural parameters."""
    return GraphParams()


@pytest.fixture
def fast_harness_config() -> HarnessConfig:
    """Harness durations short enough for unit tests."""
    return HarnessConfig(warmup=0.0, time=0.001, memory_time=0.0)


@pytest.fixture
def tiny_suite_config(tmp_path) -> SuiteConfig:
    """Small seeded suite writing into a temporary directory."""
    return SuiteConfig(
        sizes=[1, 20, 50],
        params=GraphParams(dag_avg_parents=2, tx_per_block=5, k_internal=2, k_external=1),
        warmup=0.0,
        time=0.001,
        memory_time=0.0,
        output_dir=tmp_path / "reports",
        output_basename="tiny",
        seed_graph=42,
        seed_query=7,
        verify=True,
    )


@pytest.fixture
def sample_timing() -> TimingStats:
    return TimingStats(
        min_ns=1_000,
        max_ns=5_000,
        mean_ns=2_000.0,
        median_ns=2_000.0,
        std_ns=500.0,
        p99_ns=4_000.0,
        iterations=10,
    )


@pytest.fixture
def sample_result(sample_timing) -> JobResult:
    return JobResult(
        job_name="Dag - Latest Tx to Genesis",
        input_name="Size 100 Tx",
        metrics=Metrics(timing=sample_timing, ips=sample_timing.ops_per_second),
    )


@pytest.fixture
def failed_result() -> JobResult:
    return JobResult(
        job_name="Chain - Middle Tx to Genesis",
        input_name="Size 100 Tx",
        metrics=None,
        status=Status.FAILED,
        error="boom",
    )
