r"""
Benchmark harness and suite orchestration.

Coordinates graph setup, job table construction, repeated timing
and report output.

    from chain_bench.runner import SuiteOrchestrator

    orchestrator = SuiteOrchestrator(config=SuiteConfig(sizes=[500, 1000]))
    result = orchestrator.run()
"""

from chain_bench.runner.harness import BenchmarkHarness, HarnessConfig, compute_stats
from chain_bench.runner.orchestrator import (
    QueryJob,
    SuiteInput,
    SuiteOrchestrator,
    SuiteResult,
    build_job_table,
    reshape_results,
)
from chain_bench.runner.timing import Timer, measure_for, run_for

__all__ = [
    "BenchmarkHarness",
    "HarnessConfig",
    "QueryJob",
    "SuiteInput",
    "SuiteOrchestrator",
    "SuiteResult",
    "Timer",
    "build_job_table",
    "compute_stats",
    "measure_for",
    "reshape_results",
    "run_for",
]
