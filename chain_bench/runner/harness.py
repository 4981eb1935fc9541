r"""
Benchmark harness: repeated timing of named jobs over named inputs.

The harness knows nothing about graphs. It takes a mapping of job name to
callable and a mapping of input name to input value, runs every job on
every input (warmup, measurement, optional memory loop) and returns one
JobResult per pair.

    from chain_bench.runner.harness import BenchmarkHarness, HarnessConfig

    harness = BenchmarkHarness(config=HarnessConfig(warmup=0.5, time=1.0))
    results = harness.run({"sum": sum}, inputs={"small": range(10), "large": range(10_000)})
"""

import logging
import statistics
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from chain_bench.config import DEFAULT_MEMORY_TIME, DEFAULT_TIME, DEFAULT_WARMUP
from chain_bench.runner.timing import measure_for, run_for
from chain_bench.types import JobResult, Metrics, Status, TimingStats
from chain_bench.utils.memory import measure_allocations

__all__ = ["BenchmarkHarness", "HarnessConfig", "ProgressCallback", "compute_stats"]

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str, str], None]

NO_INPUT = ""


@dataclass
class HarnessConfig:
    """Configuration for the timing loops.

    Attributes:
        warmup: Seconds each job runs before measurement.
        time: Seconds each job is measured.
        memory_time: Seconds each job is measured for allocations (0 disables).
        continue_on_error: Keep running remaining jobs after a failure.
    """

    warmup: float = DEFAULT_WARMUP
    time: float = DEFAULT_TIME
    memory_time: float = DEFAULT_MEMORY_TIME
    continue_on_error: bool = True


def compute_stats(timings_ns: list[int]) -> TimingStats:
    """Compute timing statistics from raw nanosecond measurements."""
    if not timings_ns:
        return TimingStats(
            min_ns=0,
            max_ns=0,
            mean_ns=0.0,
            median_ns=0.0,
            std_ns=0.0,
            p99_ns=0.0,
            iterations=0,
        )

    sorted_timings = sorted(timings_ns)
    n = len(sorted_timings)

    p99_idx = int(n * 0.99)
    p99_idx = min(p99_idx, n - 1)

    return TimingStats(
        min_ns=sorted_timings[0],
        max_ns=sorted_timings[-1],
        mean_ns=statistics.mean(timings_ns),
        median_ns=statistics.median(timings_ns),
        std_ns=statistics.stdev(timings_ns) if n > 1 else 0.0,
        p99_ns=float(sorted_timings[p99_idx]),
        iterations=n,
    )


class BenchmarkHarness:
    """Runs named jobs against named inputs and collects timing statistics."""

    def __init__(self, *, config: HarnessConfig | None = None) -> None:
        self._config = config or HarnessConfig()
        self._progress_callback: ProgressCallback | None = None

    @property
    def config(self) -> HarnessConfig:
        return self._config

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        """Set callback(input_name, job_name, status) for progress updates."""
        self._progress_callback = callback

    def run(
        self,
        jobs: Mapping[str, Callable[..., Any]],
        *,
        inputs: Mapping[str, Any] | None = None,
    ) -> list[JobResult]:
        """Run every job on every input, sequentially.

        Args:
            jobs: Job name to callable. Called with the input value, or with
                no arguments when inputs is None.
            inputs: Input name to input value.

        Returns:
            One JobResult per (input, job) pair, in input then job order.
        """
        results: list[JobResult] = []

        if inputs is None:
            for job_name, func in jobs.items():
                results.append(self._run_job(job_name, NO_INPUT, func))
            return results

        for input_name, value in inputs.items():
            for job_name, func in jobs.items():
                results.append(self._run_job(job_name, input_name, _bind(func, value)))
        return results

    def _run_job(self, job_name: str, input_name: str, func: Callable[[], Any]) -> JobResult:
        if self._progress_callback:
            self._progress_callback(input_name, job_name, "running")
        log.debug("Running %s with input %r", job_name, input_name)

        try:
            result = JobResult(job_name=job_name, input_name=input_name, metrics=self._measure(func))
        except Exception as e:
            result = JobResult(
                job_name=job_name,
                input_name=input_name,
                metrics=None,
                status=Status.FAILED,
                error=str(e) or type(e).__name__,
            )
            log.warning("Job %s with input %r failed: %s", job_name, input_name, result.error)
            if not self._config.continue_on_error:
                raise

        if self._progress_callback:
            self._progress_callback(input_name, job_name, "success" if result.ok else "failed")
        return result

    def _measure(self, func: Callable[[], Any]) -> Metrics:
        run_for(func, seconds=self._config.warmup)
        timing = compute_stats(measure_for(func, seconds=self._config.time))

        memory_bytes = None
        if self._config.memory_time > 0:
            memory_bytes = measure_allocations(func, seconds=self._config.memory_time)

        return Metrics(timing=timing, ips=timing.ops_per_second, memory_bytes=memory_bytes)


def _bind(func: Callable[[Any], Any], value: Any) -> Callable[[], Any]:
    def call() -> Any:
        return func(value)

    return call
