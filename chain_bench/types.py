r"""
Core types for transaction-graph benchmarks.

    from chain_bench.types import Shape, TargetSelector, JobResult

    for result in results:
        if result.ok:
            print(f"{result.job_name} @ {result.input_name}: {result.metrics.ips:.0f} ips")
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Any

__all__ = [
    "Shape",
    "TargetSelector",
    "Status",
    "TimingStats",
    "Metrics",
    "JobResult",
    "ChartRecord",
]


class Shape(str, Enum):
    """Graph construction policy."""

    CHAIN = "chain"
    DAG = "dag"
    BLOCKDAG = "blockdag"

    @property
    def label(self) -> str:
        """Capitalized name used in job names and charts."""
        return self.value.capitalize()


class TargetSelector(str, Enum):
    """Rule choosing the query vertex for a graph size."""

    LATEST = "latest"
    MIDDLE = "middle"
    NEAR_GENESIS = "near_genesis"
    RANDOM = "random"

    @property
    def description(self) -> str:
        """Human-readable description used in job names and charts."""
        return _TARGET_DESCRIPTIONS[self]


_TARGET_DESCRIPTIONS = {
    TargetSelector.LATEST: "Latest Tx to Genesis",
    TargetSelector.MIDDLE: "Middle Tx to Genesis",
    TargetSelector.NEAR_GENESIS: "Near Genesis Tx to Genesis",
    TargetSelector.RANDOM: "Random Tx to Genesis",
}


class Status(IntEnum):
    """Job outcome status."""

    SUCCESS = auto()
    FAILED = auto()


@dataclass(frozen=True, slots=True)
class TimingStats:
    """Timing statistics for one job on one input.

    Attributes:
        min_ns: Minimum execution time in nanoseconds.
        max_ns: Maximum execution time in nanoseconds.
        mean_ns: Mean execution time in nanoseconds.
        median_ns: Median execution time in nanoseconds.
        std_ns: Standard deviation in nanoseconds.
        p99_ns: 99th percentile in nanoseconds.
        iterations: Number of measured iterations.
    """

    min_ns: int
    max_ns: int
    mean_ns: float
    median_ns: float
    std_ns: float
    p99_ns: float
    iterations: int

    @property
    def mean_us(self) -> float:
        """Mean execution time in microseconds."""
        return self.mean_ns / 1_000

    @property
    def median_us(self) -> float:
        """Median execution time in microseconds."""
        return self.median_ns / 1_000

    @property
    def p99_us(self) -> float:
        """99th percentile in microseconds."""
        return self.p99_ns / 1_000

    @property
    def ops_per_second(self) -> float:
        """Operations per second based on mean time."""
        if self.mean_ns == 0:
            return float("inf")
        return 1_000_000_000 / self.mean_ns


@dataclass(frozen=True, slots=True)
class Metrics:
    """Collected metrics for one job on one input.

    Attributes:
        timing: Timing statistics.
        ips: Iterations per second.
        memory_bytes: Mean peak traced allocation per call (if measured).
    """

    timing: TimingStats
    ips: float
    memory_bytes: int | None = None


@dataclass(frozen=True, slots=True)
class JobResult:
    """Result of running one job against one input.

    Attributes:
        job_name: Name the job was registered under.
        input_name: Name of the input the job was invoked with.
        metrics: Collected metrics (None if the job failed).
        status: Outcome status.
        error: Error message if failed.
    """

    job_name: str
    input_name: str
    metrics: Metrics | None
    status: Status = Status.SUCCESS
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the job completed successfully."""
        return self.status == Status.SUCCESS


@dataclass(frozen=True, slots=True)
class ChartRecord:
    """One plotted point: query throughput for a shape/target at a size."""

    shape: Shape
    target: TargetSelector
    size: int
    ips: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "GraphType": self.shape.label,
            "QueryTarget": self.target.description,
            "TxCount": self.size,
            "IPS": self.ips,
        }
