r"""
Result collection and aggregation.

    from chain_bench.reporting.collector import ResultCollector

    collector = ResultCollector()
    collector.start_session(sizes=[500, 1000], params=GraphParams())
    collector.add_results(results)
    collector.add_records(records)
"""

import platform
import sys
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import Any

import networkx as nx
import psutil

from chain_bench.config import GraphParams
from chain_bench.types import ChartRecord, JobResult

__all__ = ["EnvironmentInfo", "ResultCollector", "SessionInfo"]


@dataclass
class SessionInfo:
    """Information about a benchmark session.

    Attributes:
        session_id: Unique session identifier.
        started_at: Session start timestamp.
        completed_at: Session end timestamp (empty if ongoing).
        sizes: Graph sizes benchmarked.
        params: Structural graph parameters.
        seed_graph: Graph construction seed, if any.
        seed_query: Query target seed, if any.
    """

    session_id: str = ""
    started_at: str = ""
    completed_at: str = ""
    sizes: list[int] = field(default_factory=list)
    params: dict[str, int] = field(default_factory=dict)
    seed_graph: int | None = None
    seed_query: int | None = None


@dataclass
class EnvironmentInfo:
    """Information about the benchmark environment.

    Attributes:
        platform: Operating system platform.
        python_version: Python version string.
        networkx_version: networkx version string.
        cpu: CPU description.
        memory_gb: Total memory in GB.
    """

    platform: str = ""
    python_version: str = ""
    networkx_version: str = ""
    cpu: str = ""
    memory_gb: float = 0.0


class ResultCollector:
    """Collects harness results and chart records for one session."""

    def __init__(self) -> None:
        self._results: list[JobResult] = []
        self._records: list[ChartRecord] = []
        self._session = SessionInfo()
        self._environment = EnvironmentInfo()

    def start_session(
        self,
        *,
        sizes: list[int],
        params: GraphParams,
        seed_graph: int | None = None,
        seed_query: int | None = None,
    ) -> None:
        """Start a new benchmark session."""
        started_at = datetime.now(UTC)
        self._session = SessionInfo(
            session_id=f"bench_{started_at.strftime('%Y%m%d_%H%M%S')}",
            started_at=started_at.isoformat(),
            sizes=list(sizes),
            params=asdict(params),
            seed_graph=seed_graph,
            seed_query=seed_query,
        )
        self._collect_environment()

    def _collect_environment(self) -> None:
        self._environment = EnvironmentInfo(
            platform=platform.system().lower(),
            python_version=f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
            networkx_version=nx.__version__,
            cpu=platform.processor() or "unknown",
            memory_gb=round(psutil.virtual_memory().total / (1024**3), 1),
        )

    def end_session(self) -> None:
        """End the current benchmark session."""
        self._session.completed_at = datetime.now(UTC).isoformat()

    def add_results(self, results: list[JobResult]) -> None:
        """Add multiple harness results."""
        self._results.extend(results)

    def add_records(self, records: list[ChartRecord]) -> None:
        """Add chart records."""
        self._records.extend(records)

    @property
    def results(self) -> list[JobResult]:
        """Get all collected results."""
        return self._results

    @property
    def records(self) -> list[ChartRecord]:
        """Get all chart records."""
        return self._records

    @property
    def session(self) -> SessionInfo:
        """Get session information."""
        return self._session

    @property
    def environment(self) -> EnvironmentInfo:
        """Get environment information."""
        return self._environment

    def get_results_by_input(self, input_name: str) -> list[JobResult]:
        """Get results for a specific input."""
        return [r for r in self._results if r.input_name == input_name]

    def compute_comparisons(self) -> dict[str, dict[str, float]]:
        """Compute throughput ratios across shapes.

        Returns:
            Dict mapping "<target> @ <size>" to dict of shape->ratio, where
            the fastest shape has ratio 1.0.
        """
        groups: dict[str, dict[str, float]] = defaultdict(dict)
        for record in self._records:
            key = f"{record.target.description} @ {record.size}"
            groups[key][record.shape.label] = record.ips

        comparisons: dict[str, dict[str, float]] = {}
        for key, ips_by_shape in groups.items():
            best = max(ips_by_shape.values())
            comparisons[key] = {
                shape: round(ips / best if best > 0 else 0.0, 2) for shape, ips in ips_by_shape.items()
            }
        return comparisons

    def to_dict(self) -> dict[str, Any]:
        """Convert collected data to dictionary."""
        return {
            "session": {
                "id": self._session.session_id,
                "started_at": self._session.started_at,
                "completed_at": self._session.completed_at,
                "sizes": self._session.sizes,
                "params": self._session.params,
                "seed_graph": self._session.seed_graph,
                "seed_query": self._session.seed_query,
            },
            "environment": asdict(self._environment),
            "results": [self._result_to_dict(r) for r in self._results],
            "records": [r.to_dict() for r in self._records],
            "comparisons": self.compute_comparisons(),
        }

    def _result_to_dict(self, result: JobResult) -> dict[str, Any]:
        data: dict[str, Any] = {
            "job": result.job_name,
            "input": result.input_name,
            "status": result.status.name,
        }

        if result.metrics:
            timing = result.metrics.timing
            data["metrics"] = {
                "timing": {
                    "min_ns": timing.min_ns,
                    "max_ns": timing.max_ns,
                    "mean_ns": timing.mean_ns,
                    "median_ns": timing.median_ns,
                    "std_ns": timing.std_ns,
                    "p99_ns": timing.p99_ns,
                    "iterations": timing.iterations,
                },
                "ips": result.metrics.ips,
            }
            if result.metrics.memory_bytes is not None:
                data["metrics"]["memory_bytes"] = result.metrics.memory_bytes

        if result.error:
            data["error"] = result.error

        return data
