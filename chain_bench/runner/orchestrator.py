r"""
Suite orchestrator for path-to-genesis query benchmarks.

Builds every graph and query target up front, hands the (shape x target)
job table to the harness, reshapes the timing results into chart records
and writes the reports.

    from chain_bench.runner import SuiteOrchestrator

    orchestrator = SuiteOrchestrator(config=SuiteConfig(sizes=[500, 1000], seed_graph=42))
    result = orchestrator.run()
    print(result.paths["vega_spec"])
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from itertools import product
from pathlib import Path

from chain_bench.config import SuiteConfig
from chain_bench.errors import InvalidParameterError, NoJobsError, NoResultsError, ReportError
from chain_bench.graphs import GraphSet, assert_connected, build_graph_set, query_path_to_genesis
from chain_bench.reporting import (
    BaseExporter,
    CsvExporter,
    JsonExporter,
    MarkdownExporter,
    ResultCollector,
    VegaLiteExporter,
)
from chain_bench.runner.harness import BenchmarkHarness, HarnessConfig, ProgressCallback
from chain_bench.runner.timing import timed_section
from chain_bench.targets import TargetSet, query_rng, select_targets
from chain_bench.types import ChartRecord, JobResult, Shape, TargetSelector
from chain_bench.utils.memory import format_bytes, get_process_memory

__all__ = [
    "QueryJob",
    "SuiteInput",
    "SuiteOrchestrator",
    "SuiteResult",
    "build_job_table",
    "reshape_results",
]

log = logging.getLogger(__name__)

REPORT_SUFFIXES = {
    "json": "_results.json",
    "csv": "_results.csv",
    "markdown": "_report.md",
    "vega_spec": "_vega_spec.json",
}


@dataclass(frozen=True, slots=True)
class SuiteInput:
    """Graphs and query targets for one size."""

    size: int
    graphs: GraphSet
    targets: TargetSet

    @property
    def name(self) -> str:
        return f"Size {self.size} Tx"


@dataclass(frozen=True, slots=True)
class QueryJob:
    """Path-to-genesis query on one shape from one target."""

    shape: Shape
    target: TargetSelector

    @property
    def name(self) -> str:
        return f"{self.shape.label} - {self.target.description}"

    def __call__(self, suite_input: SuiteInput) -> bool:
        graph = suite_input.graphs[self.shape]
        return query_path_to_genesis(graph, suite_input.targets[self.target])


@dataclass
class SuiteResult:
    """Outcome of a suite run.

    Attributes:
        records: Chart records, one per successful (shape, target, size).
        results: Raw harness results.
        collector: Collector holding session info and results.
        paths: Written report paths by format.
        setup_seconds: Time spent building graphs and targets.
    """

    records: list[ChartRecord] = field(default_factory=list)
    results: list[JobResult] = field(default_factory=list)
    collector: ResultCollector | None = None
    paths: dict[str, Path] = field(default_factory=dict)
    setup_seconds: float = 0.0

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.results if not r.ok)


def build_job_table(
    shapes: list[Shape] | None = None,
    targets: list[TargetSelector] | None = None,
) -> dict[str, QueryJob]:
    """Build the named job table for every (shape, target) pair."""
    shapes = list(Shape) if shapes is None else shapes
    targets = list(TargetSelector) if targets is None else targets
    jobs = (QueryJob(shape, target) for shape, target in product(shapes, targets))
    return {job.name: job for job in jobs}


def reshape_results(
    results: list[JobResult],
    jobs: dict[str, QueryJob],
    inputs: dict[str, SuiteInput],
) -> list[ChartRecord]:
    """Turn harness results into chart records.

    Results that failed or that name an unknown job or input are skipped.
    """
    records = []
    for result in results:
        job = jobs.get(result.job_name)
        suite_input = inputs.get(result.input_name)
        if job is None or suite_input is None:
            log.warning("Could not match result %s / %s to a job", result.job_name, result.input_name)
            continue
        if not result.ok or result.metrics is None:
            continue
        records.append(ChartRecord(job.shape, job.target, suite_input.size, result.metrics.ips))
    return records


class SuiteOrchestrator:
    """Runs the graph query benchmark suite."""

    def __init__(self, *, config: SuiteConfig | None = None, harness: BenchmarkHarness | None = None) -> None:
        self._config = config or SuiteConfig()
        self._harness = harness or BenchmarkHarness(
            config=HarnessConfig(
                warmup=self._config.warmup,
                time=self._config.time,
                memory_time=self._config.memory_time,
            )
        )

    @property
    def config(self) -> SuiteConfig:
        return self._config

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        """Set callback(input_name, job_name, status) for progress updates."""
        self._harness.set_progress_callback(callback)

    def setup(self) -> dict[str, SuiteInput]:
        """Build graphs and targets for every size.

        Raises:
            InvariantViolation: If verify is enabled and a graph has
                vertices without a path to genesis.
        """
        config = self._config
        if config.seed_graph is not None:
            log.info("Using random seed for graph generation: %d", config.seed_graph)

        inputs: dict[str, SuiteInput] = {}
        for size in config.sizes:
            log.info("Creating graphs of size %d transactions...", size)
            graphs = build_graph_set(size, config.params, seed=config.seed_graph, shapes=config.shapes)
            if config.verify:
                for graph in graphs.values():
                    assert_connected(graph)
            targets = select_targets(size, rng=query_rng(config.seed_query))
            suite_input = SuiteInput(size=size, graphs=graphs, targets=targets)
            inputs[suite_input.name] = suite_input
        return inputs

    def run(self) -> SuiteResult:
        """Run the full suite and write reports.

        Raises:
            InvalidParameterError: If sizes or graph parameters are invalid.
            NoJobsError: If no (shape, target) jobs were requested.
            NoResultsError: If the harness produced no usable results.
            ReportError: If a report file could not be written.
        """
        config = self._config
        if not config.sizes or any(size <= 0 for size in config.sizes):
            raise InvalidParameterError("Sizes must be a non-empty list of positive integers")
        config.params.validate()

        jobs = build_job_table(config.shapes, config.targets)
        if not jobs:
            raise NoJobsError("No benchmark jobs generated. Check the requested shapes and targets.")

        collector = ResultCollector()
        collector.start_session(
            sizes=config.sizes,
            params=config.params,
            seed_graph=config.seed_graph,
            seed_query=config.seed_query,
        )

        log.info("Setting up graphs for benchmarking...")
        with timed_section("setup") as timer:
            inputs = self.setup()
        log.info(
            "Graph setup finished in %.3f seconds (process RSS %s).",
            timer.elapsed_seconds,
            format_bytes(get_process_memory()),
        )

        log.info("Starting graph query benchmarks with %d distinct jobs...", len(jobs))
        if config.seed_query is not None:
            log.info("Using random seed for query target selection: %d", config.seed_query)

        results = self._harness.run(jobs, inputs=inputs)
        records = reshape_results(results, jobs, inputs)
        if not records:
            raise NoResultsError("No result records produced by the benchmark harness.")

        collector.add_results(results)
        collector.add_records(records)
        collector.end_session()

        paths = self._write_reports(collector)
        return SuiteResult(
            records=records,
            results=results,
            collector=collector,
            paths=paths,
            setup_seconds=timer.elapsed_seconds,
        )

    def resolve_basename(self) -> str:
        """Output base name, timestamped when none was configured."""
        basename = self._config.output_basename
        if basename and basename.strip():
            return basename.strip()
        timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
        seed_suffix = f"_seed{self._config.seed_graph}" if self._config.seed_graph is not None else ""
        return f"graph_bench_results_{timestamp}{seed_suffix}"

    def _write_reports(self, collector: ResultCollector) -> dict[str, Path]:
        output_dir = Path(self._config.output_dir)
        base = output_dir / self.resolve_basename()
        exporters: dict[str, BaseExporter] = {
            "json": JsonExporter(),
            "csv": CsvExporter(),
            "markdown": MarkdownExporter(),
            "vega_spec": VegaLiteExporter(),
        }

        # Every format is rendered before any file is written
        try:
            rendered = {fmt: exporter.to_string(collector) for fmt, exporter in exporters.items()}
        except (TypeError, ValueError) as e:
            raise ReportError(f"Failed to render reports: {e}") from e

        paths: dict[str, Path] = {}
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for fmt, content in rendered.items():
                path = base.with_name(base.name + REPORT_SUFFIXES[fmt])
                path.write_text(content)
                paths[fmt] = path
                log.info("Saved %s report to %s", fmt, path)
        except OSError as e:
            raise ReportError(f"Failed to write reports to {output_dir}: {e}") from e

        return paths
