r"""
Export formats for benchmark results.

    from chain_bench.reporting.formats import JsonExporter, MarkdownExporter

    exporter = JsonExporter()
    exporter.export(collector, "results.json")
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path

from chain_bench.reporting.collector import ResultCollector
from chain_bench.types import Shape, TargetSelector

__all__ = ["BaseExporter", "JsonExporter", "CsvExporter", "MarkdownExporter"]


class BaseExporter(ABC):
    """Base class for result exporters."""

    def export(self, collector: ResultCollector, path: str | Path) -> None:
        """Export results to file."""
        Path(path).write_text(self.to_string(collector))

    @abstractmethod
    def to_string(self, collector: ResultCollector) -> str:
        """Export results to string."""
        ...


class JsonExporter(BaseExporter):
    """Export results to JSON format."""

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def to_string(self, collector: ResultCollector) -> str:
        """Export results to JSON string."""
        return json.dumps(collector.to_dict(), indent=self._indent, allow_nan=False)


class CsvExporter(BaseExporter):
    """Export results to CSV format."""

    def to_string(self, collector: ResultCollector) -> str:
        """Export results to CSV string."""
        lines = ["session_id,job,input,status,mean_us,median_us,p99_us,ips,iterations,memory_bytes"]

        session_id = collector.session.session_id

        for result in collector.results:
            mean_us = ""
            median_us = ""
            p99_us = ""
            ips = ""
            iterations = ""
            memory = ""

            if result.metrics:
                timing = result.metrics.timing
                mean_us = f"{timing.mean_us:.3f}"
                median_us = f"{timing.median_us:.3f}"
                p99_us = f"{timing.p99_us:.3f}"
                ips = f"{result.metrics.ips:.2f}"
                iterations = str(timing.iterations)
                if result.metrics.memory_bytes is not None:
                    memory = str(result.metrics.memory_bytes)

            line = ",".join([
                session_id,
                result.job_name,
                result.input_name,
                result.status.name,
                mean_us,
                median_us,
                p99_us,
                ips,
                iterations,
                memory,
            ])
            lines.append(line)

        return "\n".join(lines)


class MarkdownExporter(BaseExporter):
    """Export results to Markdown format."""

    def to_string(self, collector: ResultCollector) -> str:
        """Export results to Markdown string."""
        lines: list[str] = []
        session = collector.session
        env = collector.environment

        lines.append("# Transaction Graph Query Benchmark Report")
        lines.append("")
        lines.append(f"**Session:** {session.session_id}")
        lines.append(f"**Sizes:** {', '.join(str(s) for s in session.sizes)}")
        lines.append(f"**Graph seed:** {session.seed_graph if session.seed_graph is not None else 'none'}")
        lines.append(f"**Query seed:** {session.seed_query if session.seed_query is not None else 'none'}")
        lines.append(f"**Date:** {session.started_at[:10] if session.started_at else 'N/A'}")
        lines.append("")

        if session.params:
            lines.append("## Parameters")
            lines.append("")
            for key, value in session.params.items():
                lines.append(f"- {key}: {value}")
            lines.append("")

        lines.append("## Environment")
        lines.append("")
        lines.append(f"- Platform: {env.platform}")
        lines.append(f"- Python: {env.python_version}")
        lines.append(f"- networkx: {env.networkx_version}")
        lines.append(f"- CPU: {env.cpu}")
        lines.append(f"- Memory: {env.memory_gb} GB")
        lines.append("")

        lines.append("## Summary")
        lines.append("")
        self._add_summary_table(collector, lines)

        for target in TargetSelector:
            if any(r.target is target for r in collector.records):
                lines.append(f"## {target.description}")
                lines.append("")
                self._add_target_table(collector, target, lines)

        comparisons = collector.compute_comparisons()
        if comparisons:
            lines.append("## Shape Comparisons")
            lines.append("")
            self._add_comparison_table(comparisons, lines)

        return "\n".join(lines)

    def _add_summary_table(self, collector: ResultCollector, lines: list[str]) -> None:
        input_names = list(dict.fromkeys(r.input_name for r in collector.results))

        lines.append("| Input | Success | Failed | Mean IPS |")
        lines.append("|-------|---------|--------|----------|")

        for input_name in input_names:
            input_results = collector.get_results_by_input(input_name)
            success = sum(1 for r in input_results if r.ok)
            failed = sum(1 for r in input_results if not r.ok)

            ips = [r.metrics.ips for r in input_results if r.ok and r.metrics]
            mean_ips = f"{sum(ips) / len(ips):,.0f}" if ips else "N/A"

            lines.append(f"| {input_name} | {success} | {failed} | {mean_ips} |")

        lines.append("")

    def _add_target_table(self, collector: ResultCollector, target: TargetSelector, lines: list[str]) -> None:
        records = [r for r in collector.records if r.target is target]
        shapes = [s for s in Shape if any(r.shape is s for r in records)]
        sizes = sorted({r.size for r in records})

        header = "| Tx Count | " + " | ".join(f"{s.label} (ips)" for s in shapes) + " |"
        separator = "|----------|" + "|".join("-" * 14 for _ in shapes) + "|"
        lines.append(header)
        lines.append(separator)

        for size in sizes:
            row = f"| {size} |"
            for shape in shapes:
                record = next((r for r in records if r.size == size and r.shape is shape), None)
                row += f" {record.ips:,.0f} |" if record else " N/A |"
            lines.append(row)

        lines.append("")

    def _add_comparison_table(self, comparisons: dict[str, dict[str, float]], lines: list[str]) -> None:
        shapes = [s.label for s in Shape if any(s.label in ratios for ratios in comparisons.values())]

        header = "| Query | " + " | ".join(shapes) + " |"
        separator = "|-------|" + "|".join("-" * 10 for _ in shapes) + "|"
        lines.append(header)
        lines.append(separator)

        for key, ratios in comparisons.items():
            row = f"| {key} |"
            for shape in shapes:
                ratio = ratios.get(shape)
                if ratio is None:
                    row += " N/A |"
                elif ratio == 1.0:
                    row += " **1.00x** |"
                else:
                    row += f" {ratio:.2f}x |"
            lines.append(row)

        lines.append("")
        lines.append("*Throughput relative to fastest shape (1.00x = fastest)*")
        lines.append("")
