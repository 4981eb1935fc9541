r"""
Result collection and reporting.

Aggregates harness results and chart records and exports them to
JSON, CSV, Markdown and Vega-Lite formats.

    from chain_bench.reporting import ResultCollector, VegaLiteExporter

    collector = ResultCollector()
    collector.add_records(records)
    VegaLiteExporter().export(collector, "chart.json")
"""

from chain_bench.reporting.chart import VegaLiteExporter, build_chart_spec
from chain_bench.reporting.collector import EnvironmentInfo, ResultCollector, SessionInfo
from chain_bench.reporting.formats import BaseExporter, CsvExporter, JsonExporter, MarkdownExporter

__all__ = [
    "BaseExporter",
    "CsvExporter",
    "EnvironmentInfo",
    "JsonExporter",
    "MarkdownExporter",
    "ResultCollector",
    "SessionInfo",
    "VegaLiteExporter",
    "build_chart_spec",
]
