r"""
Vega-Lite chart specification with embedded data.

One facet column per query target, one line per graph shape,
x = total transactions, y = query iterations per second.

    from chain_bench.reporting.chart import VegaLiteExporter

    VegaLiteExporter().export(collector, "graph_bench_vega_spec.json")
"""

import json
from typing import Any

from chain_bench.reporting.collector import ResultCollector
from chain_bench.reporting.formats import BaseExporter
from chain_bench.types import ChartRecord

__all__ = ["VEGA_LITE_SCHEMA", "VegaLiteExporter", "build_chart_spec"]

VEGA_LITE_SCHEMA = "https://vega.github.io/schema/vega-lite/v5.json"


def build_chart_spec(records: list[ChartRecord], *, title: str | None = None) -> dict[str, Any]:
    """Build a faceted line chart spec for the given records."""
    return {
        "$schema": VEGA_LITE_SCHEMA,
        "title": title or "Graph Query Performance: Path to Genesis",
        "data": {"values": [r.to_dict() for r in records]},
        "facet": {
            "column": {"field": "QueryTarget", "type": "nominal", "title": "Query Target"},
        },
        "spec": {
            "width": 250,
            "height": 300,
            "mark": {"type": "line", "point": True},
            "encoding": {
                "x": {
                    "field": "TxCount",
                    "type": "quantitative",
                    "title": "Total Transactions",
                    "sort": "ascending",
                },
                "y": {
                    "field": "IPS",
                    "type": "quantitative",
                    "title": "Query IPS",
                    "axis": {"format": ",.0f"},
                },
                "color": {"field": "GraphType", "type": "nominal", "title": "Graph Type"},
                "tooltip": [
                    {"field": "GraphType", "title": "Graph"},
                    {"field": "QueryTarget", "title": "Target"},
                    {"field": "TxCount", "title": "Tx Count"},
                    {"field": "IPS", "title": "IPS", "format": ",.2f"},
                ],
            },
        },
        "resolve": {"scale": {"y": "independent"}},
    }


class VegaLiteExporter(BaseExporter):
    """Export chart records as a Vega-Lite specification."""

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def to_string(self, collector: ResultCollector) -> str:
        """Export the chart spec to a JSON string."""
        return json.dumps(build_chart_spec(collector.records), indent=self._indent, allow_nan=False)
