r"""
Tests for chain_bench.reporting module.
"""

import json
import math
import tempfile
from pathlib import Path

import pytest

from chain_bench.config import GraphParams
from chain_bench.reporting import (
    CsvExporter,
    JsonExporter,
    MarkdownExporter,
    ResultCollector,
    VegaLiteExporter,
    build_chart_spec,
)
from chain_bench.reporting.chart import VEGA_LITE_SCHEMA
from chain_bench.types import ChartRecord, Shape, TargetSelector


@pytest.fixture
def sample_records():
    return [
        ChartRecord(Shape.CHAIN, TargetSelector.LATEST, 100, 1_000.0),
        ChartRecord(Shape.DAG, TargetSelector.LATEST, 100, 4_000.0),
        ChartRecord(Shape.BLOCKDAG, TargetSelector.LATEST, 100, 2_000.0),
        ChartRecord(Shape.DAG, TargetSelector.MIDDLE, 100, 8_000.0),
    ]


@pytest.fixture
def collector_with_results(sample_result, failed_result, sample_records):
    collector = ResultCollector()
    collector.start_session(sizes=[100], params=GraphParams(), seed_graph=42)
    collector.add_results([sample_result, failed_result])
    collector.add_records(sample_records)
    collector.end_session()
    return collector


class TestResultCollector:
    def test_create_collector(self):
        collector = ResultCollector()
        assert collector.results == []
        assert collector.records == []

    def test_start_session(self):
        collector = ResultCollector()
        collector.start_session(sizes=[500, 1000], params=GraphParams(k_internal=0), seed_query=3)

        assert collector.session.sizes == [500, 1000]
        assert collector.session.params["k_internal"] == 0
        assert collector.session.seed_graph is None
        assert collector.session.seed_query == 3
        assert collector.session.session_id.startswith("bench_")
        assert collector.environment.networkx_version
        assert collector.environment.memory_gb > 0

    def test_end_session(self):
        collector = ResultCollector()
        collector.start_session(sizes=[10], params=GraphParams())
        assert collector.session.completed_at == ""
        collector.end_session()
        assert collector.session.completed_at

    def test_add_results(self, sample_result):
        collector = ResultCollector()
        collector.add_results([sample_result, sample_result])
        assert len(collector.results) == 2

    def test_get_results_by_input(self, collector_with_results):
        assert len(collector_with_results.get_results_by_input("Size 100 Tx")) == 2
        assert collector_with_results.get_results_by_input("Size 5 Tx") == []

    def test_compute_comparisons(self, collector_with_results):
        comparisons = collector_with_results.compute_comparisons()

        assert comparisons["Latest Tx to Genesis @ 100"] == {"Chain": 0.25, "Dag": 1.0, "Blockdag": 0.5}
        assert comparisons["Middle Tx to Genesis @ 100"] == {"Dag": 1.0}

    def test_to_dict(self, collector_with_results):
        data = collector_with_results.to_dict()

        assert data["session"]["seed_graph"] == 42
        assert data["session"]["params"]["dag_avg_parents"] == 3
        assert len(data["results"]) == 2
        assert data["results"][0]["status"] == "SUCCESS"
        assert data["results"][0]["metrics"]["ips"] == 500_000.0
        assert "memory_bytes" not in data["results"][0]["metrics"]
        assert data["results"][1]["error"] == "boom"
        assert "metrics" not in data["results"][1]
        assert data["records"][0] == {
            "GraphType": "Chain",
            "QueryTarget": "Latest Tx to Genesis",
            "TxCount": 100,
            "IPS": 1_000.0,
        }


class TestJsonExporter:
    def test_to_string(self, collector_with_results):
        data = json.loads(JsonExporter().to_string(collector_with_results))
        assert set(data) == {"session", "environment", "results", "records", "comparisons"}

    def test_export_to_file(self, collector_with_results):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "results.json"
            JsonExporter().export(collector_with_results, path)

            data = json.loads(path.read_text())
            assert len(data["records"]) == 4

    def test_rejects_non_finite_ips(self):
        collector = ResultCollector()
        collector.add_records([ChartRecord(Shape.CHAIN, TargetSelector.LATEST, 1, math.inf)])
        with pytest.raises(ValueError):
            JsonExporter().to_string(collector)


class TestCsvExporter:
    def test_to_string(self, collector_with_results):
        lines = CsvExporter().to_string(collector_with_results).split("\n")

        assert lines[0] == "session_id,job,input,status,mean_us,median_us,p99_us,ips,iterations,memory_bytes"
        assert len(lines) == 3
        assert "Dag - Latest Tx to Genesis,Size 100 Tx,SUCCESS,2.000,2.000,4.000,500000.00,10," in lines[1]
        assert lines[2].endswith("Chain - Middle Tx to Genesis,Size 100 Tx,FAILED,,,,,,")


class TestMarkdownExporter:
    def test_to_string(self, collector_with_results):
        content = MarkdownExporter().to_string(collector_with_results)

        assert "# Transaction Graph Query Benchmark Report" in content
        assert "**Graph seed:** 42" in content
        assert "**Query seed:** none" in content
        assert "- tx_per_block: 10" in content
        assert "| Size 100 Tx | 1 | 1 | 500,000 |" in content

    def test_target_sections(self, collector_with_results):
        content = MarkdownExporter().to_string(collector_with_results)

        assert "## Latest Tx to Genesis" in content
        assert "## Middle Tx to Genesis" in content
        assert "## Random Tx to Genesis" not in content
        assert "| Tx Count | Chain (ips) | Dag (ips) | Blockdag (ips) |" in content
        assert "| 100 | 1,000 | 4,000 | 2,000 |" in content

    def test_comparisons(self, collector_with_results):
        content = MarkdownExporter().to_string(collector_with_results)

        assert "## Shape Comparisons" in content
        assert "| Latest Tx to Genesis @ 100 | 0.25x | **1.00x** | 0.50x |" in content
        assert "| Middle Tx to Genesis @ 100 | N/A | **1.00x** | N/A |" in content

    def test_empty_collector(self):
        content = MarkdownExporter().to_string(ResultCollector())
        assert "## Shape Comparisons" not in content


class TestVegaLite:
    def test_spec_structure(self, sample_records):
        spec = build_chart_spec(sample_records)

        assert spec["$schema"] == VEGA_LITE_SCHEMA
        assert spec["title"] == "Graph Query Performance: Path to Genesis"
        assert spec["facet"]["column"]["field"] == "QueryTarget"
        assert spec["resolve"] == {"scale": {"y": "independent"}}

        encoding = spec["spec"]["encoding"]
        assert encoding["x"]["field"] == "TxCount"
        assert encoding["y"]["field"] == "IPS"
        assert encoding["color"]["field"] == "GraphType"

    def test_embedded_data(self, sample_records):
        values = build_chart_spec(sample_records)["data"]["values"]
        assert len(values) == 4
        assert values[1] == {"GraphType": "Dag", "QueryTarget": "Latest Tx to Genesis", "TxCount": 100, "IPS": 4_000.0}

    def test_custom_title(self):
        assert build_chart_spec([], title="Nightly")["title"] == "Nightly"

    def test_exporter_writes_valid_json(self, collector_with_results, tmp_path):
        path = tmp_path / "chart.json"
        VegaLiteExporter().export(collector_with_results, path)
        assert json.loads(path.read_text())["data"]["values"][0]["GraphType"] == "Chain"

    def test_rejects_non_finite_ips(self):
        collector = ResultCollector()
        collector.add_records([ChartRecord(Shape.DAG, TargetSelector.LATEST, 10, math.inf)])
        with pytest.raises(ValueError):
            VegaLiteExporter().to_string(collector)
