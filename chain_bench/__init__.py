r"""
chain-bench: path-to-genesis query benchmarks for blockchain-style graphs.

Builds linear chains, pure DAGs and block DAGs of transactions and
measures how fast reachability to the genesis transaction can be
answered from different positions in the graph.

    from chain_bench import SuiteConfig
    from chain_bench.runner import SuiteOrchestrator

    result = SuiteOrchestrator(config=SuiteConfig(sizes=[500, 1000], seed_graph=42)).run()
"""

from chain_bench.config import GraphParams, SuiteConfig, parse_sizes
from chain_bench.errors import ChainBenchError
from chain_bench.types import ChartRecord, JobResult, Metrics, Shape, Status, TargetSelector, TimingStats

__all__ = [
    "ChainBenchError",
    "ChartRecord",
    "GraphParams",
    "JobResult",
    "Metrics",
    "Shape",
    "Status",
    "SuiteConfig",
    "TargetSelector",
    "TimingStats",
    "parse_sizes",
]

__version__ = "0.1.0"
