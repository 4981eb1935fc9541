r"""
Command-line interface for chain-bench.

    chain-bench run --sizes 500,1000 --seed-graph 42
    chain-bench graphs generate -s blockdag -n 1000
"""

from chain_bench.cli.main import app, main

__all__ = [
    "app",
    "main",
]
