"""Utility modules for chain-bench."""

from chain_bench.utils.memory import (
    format_bytes,
    get_process_memory,
    measure_allocations,
)

__all__ = [
    "format_bytes",
    "get_process_memory",
    "measure_allocations",
]
