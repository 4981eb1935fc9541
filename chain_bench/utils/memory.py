"""Memory measurement utilities for benchmarks.

Provides process-level RSS (via psutil) for reporting the footprint of
the graph setup phase, and per-call allocation measurement (via
tracemalloc) for the harness memory loop.
"""

from __future__ import annotations

import os
import statistics
import time
import tracemalloc
from collections.abc import Callable
from typing import Any

import psutil

__all__ = [
    "format_bytes",
    "get_process_memory",
    "measure_allocations",
]


def get_process_memory() -> int:
    """Get Python process RSS memory in bytes."""
    return psutil.Process(os.getpid()).memory_info().rss


def measure_allocations(func: Callable[[], Any], *, seconds: float) -> int:
    """Measure the mean peak memory allocated by one call of func.

    Calls func repeatedly for `seconds` (at least once) with tracemalloc
    active, resetting the peak before every call.

    Args:
        func: Function to call (no arguments).
        seconds: Measurement budget in seconds.

    Returns:
        Mean peak allocation per call in bytes.
    """
    deadline = time.perf_counter_ns() + int(max(0.0, seconds) * 1_000_000_000)
    peaks: list[int] = []

    tracemalloc.start()
    try:
        while not peaks or time.perf_counter_ns() < deadline:
            tracemalloc.reset_peak()
            baseline, _ = tracemalloc.get_traced_memory()
            func()
            _, peak = tracemalloc.get_traced_memory()
            peaks.append(max(0, peak - baseline))
    finally:
        tracemalloc.stop()

    return int(statistics.mean(peaks))


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with an IEC unit (e.g. '12.3 MiB')."""
    if abs(num_bytes) < 1024:
        return f"{int(num_bytes)} B"
    value = num_bytes / 1024
    for unit in ("KiB", "MiB"):
        if abs(value) < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GiB"
