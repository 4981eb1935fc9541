r"""
Timing utilities for the benchmark harness.

    from chain_bench.runner.timing import Timer, measure_for

    timings = measure_for(lambda: query_path_to_genesis(graph, 999), seconds=0.5)
"""

import gc
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

__all__ = ["Timer", "measure_for", "run_for", "timed_section"]


class Timer:
    """Context manager for timing code blocks.

        with Timer() as t:
            do_something()
        print(f"Elapsed: {t.elapsed_ms}ms")
    """

    def __init__(self) -> None:
        self._start: int = 0
        self._end: int = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._end = time.perf_counter_ns()

    @property
    def elapsed_ns(self) -> int:
        """Elapsed time in nanoseconds."""
        return self._end - self._start

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed_ns / 1_000_000

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_ns / 1_000_000_000


def run_for(func: Callable[[], Any], *, seconds: float) -> int:
    """Call func repeatedly for a wall-clock budget, without recording.

    Returns:
        Number of calls made.
    """
    if seconds <= 0:
        return 0

    deadline = time.perf_counter_ns() + int(seconds * 1_000_000_000)
    calls = 0
    while time.perf_counter_ns() < deadline:
        func()
        calls += 1
    return calls


def measure_for(
    func: Callable[[], Any],
    *,
    seconds: float,
    min_iterations: int = 1,
) -> list[int]:
    """Measure execution time of func repeatedly for a wall-clock budget.

    Garbage collection is disabled around each timed call.

    Args:
        func: Function to call (no arguments).
        seconds: Measurement budget in seconds.
        min_iterations: Calls to time even if the budget is exhausted.

    Returns:
        List of elapsed times in nanoseconds.
    """
    deadline = time.perf_counter_ns() + int(max(0.0, seconds) * 1_000_000_000)
    timings: list[int] = []

    while len(timings) < min_iterations or time.perf_counter_ns() < deadline:
        gc.disable()
        try:
            start = time.perf_counter_ns()
            func()
            end = time.perf_counter_ns()
        finally:
            gc.enable()
        timings.append(end - start)

    return timings


@contextmanager
def timed_section(name: str, *, callback: Callable[[str, int], None] | None = None) -> Iterator[Timer]:
    """Context manager for timing named code sections.

    Args:
        name: Name of the section being timed.
        callback: Optional callback(name, elapsed_ns) called on exit.

    Yields:
        Timer instance.
    """
    timer = Timer()
    timer.__enter__()
    try:
        yield timer
    finally:
        timer.__exit__(None, None, None)
        if callback:
            callback(name, timer.elapsed_ns)
