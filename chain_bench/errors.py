r"""
Exception hierarchy for chain-bench.

    from chain_bench.errors import ChainBenchError, NoResultsError

    try:
        orchestrator.run()
    except ChainBenchError as e:
        print(f"Suite failed: {e}")
"""

__all__ = [
    "ChainBenchError",
    "InvalidParameterError",
    "InvariantViolation",
    "SuiteError",
    "NoJobsError",
    "NoResultsError",
    "ReportError",
]


class ChainBenchError(Exception):
    """Base class for chain-bench errors."""


class InvalidParameterError(ChainBenchError, ValueError):
    """A size or structural parameter is out of range."""


class InvariantViolation(ChainBenchError):
    """A constructed graph has vertices with no path to genesis.

    Attributes:
        vertices: Disconnected vertices, sorted.
    """

    def __init__(self, vertices: list[int]) -> None:
        self.vertices = vertices
        preview = ", ".join(str(v) for v in vertices[:10])
        more = f" (+{len(vertices) - 10} more)" if len(vertices) > 10 else ""
        super().__init__(f"{len(vertices)} vertices cannot reach genesis: {preview}{more}")


class SuiteError(ChainBenchError):
    """The benchmark suite could not produce a report."""


class NoJobsError(SuiteError):
    """The job table is empty."""


class NoResultsError(SuiteError):
    """The harness returned no usable result records."""


class ReportError(SuiteError):
    """Writing a report file failed."""
