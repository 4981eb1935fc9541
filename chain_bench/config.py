r"""
Suite configuration and defaults.

Defaults mirror the command-line option table. Environment variables
with the CHAIN_BENCH_ prefix (optionally loaded from a .env file) override
the output directory and seeds.

    from chain_bench.config import GraphParams, SuiteConfig, parse_sizes

    config = SuiteConfig(sizes=parse_sizes("100,200"), params=GraphParams(dag_avg_parents=2))
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from chain_bench.errors import InvalidParameterError
from chain_bench.types import Shape, TargetSelector

# Look for .env in current dir or the project root
_env_file = Path(".env")
if not _env_file.exists():
    _env_file = Path(__file__).parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

__all__ = [
    "DEFAULT_SIZES",
    "DEFAULT_DAG_PARENTS",
    "DEFAULT_TX_PER_BLOCK",
    "DEFAULT_K_INTERNAL",
    "DEFAULT_K_EXTERNAL",
    "DEFAULT_WARMUP",
    "DEFAULT_TIME",
    "DEFAULT_MEMORY_TIME",
    "DEFAULT_OUTPUT_DIR",
    "ENV_PREFIX",
    "GraphParams",
    "SuiteConfig",
    "get_env",
    "get_env_int",
    "parse_sizes",
]

ENV_PREFIX = "CHAIN_BENCH_"

DEFAULT_SIZES = "500,1000,1500"
DEFAULT_DAG_PARENTS = 3
DEFAULT_TX_PER_BLOCK = 10
DEFAULT_K_INTERNAL = 2
DEFAULT_K_EXTERNAL = 1

# Harness durations in seconds
DEFAULT_WARMUP = 1.0
DEFAULT_TIME = 2.0
DEFAULT_MEMORY_TIME = 0.0

DEFAULT_OUTPUT_DIR = "benchmark_graph_results_enhanced"


@dataclass(frozen=True, slots=True)
class GraphParams:
    """Structural parameters shared by every graph size.

    Attributes:
        dag_avg_parents: Parents per vertex in the pure DAG.
        tx_per_block: Vertices per block in the block DAG.
        k_internal: Same-block parents per vertex in the block DAG.
        k_external: Earlier-block parents per vertex in the block DAG.
    """

    dag_avg_parents: int = DEFAULT_DAG_PARENTS
    tx_per_block: int = DEFAULT_TX_PER_BLOCK
    k_internal: int = DEFAULT_K_INTERNAL
    k_external: int = DEFAULT_K_EXTERNAL

    def validate(self) -> "GraphParams":
        """Check parameter ranges.

        Returns:
            self, for chaining.

        Raises:
            InvalidParameterError: If a parameter is out of range.
        """
        if self.dag_avg_parents <= 0:
            raise InvalidParameterError("dag_avg_parents must be a positive integer")
        if self.tx_per_block <= 0:
            raise InvalidParameterError("tx_per_block must be a positive integer")
        if self.k_internal < 0:
            raise InvalidParameterError("k_internal must be a non-negative integer")
        if self.k_external <= 0:
            raise InvalidParameterError("k_external must be a positive integer")
        return self


@dataclass
class SuiteConfig:
    """Configuration for one benchmark suite run.

    Attributes:
        sizes: Total vertex counts, one graph set per size.
        params: Structural graph parameters.
        shapes: Graph shapes to benchmark.
        targets: Target selectors to query.
        warmup: Harness warmup seconds per job and input.
        time: Harness measurement seconds per job and input.
        memory_time: Harness memory measurement seconds (0 disables).
        output_dir: Directory for report files.
        output_basename: Base file name (timestamped when None).
        seed_graph: Seed for graph construction (None = nondeterministic).
        seed_query: Seed for random target selection (None = nondeterministic).
        verify: Check the connectivity invariant after setup.
    """

    sizes: list[int] = field(default_factory=lambda: parse_sizes(DEFAULT_SIZES))
    params: GraphParams = field(default_factory=GraphParams)
    shapes: list[Shape] = field(default_factory=lambda: list(Shape))
    targets: list[TargetSelector] = field(default_factory=lambda: list(TargetSelector))
    warmup: float = DEFAULT_WARMUP
    time: float = DEFAULT_TIME
    memory_time: float = DEFAULT_MEMORY_TIME
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    output_basename: str | None = None
    seed_graph: int | None = None
    seed_query: int | None = None
    verify: bool = False


def parse_sizes(text: str) -> list[int]:
    """Parse a comma-separated list of graph sizes.

    Blank entries are ignored; the result is deduplicated and sorted.

    Args:
        text: Comma-separated positive integers (e.g. "500,1000,2000").

    Returns:
        Sorted unique sizes.

    Raises:
        InvalidParameterError: If an entry is not a positive integer or no
            sizes remain.
    """
    sizes: set[int] = set()
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            value = int(part)
        except ValueError:
            msg = f"Invalid size '{part}'. Use comma-separated positive numbers."
            raise InvalidParameterError(msg) from None
        if value <= 0:
            raise InvalidParameterError(f"Invalid size '{part}'. Sizes must be positive.")
        sizes.add(value)

    if not sizes:
        raise InvalidParameterError("No graph sizes given")
    return sorted(sizes)


def get_env(key: str, *, default: str | None = None) -> str | None:
    """Get environment variable with CHAIN_BENCH_ prefix.

    Args:
        key: Variable name without prefix (e.g., "SEED_GRAPH").
        default: Default value if not set.

    Returns:
        Environment variable value or default.
    """
    return os.environ.get(f"{ENV_PREFIX}{key}", default)


def get_env_int(key: str) -> int | None:
    """Get an integer environment variable with CHAIN_BENCH_ prefix.

    Raises:
        InvalidParameterError: If the variable is set but not an integer.
    """
    value = get_env(key)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise InvalidParameterError(f"{ENV_PREFIX}{key} must be an integer, got '{value}'") from None
