r"""
Base graph builder interface and shared construction helpers.

Graphs are networkx DiGraphs over integer vertices 0..N-1. Edges point
from a newer vertex to an older parent, so every edge goes to a strictly
lower index and acyclicity holds by construction.

    from chain_bench.graphs.base import GraphBuilderRegistry

    builder = GraphBuilderRegistry.create(Shape.DAG)
    graph = builder.build(1000, GraphParams(), rng=make_rng(42))
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

import networkx as nx

from chain_bench.config import GraphParams
from chain_bench.types import Shape

__all__ = [
    "GENESIS",
    "BaseGraphBuilder",
    "GraphBuilderRegistry",
    "GraphSet",
    "build_graph_set",
    "make_rng",
    "new_graph",
    "resolve_rng",
]

log = logging.getLogger(__name__)

GENESIS = 0

GraphSet = dict[Shape, nx.DiGraph]


def make_rng(seed: int | None = None) -> random.Random:
    """Create a private random source.

    Args:
        seed: Integer seed, or None to seed from OS entropy.

    Returns:
        A random.Random instance owned by the caller.
    """
    if seed is None:
        return random.Random()
    log.debug("Random source seeded with: %s", seed)
    return random.Random(seed)


def resolve_rng(rng: random.Random | None, seed: int | None) -> random.Random:
    """Use the given random source, or create one from seed."""
    if rng is not None:
        return rng
    return make_rng(seed)


def new_graph(shape: Shape, **attrs: Any) -> nx.DiGraph:
    """Create a graph holding only the genesis vertex."""
    graph = nx.DiGraph(shape=shape.value, **attrs)
    graph.add_node(GENESIS)
    return graph


class GraphBuilderRegistry:
    """Registry mapping shapes to builder classes."""

    _builders: dict[Shape, type[BaseGraphBuilder]] = {}

    @classmethod
    def register(cls, shape: Shape) -> Any:
        """Decorator to register a builder class."""

        def decorator(builder_cls: type[BaseGraphBuilder]) -> type[BaseGraphBuilder]:
            builder_cls.shape = shape
            cls._builders[shape] = builder_cls
            return builder_cls

        return decorator

    @classmethod
    def get(cls, shape: Shape | str) -> type[BaseGraphBuilder] | None:
        """Get builder class by shape."""
        try:
            return cls._builders.get(Shape(shape))
        except ValueError:
            return None

    @classmethod
    def list(cls) -> list[Shape]:
        """List registered shapes in declaration order."""
        return [shape for shape in Shape if shape in cls._builders]

    @classmethod
    def create(cls, shape: Shape | str) -> BaseGraphBuilder:
        """Instantiate the builder for a shape.

        Raises:
            ValueError: If no builder is registered for the shape.
        """
        builder_cls = cls.get(shape)
        if builder_cls is None:
            valid = ", ".join(s.value for s in cls.list())
            raise ValueError(f"Unknown shape '{shape}'. Valid shapes: {valid}")
        return builder_cls()


class BaseGraphBuilder(ABC):
    """Base class for graph construction policies."""

    shape: Shape

    @property
    def name(self) -> str:
        """Shape name."""
        return self.shape.value

    @property
    def description(self) -> str:
        """Human-readable description."""
        return (self.__class__.__doc__ or self.name).strip().splitlines()[0]

    @abstractmethod
    def build(self, size: int, params: GraphParams, *, rng: random.Random) -> nx.DiGraph:
        """Build a graph with (at least) `size` vertices including genesis."""
        ...


def build_graph_set(
    size: int,
    params: GraphParams,
    *,
    seed: int | None = None,
    shapes: Iterable[Shape] | None = None,
) -> GraphSet:
    """Build one graph per shape for a size.

    Each construction gets its own random source seeded with `seed`, so a
    shape's topology does not depend on which shapes were built before it.

    Args:
        size: Total vertex count.
        params: Structural parameters.
        seed: Graph construction seed (None = nondeterministic).
        shapes: Shapes to build (None = every registered shape).

    Returns:
        Mapping of shape to graph.
    """
    if shapes is None:
        shapes = GraphBuilderRegistry.list()
    return {
        shape: GraphBuilderRegistry.create(shape).build(size, params, rng=make_rng(seed))
        for shape in shapes
    }
