#!/usr/bin/env python
"""Check that every generated graph shape keeps all vertices connected to genesis."""

import sys

from chain_bench.config import GraphParams
from chain_bench.graphs import GENESIS, GraphBuilderRegistry, check_connectivity, make_rng, query_path_to_genesis
from chain_bench.targets import query_rng, select_targets

SIZES = [1, 2, 10, 100, 1000, 5000]

# Parameter sets around the defaults and the degenerate block DAG
PARAMS = {
    "default": GraphParams(),
    "sparse": GraphParams(dag_avg_parents=1, tx_per_block=1, k_internal=0, k_external=1),
    "wide": GraphParams(dag_avg_parents=8, tx_per_block=50, k_internal=6, k_external=4),
    "no-internal": GraphParams(dag_avg_parents=2, tx_per_block=10, k_internal=0, k_external=1),
}

SEEDS = [None, 0, 12345]


def check_shape(name: str) -> tuple[bool, str]:
    """Build every size/params/seed combination for one shape. Returns (success, message)."""
    builder = GraphBuilderRegistry.create(name)
    graphs = 0
    try:
        for size in SIZES:
            for label, params in PARAMS.items():
                for seed in SEEDS:
                    graph = builder.build(size, params, rng=make_rng(seed))
                    graphs += 1

                    # Every non-genesis vertex needs a parent with a lower index
                    for vertex in graph.nodes:
                        if vertex != GENESIS and graph.out_degree(vertex) == 0:
                            return False, f"{label} size={size} seed={seed}: vertex {vertex} has no parent"
                    for child, parent in graph.edges:
                        if parent >= child:
                            return False, f"{label} size={size} seed={seed}: edge {child}->{parent}"

                    disconnected = check_connectivity(graph)
                    if disconnected:
                        return False, f"{label} size={size} seed={seed}: {len(disconnected)} vertices disconnected"

                    # The benchmarked query must succeed from every target
                    for target in select_targets(size, rng=query_rng(seed)).values():
                        if not query_path_to_genesis(graph, target):
                            return False, f"{label} size={size} seed={seed}: no path from {target}"

        return True, f"All {graphs} graphs connected"

    except Exception as e:
        return False, str(e)[:80]


def main():
    print("=" * 70)
    print("Graph Connectivity Checks")
    print("=" * 70)
    print()
    print(f"Sizes: {', '.join(str(s) for s in SIZES)}")
    print(f"Parameter sets: {', '.join(PARAMS)}")
    print()

    results = {}
    for shape in GraphBuilderRegistry.list():
        print(f"Checking {shape.value}...", end=" ", flush=True)
        ok, msg = check_shape(shape.value)
        results[shape.value] = (ok, msg)
        print("[OK]" if ok else "[FAIL]")
        if not ok:
            print(f"  -> {msg}")

    print()
    print("=" * 70)
    print("Summary")
    print("=" * 70)
    passed = sum(1 for ok, _ in results.values() if ok)
    failed = len(results) - passed
    print(f"Passed: {passed}/{len(results)}")
    if failed > 0:
        print(f"Failed: {failed}")
        for name, (ok, msg) in results.items():
            if not ok:
                print(f"  - {name}: {msg}")
    print("=" * 70)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
