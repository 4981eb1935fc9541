r"""
Command-line interface for chain-bench.

    chain-bench run --sizes 100,200 --dag-parents 2 --seed-graph 12345
    chain-bench graphs generate -s blockdag -n 1000 --seed 7
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from chain_bench.config import (
    DEFAULT_DAG_PARENTS,
    DEFAULT_K_EXTERNAL,
    DEFAULT_K_INTERNAL,
    DEFAULT_MEMORY_TIME,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SIZES,
    DEFAULT_TIME,
    DEFAULT_TX_PER_BLOCK,
    DEFAULT_WARMUP,
    GraphParams,
    SuiteConfig,
    get_env,
    get_env_int,
    parse_sizes,
)
from chain_bench.errors import ChainBenchError, InvalidParameterError
from chain_bench.types import Shape, TargetSelector

__all__ = ["app", "main"]

app = typer.Typer(
    name="chain-bench",
    help="Path-to-genesis query benchmarks over chain, DAG and block-DAG transaction graphs.",
    no_args_is_help=True,
)


class GraphsAction(str, Enum):
    LIST = "list"
    GENERATE = "generate"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_choices[E: Enum](text: str | None, enum_cls: type[E], option: str) -> list[E]:
    if text is None:
        return list(enum_cls)
    choices = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            choices.append(enum_cls(part))
        except ValueError:
            valid = ", ".join(str(e.value) for e in enum_cls)
            raise InvalidParameterError(f"Invalid value '{part}' for {option}. Valid values: {valid}") from None
    return list(dict.fromkeys(choices))


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


@app.command()
def run(
    sizes: Annotated[
        str, typer.Option("--sizes", help="Comma-separated total transaction counts (e.g. 500,1000,2000)")
    ] = DEFAULT_SIZES,
    dag_parents: Annotated[
        int, typer.Option("--dag-parents", min=1, help="Average parents per transaction in the pure DAG")
    ] = DEFAULT_DAG_PARENTS,
    tx_per_block: Annotated[
        int, typer.Option("--tx-per-block", min=1, help="Transactions per block in the block DAG")
    ] = DEFAULT_TX_PER_BLOCK,
    k_internal: Annotated[
        int, typer.Option("--k-internal", min=0, help="Same-block parents per transaction in the block DAG")
    ] = DEFAULT_K_INTERNAL,
    k_external: Annotated[
        int, typer.Option("--k-external", min=1, help="Earlier-block parents per transaction in the block DAG")
    ] = DEFAULT_K_EXTERNAL,
    shapes: Annotated[
        str | None, typer.Option("--shapes", help="Graph shapes to benchmark (comma-separated)")
    ] = None,
    targets: Annotated[
        str | None, typer.Option("--targets", help="Query targets to benchmark (comma-separated)")
    ] = None,
    warmup: Annotated[float, typer.Option("--warmup", min=0, help="Warmup seconds per job")] = DEFAULT_WARMUP,
    time_: Annotated[float, typer.Option("--time", min=0, help="Measurement seconds per job")] = DEFAULT_TIME,
    memory_time: Annotated[
        float, typer.Option("--memory-time", min=0, help="Memory measurement seconds per job (0 disables)")
    ] = DEFAULT_MEMORY_TIME,
    output_dir: Annotated[
        Path | None, typer.Option("-o", "--output-dir", help="Directory for reports")
    ] = None,
    output_basename: Annotated[
        str | None, typer.Option("--output-basename", help="Base name for report files (timestamped if omitted)")
    ] = None,
    seed_graph: Annotated[
        int | None, typer.Option("--seed-graph", help="Seed for deterministic graph generation")
    ] = None,
    seed_query: Annotated[
        int | None, typer.Option("--seed-query", help="Seed for deterministic random query target selection")
    ] = None,
    verify: Annotated[
        bool, typer.Option("--verify", help="Check every vertex reaches genesis before timing")
    ] = False,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose output")] = False,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would run")] = False,
) -> None:
    """Run path-to-genesis query benchmarks."""
    from chain_bench.runner import SuiteOrchestrator, build_job_table

    _configure_logging(verbose)

    try:
        config = SuiteConfig(
            sizes=parse_sizes(sizes),
            params=GraphParams(
                dag_avg_parents=dag_parents,
                tx_per_block=tx_per_block,
                k_internal=k_internal,
                k_external=k_external,
            ).validate(),
            shapes=_parse_choices(shapes, Shape, "--shapes"),
            targets=_parse_choices(targets, TargetSelector, "--targets"),
            warmup=warmup,
            time=time_,
            memory_time=memory_time,
            output_dir=output_dir or Path(get_env("OUTPUT_DIR", default=DEFAULT_OUTPUT_DIR)),
            output_basename=output_basename,
            seed_graph=seed_graph if seed_graph is not None else get_env_int("SEED_GRAPH"),
            seed_query=seed_query if seed_query is not None else get_env_int("SEED_QUERY"),
            verify=verify,
        )
    except InvalidParameterError as e:
        _fail(str(e))

    if verbose or dry_run:
        typer.echo(f"Sizes: {', '.join(str(s) for s in config.sizes)}")
        typer.echo(f"Output: {config.output_dir}")

    if dry_run:
        typer.echo("\n[DRY RUN] Would run:")
        for name in build_job_table(config.shapes, config.targets):
            typer.echo(f"  {name}")
        return

    orchestrator = SuiteOrchestrator(config=config)

    def progress(input_name: str, job_name: str, status: str) -> None:
        typer.echo(f"  [{input_name}] {job_name}: {status}")

    if verbose:
        orchestrator.set_progress_callback(progress)

    typer.echo("Running graph query benchmarks... This may take some time.")
    try:
        result = orchestrator.run()
    except ChainBenchError as e:
        _fail(f"Graph benchmark suite failed: {e}")

    typer.echo("\nGraph benchmark suite completed.")
    for fmt, path in result.paths.items():
        typer.echo(f"  {fmt}: {path}")
    typer.echo(f"\nCompleted: {result.success_count} successful, {result.failure_count} failed")


@app.command()
def graphs(
    action: Annotated[GraphsAction, typer.Argument(help="Action: list, generate")] = GraphsAction.LIST,
    shape: Annotated[Shape, typer.Option("-s", "--shape", help="Graph shape")] = Shape.DAG,
    size: Annotated[int, typer.Option("-n", "--size", min=1, help="Total transaction count")] = 100,
    dag_parents: Annotated[int, typer.Option("--dag-parents", min=1)] = DEFAULT_DAG_PARENTS,
    tx_per_block: Annotated[int, typer.Option("--tx-per-block", min=1)] = DEFAULT_TX_PER_BLOCK,
    k_internal: Annotated[int, typer.Option("--k-internal", min=0)] = DEFAULT_K_INTERNAL,
    k_external: Annotated[int, typer.Option("--k-external", min=1)] = DEFAULT_K_EXTERNAL,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
    output: Annotated[Path | None, typer.Option("-o", "--output", help="Output JSON file")] = None,
) -> None:
    """List graph shapes or generate one graph as a JSON edge list."""
    from chain_bench.graphs import (
        GraphBuilderRegistry,
        check_connectivity,
        export_edges,
        graph_summary,
        make_rng,
    )

    if action == GraphsAction.LIST:
        typer.echo("Available graph shapes:")
        for registered in GraphBuilderRegistry.list():
            builder = GraphBuilderRegistry.create(registered)
            typer.echo(f"  - {builder.name}: {builder.description}")
        return

    params = GraphParams(
        dag_avg_parents=dag_parents,
        tx_per_block=tx_per_block,
        k_internal=k_internal,
        k_external=k_external,
    )
    graph = GraphBuilderRegistry.create(shape).build(size, params, rng=make_rng(seed))
    summary = graph_summary(graph)
    summary["disconnected"] = len(check_connectivity(graph))

    typer.echo(f"Generated {shape.value} graph:")
    for key, value in summary.items():
        typer.echo(f"  {key}: {value}")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        payload = {"summary": summary, "params": graph.graph, "edges": export_edges(graph)}
        output.write_text(json.dumps(payload))
        typer.echo(f"Edges: {output}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
