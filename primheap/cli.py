"""Command-line interface for primheap."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from time import perf_counter
from typing import List, Optional, Tuple

from primheap.algorithms.prim import format_visit_order, prim_mst
from primheap.graph.samples import reference_graph
from primheap.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.000123 -> "0.1 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _run_example(
    branching_factor: Optional[int],
    start: int,
    drop_edge: Optional[Tuple[int, int, int]],
    use_adjacency_index: bool,
    as_json: bool,
) -> None:
    """Run Prim's MST over the reference graph and print the visit order.

    Args:
        branching_factor: Heap fan-out.
        start: Root node of the spanning tree.
        drop_edge: Optional ``(source, destination, weight)`` to leave out.
        use_adjacency_index: Use the per-source frontier index.
        as_json: Print a JSON document instead of the one-line summary.
    """
    _start_time = perf_counter()
    try:
        arena, edges = reference_graph(start=None, drop=drop_edge)
        logger.info(
            f"Running Prim's MST on the reference graph ({len(arena)} nodes, "
            f"{len(edges)} edges) from node {start}"
        )
        result = prim_mst(
            edges,
            arena,
            start=start,
            branching_factor=branching_factor,
            use_adjacency_index=use_adjacency_index,
        )
    except Exception as e:
        logger.error(f"Failed to compute MST: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to compute MST: {type(e).__name__}: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_visit_order(result.visit_order))

    if result.unreached:
        logger.warning(f"Nodes not reached from {start}: {sorted(result.unreached)}")

    _elapsed = perf_counter() - _start_time
    logger.info(f"MST run completed in {_format_duration(_elapsed)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``primheap`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="primheap",
        description="Compute Prim's minimum spanning tree on the reference graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run Prim's MST")
    run_parser.add_argument(
        "--branching-factor",
        "-k",
        type=int,
        default=None,
        help="Children per heap node (default: 2)",
    )
    run_parser.add_argument(
        "--start", "-s", type=int, default=0, help="Root node (default: 0)"
    )
    run_parser.add_argument(
        "--drop-edge",
        nargs=3,
        type=int,
        metavar=("SRC", "DST", "WEIGHT"),
        default=None,
        help="Leave one edge out of the reference graph",
    )
    run_parser.add_argument(
        "--adjacency-index",
        action="store_true",
        help="Discover frontier edges through a per-node index",
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_example(
            branching_factor=args.branching_factor,
            start=args.start,
            drop_edge=tuple(args.drop_edge) if args.drop_edge else None,
            use_adjacency_index=args.adjacency_index,
            as_json=args.json,
        )


if __name__ == "__main__":
    main()
