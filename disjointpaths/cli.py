"""Command-line interface for disjointpaths."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from disjointpaths.analysis.pairs import best_pair
from disjointpaths.analysis.paths import analyze_pair
from disjointpaths.io import load_graph
from disjointpaths.logging import env_log_level, get_logger, set_global_log_level
from disjointpaths.model.graph import Graph

logger = get_logger(__name__)


def _load(path: Path) -> Graph:
    logger.info(f"Loading graph from: {path}")
    try:
        graph = load_graph(path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to load graph: {type(e).__name__}: {e}")
        sys.exit(1)
    logger.info(
        f"Graph loaded: {len(graph.vertices)} vertices, {len(graph.edges)} edges, "
        f"{'directed' if graph.directed else 'undirected'}"
    )
    return graph


def _emit(payload: Dict[str, Any], as_json: bool, lines: List[str]) -> None:
    if as_json:
        print(json.dumps(payload, indent=2))
    else:
        for line in lines:
            print(line)


def _run_max(path: Path, as_json: bool) -> None:
    """Report the maximum vertex-disjoint path count over all pairs."""
    graph = _load(path)

    start = perf_counter()
    result = best_pair(graph)
    elapsed = perf_counter() - start
    logger.info(f"Pair enumeration completed in {elapsed:.3f}s")

    if result is None:
        payload: Dict[str, Any] = {"max_disjoint_paths": 0, "pair": None}
        lines = ["Max vertex-disjoint paths: 0 (fewer than two vertices)"]
    else:
        payload = {
            "max_disjoint_paths": result.paths,
            "pair": [result.source_id, result.sink_id],
        }
        lines = [
            f"Max vertex-disjoint paths: {result.paths}",
            f"Attained by: {result.source_id} -> {result.sink_id}",
        ]
    _emit(payload, as_json, lines)


def _run_pair(
    path: Path,
    source_id: int,
    sink_id: int,
    show_paths: bool,
    show_separator: bool,
    as_json: bool,
) -> None:
    """Report the vertex-disjoint path count for one ordered pair."""
    graph = _load(path)

    for vertex_id in (source_id, sink_id):
        if vertex_id not in graph:
            logger.warning(f"Vertex {vertex_id} is not in the graph; count is 0")
    try:
        summary = analyze_pair(graph, source_id, sink_id)
    except ValueError as e:
        logger.error(f"Invalid pair: {e}")
        sys.exit(1)

    payload: Dict[str, Any] = {
        "source": source_id,
        "sink": sink_id,
        "disjoint_paths": summary.paths,
    }
    lines = [f"Vertex-disjoint paths {source_id} -> {sink_id}: {summary.paths}"]
    if show_paths:
        payload["paths"] = summary.routes
        lines.extend(
            "  " + " -> ".join(str(v) for v in route) for route in summary.routes
        )
    if show_separator:
        payload["separator"] = summary.separator
        payload["direct_edges"] = summary.direct_edges
        lines.append(f"Minimum vertex separator: {summary.separator}")
        if summary.direct_edges:
            lines.append(f"Direct edges (not separable): {summary.direct_edges}")
    _emit(payload, as_json, lines)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``disjointpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="disjointpaths",
        description="Count vertex-disjoint paths in a graph.",
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
        metavar="{max,pair}",
        help="Available commands",
    )

    max_parser = subparsers.add_parser(
        "max", help="Maximum disjoint path count over all vertex pairs"
    )
    max_parser.add_argument("graph", type=Path, help="Path to graph JSON/YAML")

    pair_parser = subparsers.add_parser(
        "pair", help="Disjoint path count between two vertices"
    )
    pair_parser.add_argument("graph", type=Path, help="Path to graph JSON/YAML")
    pair_parser.add_argument("source", type=int, help="Source vertex id")
    pair_parser.add_argument("sink", type=int, help="Sink vertex id")
    pair_parser.add_argument(
        "--paths", "-p", action="store_true", help="List one maximum family of paths"
    )
    pair_parser.add_argument(
        "--separator",
        "-s",
        action="store_true",
        help="Show a minimum vertex separator",
    )

    for p in (max_parser, pair_parser):
        p.add_argument(
            "--json", action="store_true", help="Print results as JSON to stdout"
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
        set_global_log_level(env_log_level(logging.INFO))

    if args.command == "max":
        _run_max(args.graph, args.json)
    elif args.command == "pair":
        _run_pair(
            args.graph,
            args.source,
            args.sink,
            show_paths=args.paths,
            show_separator=args.separator,
            as_json=args.json,
        )


if __name__ == "__main__":
    main()
