"""Command-line interface for tripgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from tripgraph.logging import configure_cli_logging, get_logger
from tripgraph.report import render_lines
from tripgraph.scenario import Scenario

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load_scenario(path: Path) -> Scenario:
    """Read and parse a scenario file, exiting with status 1 on failure."""
    logger.info(f"Loading scenario from: {path}")
    try:
        return Scenario.from_yaml(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"❌ ERROR: Scenario file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load scenario: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to load scenario: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_scenario(path: Path, as_json: bool) -> None:
    """Run every query of a scenario and print the results.

    Args:
        path: Scenario YAML file.
        as_json: Print a JSON document instead of ``Output #n: value`` lines.
    """
    scenario = _load_scenario(path)
    _start_time = perf_counter()

    try:
        results = scenario.run()
    except Exception as e:
        logger.error(f"Failed to run scenario: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to run scenario: {type(e).__name__}: {e}")
        sys.exit(1)

    if as_json:
        payload = {
            "scenario": scenario.name,
            "results": [r.to_dict() for r in results],
        }
        print(json.dumps(payload, indent=2))
    else:
        for line in render_lines((r.query.kind, r.value) for r in results):
            print(line)

    _elapsed = perf_counter() - _start_time
    logger.info(f"Scenario run completed in {_format_duration(_elapsed)}")


def _inspect_scenario(path: Path) -> None:
    """Print a summary of a scenario's graph and queries."""
    scenario = _load_scenario(path)
    graph = scenario.graph

    print(f"Scenario: {scenario.name or path.stem}")
    print(f"  Nodes: {graph.number_of_nodes()}")
    print(f"  Edges: {graph.number_of_edges()}")
    print(f"  Queries: {len(scenario.queries)}")

    print("Adjacency:")
    for node in graph.nodes():
        edges = graph.successors(node)
        if edges is None:
            print(f"  {node}: (dead end)")
            continue
        targets = ", ".join(f"{edge.node}={edge.distance}" for edge in edges)
        print(f"  {node}: {targets}")

    if scenario.queries:
        print("Queries:")
        for i, query in enumerate(scenario.queries, start=1):
            label = f" [{query.name}]" if query.name else ""
            print(f"  {i}. {query.describe()}{label}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``tripgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="tripgraph",
        description="Answer route, trip-count and shortest-distance queries.",
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
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run the queries of a scenario")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")
    run_parser.add_argument(
        "--json", action="store_true", help="Print results as a JSON document"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the graph and queries of a scenario"
    )
    inspect_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    level = configure_cli_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        machine_output=args.command == "run" and args.json,
    )
    if level == logging.DEBUG:
        logger.debug("Debug logging enabled")

    if args.command == "run":
        _run_scenario(args.scenario, args.json)
    elif args.command == "inspect":
        _inspect_scenario(args.scenario)


if __name__ == "__main__":
    main()
