"""Command-line interface for journeygraph."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from journeygraph.config import PLANNER_CONFIG
from journeygraph.lib.graph import TravelGraph
from journeygraph.loader import load_network_file, load_sample_network
from journeygraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from journeygraph.planner import JourneyPlanner

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[col_idx])) for row in all_data), min_width)
        for col_idx in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _budget(value: str) -> float:
    """Parse a finite numeric budget for argparse."""
    try:
        budget = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid budget: {value!r}") from None
    if not math.isfinite(budget):
        raise argparse.ArgumentTypeError(f"budget must be a finite number: {value!r}")
    return budget


def _load_graph(network: Optional[Path]) -> TravelGraph:
    """Load the network file, or the packaged sample when none is given.

    Exits with status 1 when the file is missing or malformed.
    """
    try:
        if network is None:
            return load_sample_network()
        return load_network_file(network)
    except FileNotFoundError:
        logger.error("Network file not found: %s", network)
        raise SystemExit(1) from None
    except (OSError, ValueError) as exc:
        logger.error("Failed to load network: %s", exc)
        raise SystemExit(1) from None


def _emit(payload: Dict[str, Any], results: Optional[Path]) -> None:
    if results is None:
        return
    results.parent.mkdir(parents=True, exist_ok=True)
    results.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info("Results written to %s", results)


def _route(
    network: Optional[Path],
    source: str,
    destination: str,
    as_json: bool,
    results: Optional[Path],
) -> None:
    planner = JourneyPlanner(_load_graph(network))
    path = planner.route(source, destination)

    payload: Dict[str, Any] = {
        "source": source,
        "destination": destination,
        "found": path is not None,
        "cost": None if path is None else path.cost,
        "path": [] if path is None else list(path.nodes),
    }
    _emit(payload, results)

    if as_json:
        print(json.dumps(payload, indent=2))
    elif path is None:
        print(f"No path exists from {source} to {destination}")
    else:
        print(
            f"Shortest path from {source} to {destination} costs: "
            f"{PLANNER_CONFIG.format_cost(path.cost)}"
        )
        print(f"Path: {PLANNER_CONFIG.format_path(path.nodes)}")


def _reach(
    network: Optional[Path],
    source: str,
    budget: float,
    as_json: bool,
    results: Optional[Path],
) -> None:
    planner = JourneyPlanner(_load_graph(network))
    paths = planner.within_budget(source, budget)

    payload: Dict[str, Any] = {
        "source": source,
        "budget": budget,
        "destinations": [path.to_dict() for path in paths],
    }
    _emit(payload, results)

    if as_json:
        print(json.dumps(payload, indent=2))
        return

    print(
        f"Destinations within budget of {PLANNER_CONFIG.format_cost(budget)} "
        f"from {source}:"
    )
    if not paths:
        print("   (none)")
        return
    rows = [
        [
            str(path.dst_node),
            PLANNER_CONFIG.format_cost(path.cost),
            PLANNER_CONFIG.format_path(path.nodes),
        ]
        for path in paths
    ]
    print(_format_table(["Destination", "Cost", "Path"], rows))


def _nodes(network: Optional[Path]) -> None:
    graph = _load_graph(network)
    rows = [
        [str(node), str(graph.degree(node))] for node in sorted(graph, key=str)
    ]
    print(f"Network: {len(graph)} nodes, {len(graph.edges())} links")
    print(_format_table(["Node", "Links"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``journeygraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="journeygraph",
        description="Find cheapest routes and affordable destinations in a travel network.",
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
        metavar="{route,reach,nodes}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser(
        "route", help="Find the cheapest route between two nodes"
    )
    route_parser.add_argument("source", help="Start node")
    route_parser.add_argument("destination", help="End node")

    reach_parser = subparsers.add_parser(
        "reach", help="List every destination reachable within a budget"
    )
    reach_parser.add_argument("source", help="Start node")
    reach_parser.add_argument("budget", type=_budget, help="Inclusive cost ceiling")

    nodes_parser = subparsers.add_parser("nodes", help="List the network's nodes")

    for p in (route_parser, reach_parser):
        p.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )
        p.add_argument(
            "--results",
            "-r",
            type=Path,
            default=None,
            help="Also write the JSON result to this file",
        )
    for p in (route_parser, reach_parser, nodes_parser):
        p.add_argument(
            "--network",
            "-n",
            type=Path,
            default=None,
            help="Network YAML file (default: packaged sample network)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "route":
        _route(args.network, args.source, args.destination, args.json, args.results)
    elif args.command == "reach":
        _reach(args.network, args.source, args.budget, args.json, args.results)
    elif args.command == "nodes":
        _nodes(args.network)


if __name__ == "__main__":
    main()
