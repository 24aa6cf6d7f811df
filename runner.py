"""
Command-line entry point: search the sample graph and print the path.

    $ pathfind --source 1 --target 3
    1 ; 2 ; 4 ; 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from algorithms import PathEngine, PathResult
from dijkstra_engine import EngineConfig, SimpleDijkstraEngine, TieBreak
from errors import PathfindingError
from graph import Graph, NodeId
from log import configure_logging
from topology_builder import build_sample_graph

logger = logging.getLogger(__name__)

DELIMITER = " ; "


def format_path(result: PathResult, delimiter: str = DELIMITER) -> str:
    if not result.found:
        return f"no path from {result.source!r} to {result.target!r}"
    return delimiter.join(str(node) for node in result.path)


def run(engine: PathEngine, graph: Graph, source: NodeId, target: NodeId) -> PathResult:
    result = engine.find_path(graph, source, target)
    logger.info(
        "%r -> %r: %s (stats %s)",
        source, target,
        f"distance {result.distance}" if result.found else "unreachable",
        result.stats,
    )
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shortest path on the built-in six-node sample graph."
    )
    parser.add_argument("--source", type=int, default=1, help="source node (default: 1)")
    parser.add_argument("--target", type=int, default=3, help="target node (default: 3)")
    parser.add_argument(
        "--tie-break",
        choices=[t.name.lower() for t in TieBreak],
        default="fifo",
        help="order among equal-distance frontier entries",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log at INFO")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, debug=args.debug)

    engine = SimpleDijkstraEngine(EngineConfig(tie_break=TieBreak[args.tie_break.upper()]))
    try:
        result = run(engine, build_sample_graph(), args.source, args.target)
    except PathfindingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(format_path(result))
    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
