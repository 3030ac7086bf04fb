"""Command-line interface.

    shortpath path A F --graph graph.txt
    shortpath path A F --graph matrix.txt --format matrix --nodes A,B,C,D,E,F
    shortpath convert --graph graph.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .adapters.graph import TextGraphRepository
from .config import AppConfig, EngineConfig, GraphConfig, get_config
from .container import Container
from .domain.errors import GraphError
from .domain.models import GraphFormat
from .graph.load_graph import format_adjacency_list, format_adjacency_matrix
from .monitoring import configure_logging
from .services import ShortestPathService, describe_graph_error

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_config(args: argparse.Namespace) -> AppConfig:
    """Overlay command-line options on the environment configuration."""
    base = get_config()

    graph_overrides = {}
    if args.graph:
        graph_path = Path(args.graph)
        graph_overrides["data_dir"] = graph_path.parent
        graph_overrides["graph_file"] = graph_path.name
    if args.format:
        graph_overrides["input_format"] = args.format
    if args.nodes is not None:
        graph_overrides["node_names"] = args.nodes
    graph = GraphConfig(**{**base.graph.model_dump(), **graph_overrides})

    engine = base.engine
    if getattr(args, "frontier", None):
        engine = EngineConfig(frontier=args.frontier)

    return AppConfig(engine=engine, graph=graph, observability=base.observability)


def cmd_path(args: argparse.Namespace, config: AppConfig) -> int:
    container = Container.create_default(config)
    service: ShortestPathService = container.resolve(ShortestPathService)

    result, error = service.find_path_safe(args.start, args.end)
    if result is None:
        print(error, file=sys.stderr)
        return 1

    print(service.format_result(result))
    return 0


def cmd_convert(args: argparse.Namespace, config: AppConfig) -> int:
    repository = TextGraphRepository(config.graph)
    try:
        graph = repository.load()
    except GraphError as e:
        print(describe_graph_error(e), file=sys.stderr)
        return 1

    if repository.graph_format is GraphFormat.MATRIX:
        print(format_adjacency_list(graph))
        return 0

    try:
        matrix, names = format_adjacency_matrix(graph)
    except GraphError as e:
        print(f"Cannot convert to adjacency matrix: {e}", file=sys.stderr)
        return 1
    print(",".join(names))
    print(matrix)
    return 0


def _add_graph_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--graph", help="Graph file (default: from configuration)")
    parser.add_argument(
        "--format",
        choices=[f.value for f in GraphFormat],
        help="Notation of the graph file",
    )
    parser.add_argument(
        "--nodes",
        help="Comma-separated node names for a matrix file without a header line",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="shortpath")
    sub = p.add_subparsers(dest="cmd", required=True)

    pp = sub.add_parser("path", help="Find the shortest path between two nodes")
    pp.add_argument("start", help="Start node")
    pp.add_argument("end", help="End node")
    pp.add_argument("--frontier", choices=["heap", "sorted"], help="Priority frontier")
    _add_graph_options(pp)

    pc = sub.add_parser("convert", help="Print a graph file in the other notation")
    _add_graph_options(pc)

    args = p.parse_args(argv)
    config = build_config(args)
    try:
        configure_logging(config.observability, level=args.log_level)
    except ValueError as e:
        # SHORTPATH_LOG_LEVEL bypasses the argparse choices.
        print(e, file=sys.stderr)
        return 1

    if args.cmd == "path":
        return cmd_path(args, config)
    return cmd_convert(args, config)


if __name__ == "__main__":
    sys.exit(main())
