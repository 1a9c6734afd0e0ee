#!/usr/bin/env python3
"""Main Entry Point and CLI Integration.

This module provides the command line interface of graphwalk. It loads
configuration, reads a graph file, runs the selected algorithm and prints
the report to stdout.
"""

import argparse
import sys

import structlog
from pydantic import ValidationError

from graphwalk.config import GraphwalkConfig, load_config
from graphwalk.errors import InvalidStartVertexError, MalformedGraphError
from graphwalk.graph.reader import load_graph
from graphwalk.log_config import LOG_LEVELS, bind_context, clear_context, configure_logging
from graphwalk.report import Mode, build_report

logger = structlog.get_logger(__name__)


def apply_cli_overrides(config: GraphwalkConfig, args: argparse.Namespace) -> GraphwalkConfig:
    """Overlay command line options on the loaded configuration.

    Args:
        config: Configuration loaded from file and environment
        args: Parsed command-line arguments

    Returns:
        Validated configuration with CLI values taking precedence
    """
    data = config.model_dump()

    if args.log_level is not None:
        data["logging"]["level"] = args.log_level
    if args.json_logs:
        data["logging"]["json_logs"] = True
    if args.limit is not None:
        data["output"]["listing_limit"] = args.limit
    if args.no_forest:
        data["output"]["show_spanning_forest"] = False
    if args.start is not None:
        data["traversal"]["start_vertex"] = args.start

    return GraphwalkConfig.model_validate(data)


def run(args: argparse.Namespace) -> int:
    """Run graphwalk for parsed arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    exit_code = 0

    # Configure logging (reconfigured once the configuration is loaded)
    configure_logging(args.log_level or "WARNING", args.json_logs)

    try:
        config = apply_cli_overrides(load_config(args.config), args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.exception("configuration_error", error=str(e))
        return 1

    configure_logging(config.logging.level, config.logging.json_logs)
    for warning in config.validate_config():
        logger.warning("configuration_warning", message=warning)

    bind_context(graph_file=args.graph_file, mode=args.mode)

    try:
        graph = load_graph(args.graph_file)
        lines = build_report(
            graph,
            args.mode,
            start=config.traversal.start_vertex,
            listing_limit=config.output.listing_limit,
            show_forest=config.output.show_spanning_forest,
        )
        print("\n".join(lines))

    except FileNotFoundError as e:
        logger.exception("graph_file_not_found", error=str(e))
        exit_code = 1

    except MalformedGraphError as e:
        logger.exception("malformed_graph", error=e.message)
        exit_code = 1

    except InvalidStartVertexError as e:
        logger.exception("invalid_start_vertex", error=e.message)
        exit_code = 1

    finally:
        clear_context()

    return exit_code


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="graphwalk - traversal, topological sort, SCC and bipartiteness on graph files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Graph file format:
  <D|U> <vertex_count> <edge_count> u1 v1 u2 v2 ...

Examples:
  # Depth-first order and spanning forest
  python main.py graph.txt dfs

  # Strongly connected components with debug logging
  python main.py graph.txt connected --debug

  # Breadth-first traversal from vertex 3
  python main.py graph.txt bfs --start 3
        """,
    )

    parser.add_argument("graph_file", help="Path to the graph file")

    parser.add_argument(
        "mode",
        choices=[m.value for m in Mode],
        help="Algorithm to run",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file (default: graphwalk.yaml if present)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=None,
        help="Set logging level (default: from configuration, WARNING)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Render log events as JSON",
    )

    parser.add_argument(
        "--start",
        type=int,
        default=None,
        help="Start vertex for dfs and bfs (default: 1)",
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Print full listings only for graphs with at most this many vertices",
    )

    parser.add_argument(
        "--no-forest",
        action="store_true",
        help="Do not print the spanning forest after dfs/bfs",
    )

    args = parser.parse_args(argv)

    if args.debug:
        args.log_level = "DEBUG"

    return args


def main() -> None:
    """Main entry point for graphwalk."""
    args = parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
