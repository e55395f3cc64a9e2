"""Command line entry point.

Runs one operation over the configured edge file:

    sssp --operation routes --route "Seattle:Dallas" --route "Dallas:Miami"
    sssp --operation all --source Chicago
    sssp --operation info --data data/routes.csv

Flags override the values coming from SSSP_* environment variables.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from .config import AppConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, SSSPError
from .domain.models import Operation
from .services import RoutePlannerService

logger = logging.getLogger(__name__)


def configure_logging(config: ObservabilityConfig) -> None:
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level!r}",
            setting_name="log_level",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)


def load_config() -> AppConfig:
    """Return the environment configuration, wrapping invalid values."""
    try:
        return get_config()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid SSSP_* environment setting",
            setting_name=", ".join(
                ".".join(str(part) for part in error["loc"]) for error in e.errors()
            ),
            cause=e,
        )


def parse_route(value: str) -> Tuple[str, str]:
    """Split a ``FROM:TO`` argument into its two vertex names."""
    source, sep, destination = value.partition(":")
    if not sep or not source or not destination:
        raise ConfigurationError(
            f"Route must look like FROM:TO, got {value!r}",
            setting_name="route",
            expected_type="FROM:TO",
        )
    return source, destination


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sssp",
        description="Shortest routes over an undirected weighted graph read from CSV.",
    )
    parser.add_argument(
        "--data",
        type=Path,
        help="CSV file of source,destination,weight rows.",
    )
    parser.add_argument(
        "--operation",
        choices=[op.value for op in Operation],
        help="routes: run the route legs; all: every vertex from --source; "
        "info: graph summary.",
    )
    parser.add_argument("--source", help="Source vertex for 'all' and 'info'.")
    parser.add_argument(
        "--route",
        action="append",
        metavar="FROM:TO",
        help="Route leg, may be repeated. Replaces the configured legs.",
    )
    parser.add_argument(
        "--adjacent",
        action="append",
        metavar="FROM:TO",
        help="Adjacency question for 'info', may be repeated.",
    )
    parser.add_argument(
        "--skip-invalid-rows",
        action="store_true",
        help="Drop malformed rows instead of failing.",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...).")
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with the command line flags applied."""
    graph_update: dict = {}
    if args.data is not None:
        graph_update["data_dir"] = args.data.parent
        graph_update["edges_file"] = args.data.name
    if args.skip_invalid_rows:
        graph_update["skip_invalid_rows"] = True

    query_update: dict = {}
    if args.operation is not None:
        query_update["operation"] = Operation(args.operation)
    if args.source is not None:
        query_update["source_node"] = args.source
    if args.route:
        routes: List[Tuple[str, str]] = [parse_route(r) for r in args.route]
        query_update["routes"] = routes
    if args.adjacent:
        query_update["adjacency_checks"] = [parse_route(a) for a in args.adjacent]

    observability_update: dict = {}
    if args.log_level is not None:
        observability_update["level"] = args.log_level

    return config.model_copy(
        update={
            "graph": config.graph.model_copy(update=graph_update),
            "query": config.query.model_copy(update=query_update),
            "observability": config.observability.model_copy(
                update=observability_update
            ),
        }
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(load_config(), args)
        configure_logging(config.observability)

        container = Container.create_default(config)
        planner: RoutePlannerService = container.resolve(RoutePlannerService)
        planner.run(config.query)
    except SSSPError as e:
        logger.error("Run failed", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
