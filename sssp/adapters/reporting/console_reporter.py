"""Console route reporter adapter.

Writes routes, subtotals and graph summaries as plain text to a
stream (stdout by default).
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from ...domain.models import GraphSummary, RouteResult

RULE = "-" * 60


def format_distance(distance: float) -> str:
    if math.isinf(distance):
        return "unreachable"
    return str(int(distance))


@dataclass
class ConsoleRouteReporter:
    """Plain-text reporter.

    This adapter implements RouteReporterPort.

    Attributes:
        stream: Where to write; resolved to sys.stdout at write time
            when left unset, so pytest's capsys sees the output.
    """

    stream: Optional[TextIO] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _write(self, line: str = "") -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(line + "\n")

    def report_route(self, route: RouteResult, title: Optional[str] = None) -> None:
        if title:
            self._write(RULE)
            self._write(title)
            self._write(RULE)

        if route.is_empty:
            self._write(f"No path found between {route.source} and {route.destination}.")
            return

        self._write(
            " -> ".join(
                f"{stop.name} ({format_distance(stop.distance)})" for stop in route.stops
            )
        )
        self._write(f"Route subtotal: {format_distance(route.total_distance)}")
        self._logger.debug(
            "Route reported",
            extra={"source": route.source, "destination": route.destination},
        )

    def report_total(self, total: float, routes: int) -> None:
        noun = "route" if routes == 1 else "routes"
        self._write()
        self._write(f"Total distance over {routes} {noun}: {format_distance(total)}")

    def report_summary(self, summary: GraphSummary) -> None:
        self._write(RULE)
        self._write("Graph summary")
        self._write(RULE)
        self._write(f"Vertices: {summary.vertex_count}")
        self._write(f"Edges: {summary.edge_count}")
        self._write(f"Degree of {summary.source}: {summary.source_degree}")
        for check in summary.adjacency:
            answer = "yes" if check.adjacent else "no"
            self._write(f"Are {check.first} and {check.second} adjacent? {answer}")
