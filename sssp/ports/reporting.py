"""Reporting port - Abstraction for presenting computed routes.

This protocol defines the contract for route output, allowing the
route planner to stay unaware of how routes are formatted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import GraphSummary, RouteResult


class RouteReporterPort(Protocol):
    """Port for route reporting.

    Implementation: adapters/reporting/console_reporter.py
    """

    def report_route(self, route: RouteResult, title: Optional[str] = None) -> None:
        """Present one route with the distance of every stop.

        Args:
            route: The route to present.
            title: Optional heading shown above the route.
        """
        ...

    def report_total(self, total: float, routes: int) -> None:
        """Present the sum of the distances of several routes.

        Args:
            total: Sum of the route distances.
            routes: Number of routes summed.
        """
        ...

    def report_summary(self, summary: GraphSummary) -> None:
        """Present the shape of a graph.

        Args:
            summary: Counts and adjacency answers to present.
        """
        ...
