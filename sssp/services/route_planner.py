"""Route planner service - Main orchestrator.

This service wires the graph repository, the route solver and the
reporter together to run the three supported operations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple, Union

from ..config import QueryConfig
from ..domain.models import (
    AdjacencyCheck,
    GraphSummary,
    Operation,
    RoutePlan,
    RouteResult,
)
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.reporting import RouteReporterPort

RunResult = Union[RoutePlan, Tuple[RouteResult, ...], GraphSummary]


@dataclass
class RoutePlannerService:
    """Main service for computing and reporting routes.

    Operations:
    1. plan_routes: a sequence of (source, destination) legs and their
       grand total
    2. fan_out: the shortest route from one source to every vertex
    3. describe: counts, degree and adjacency answers for a graph

    Attributes:
        graph_repository: Loads the graph
        route_solver: Computes shortest paths
        reporter: Optional output for run()
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    reporter: Optional[RouteReporterPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan_routes(self, pairs: Iterable[Tuple[str, str]]) -> RoutePlan:
        """Compute every leg in order.

        Args:
            pairs: (source, destination) names, one per leg.

        Returns:
            RoutePlan whose total is the sum of the leg distances.

        Raises:
            VertexNotFoundError: If a leg names a vertex not in the graph.
            NoRouteFoundError: If a leg's destination cannot be reached.
        """
        graph = self.graph_repository.load()
        legs = []
        for source, destination in pairs:
            legs.append(self.route_solver.solve(graph, source, destination))

        plan = RoutePlan(legs=tuple(legs))
        self._logger.info(
            "Routes planned",
            extra={"legs": len(plan.legs), "total_distance": plan.total_distance},
        )
        return plan

    def fan_out(self, source: str) -> Tuple[RouteResult, ...]:
        """Compute the shortest route from ``source`` to every vertex.

        Raises:
            VertexNotFoundError: If source is not in the graph.
        """
        graph = self.graph_repository.load()
        return tuple(self.route_solver.solve_all(graph, source))

    def describe(
        self, source: str, adjacency_checks: Sequence[Tuple[str, str]] = ()
    ) -> GraphSummary:
        """Summarise the loaded graph.

        Raises:
            VertexNotFoundError: If source or a checked vertex is not in
                the graph.
        """
        graph = self.graph_repository.load()
        return GraphSummary(
            vertex_count=graph.vertex_count(),
            edge_count=graph.edge_count(),
            source=source,
            source_degree=graph.degree(source),
            adjacency=tuple(
                AdjacencyCheck(first, second, graph.are_adjacent(first, second))
                for first, second in adjacency_checks
            ),
        )

    def run(self, query: QueryConfig) -> RunResult:
        """Run the configured operation and send its results to the reporter.

        Args:
            query: Operation, source vertex, route legs and adjacency checks.

        Returns:
            The RoutePlan, fan-out routes or GraphSummary that was reported.
        """
        self._logger.info(
            "Running operation",
            extra={"operation": query.operation.value, "source": query.source_node},
        )

        if query.operation == Operation.ROUTES:
            plan = self.plan_routes(query.routes)
            if self.reporter:
                for number, leg in enumerate(plan.legs, start=1):
                    self.reporter.report_route(leg, title=f"Route {number}")
                self.reporter.report_total(plan.total_distance, len(plan.legs))
            return plan

        if query.operation == Operation.ALL:
            routes = self.fan_out(query.source_node)
            if self.reporter:
                for route in routes:
                    self.reporter.report_route(
                        route,
                        title=f"Shortest distance to {route.destination} "
                        f"from {route.source}",
                    )
            return routes

        summary = self.describe(query.source_node, query.adjacency_checks)
        if self.reporter:
            self.reporter.report_summary(summary)
        return summary
