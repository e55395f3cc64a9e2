"""Dijkstra Route Solver adapter.

This adapter wraps the search in graph/dijkstra.py and adds:
- Domain model output (RouteResult)
- Unreachable destinations reported as NoRouteFoundError
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from ...domain.errors import NoRouteFoundError, VertexNotFoundError
from ...domain.models import RouteResult, RouteStop
from ...graph.dijkstra import ShortestPathTree, dijkstra
from ...graph.model import Graph


def _to_route(tree: ShortestPathTree, destination: str) -> RouteResult:
    stops = tuple(
        RouteStop(name=v.name, distance=tree.distances[v.index])
        for v in tree.path_to(destination)
    )
    return RouteResult(
        source=tree.graph.vertex_at(tree.source).name,
        destination=destination,
        stops=stops,
        total_distance=tree.distance_to(destination),
    )


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, source: str, destination: str) -> RouteResult:
        """Find the shortest route between two vertices.

        Args:
            graph: The graph to search.
            source: Source vertex name.
            destination: Destination vertex name.

        Returns:
            RouteResult with every stop and its distance from the source.

        Raises:
            VertexNotFoundError: If source or destination is not in the graph.
            NoRouteFoundError: If the destination cannot be reached.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        tree = dijkstra(graph, source, destination)

        if not tree.found:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )

        route = _to_route(tree, destination)
        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "stops": route.num_stops,
                "distance": route.total_distance,
            },
        )
        return route

    def solve_safe(self, graph: Graph, source: str, destination: str) -> RouteResult:
        """Find the shortest route, returning an empty result on failure.

        Like solve(), but returns an empty RouteResult instead of raising
        for unknown or unreachable vertices.
        """
        try:
            return self.solve(graph, source, destination)
        except (VertexNotFoundError, NoRouteFoundError):
            return RouteResult(source=source, destination=destination)

    def solve_all(self, graph: Graph, source: str) -> Tuple[RouteResult, ...]:
        """Find the shortest route from ``source`` to every vertex.

        Unreachable vertices are included as one-stop routes with an
        infinite distance.

        Raises:
            VertexNotFoundError: If source is not in the graph.
        """
        tree = dijkstra(graph, source)
        routes = tuple(_to_route(tree, v.name) for v in tree.cloud())
        self._logger.info(
            "Routes to all vertices computed",
            extra={
                "source": source,
                "routes": len(routes),
                "unreachable": sum(1 for r in routes if not r.is_reachable),
            },
        )
        return routes
