"""Immutable domain models for the shortest-path router.

All models are frozen dataclasses with slots. They carry plain names
and numbers only, so reporters and callers never hold references into
a Graph.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Operation(str, Enum):
    """What the router is asked to run."""

    ROUTES = "routes"
    ALL = "all"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class RouteStop:
    """One vertex of a route with its distance from the route's source."""

    name: str
    distance: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route computation between two vertices.

    Attributes:
        source: Name of the vertex the search started from
        destination: Name of the vertex the route ends at
        stops: Ordered stops, source first
        total_distance: Distance of the destination from the source
    """

    source: str
    destination: str
    stops: tuple[RouteStop, ...] = field(default_factory=tuple)
    total_distance: float = math.inf

    @property
    def path(self) -> tuple[str, ...]:
        """Return the vertex names of the route, source first."""
        return tuple(stop.name for stop in self.stops)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.stops) == 0

    @property
    def is_reachable(self) -> bool:
        """Check if the destination has a finite distance."""
        return not self.is_empty and not math.isinf(self.total_distance)

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.stops)


@dataclass(frozen=True, slots=True)
class RoutePlan:
    """A sequence of routes run one after the other.

    Attributes:
        legs: Route of every requested (source, destination) pair, in order
    """

    legs: tuple[RouteResult, ...] = field(default_factory=tuple)

    @property
    def total_distance(self) -> float:
        """Sum of the distances of every leg."""
        return sum(leg.total_distance for leg in self.legs)


@dataclass(frozen=True, slots=True)
class RejectedRow:
    """A row refused by the graph builder in lenient mode.

    Attributes:
        row_number: 1-based position of the row, if known
        values: The raw (source, destination, weight) values
        reason: Why the row was refused
    """

    row_number: Optional[int]
    values: tuple[object, ...]
    reason: str


@dataclass(frozen=True, slots=True)
class AdjacencyCheck:
    """Answer to "are these two vertices adjacent?"."""

    first: str
    second: str
    adjacent: bool


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Shape of a loaded graph as seen from one vertex.

    Attributes:
        vertex_count: Number of vertices
        edge_count: Number of distinct undirected connections
        source: Vertex the degree was computed for
        source_degree: Number of edge records incident on the source
        adjacency: Answers to the configured adjacency questions
    """

    vertex_count: int
    edge_count: int
    source: str
    source_degree: int
    adjacency: tuple[AdjacencyCheck, ...] = field(default_factory=tuple)
