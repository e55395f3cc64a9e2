"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations: reading
rows from a tabular source, turning them into a Graph and computing
shortest routes over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol, Sequence

from ..graph.load_graph import Row

if TYPE_CHECKING:
    from ..domain.models import RejectedRow, RouteResult
    from ..graph.model import Graph


class RowSourcePort(Protocol):
    """Port for the tabular input.

    Implementations: adapters/graph/csv_repository.py (CSVRowSource),
    adapters/graph/memory_source.py (InMemoryRowSource)

    A row source yields triples in arbitrary order and knows nothing
    about graphs.
    """

    def rows(self) -> Iterable[Row]:
        """Yield every (source, destination, weight) triple."""
        ...


class GraphRepositoryPort(Protocol):
    """Port for graph loading.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for building and caching the graph
    from its row source.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The graph built from every row of the source.
        """
        ...

    def rejected_rows(self) -> Sequence[RejectedRow]:
        """Rows refused while building the last loaded graph."""
        ...

    def clear_cache(self) -> None:
        """Forget the cached graph so the next load re-reads the source."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver turns shortest-path trees into RouteResult models.
    """

    def solve(
        self,
        graph: Graph,
        source: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest route between two vertices.

        Args:
            graph: The graph to search.
            source: Source vertex name.
            destination: Destination vertex name.

        Returns:
            RouteResult with stops and total distance.
        """
        ...

    def solve_all(self, graph: Graph, source: str) -> Sequence[RouteResult]:
        """Find the shortest route from ``source`` to every vertex.

        Args:
            graph: The graph to search.
            source: Source vertex name.

        Returns:
            One RouteResult per vertex, in settle order.
        """
        ...
