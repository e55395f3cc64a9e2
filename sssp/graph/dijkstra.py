"""Shortest-path computation using Dijkstra's algorithm.

The fringe is a plain list re-sorted before every step. ``list.sort``
is stable, so vertices at equal distance are taken in the order they
already had, starting from the graph's first-seen order. That order
decides which predecessor wins a tie.

Relaxation follows two rules for the edge ``(u, v, w)`` of the
vertex ``u`` being settled:

* ``v`` never reached yet: ``v`` gets ``distance(u) + w`` with ``u``
  as predecessor.
* ``v`` already settled: ``u`` pulls its own distance down to
  ``distance(v) + w`` when that is not worse, taking ``v`` as
  predecessor.

A vertex reached earlier but still in the fringe is not updated when
a later vertex finds a shorter way to it; its distance can only drop
when it is itself settled. On some graphs this reports a distance
above the true minimum. The behaviour is kept on purpose and pinned
by the tests.

All distances and predecessors live in the ShortestPathTree returned
by each call, so a Graph can serve any number of queries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..domain.errors import InvariantViolationError
from .model import INFINITY, Graph, Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortestPathTree:
    """Outcome of one search from a single source.

    Attributes:
        graph: The searched graph
        source: Index of the source vertex
        distances: Settled distance per vertex index (INFINITY if unreachable)
        previous: Predecessor index per vertex index (None for the source
            and unreachable vertices)
        settled: Vertex indices in the order they left the fringe
        target: Index of the destination in single-destination mode
        found: Whether the destination was settled with a finite distance
    """

    graph: Graph
    source: int
    distances: Tuple[float, ...]
    previous: Tuple[Optional[int], ...]
    settled: Tuple[int, ...]
    target: Optional[int] = None
    found: bool = False

    def distance_to(self, name: str) -> float:
        return self.distances[self.graph.get_vertex(name).index]

    def predecessor_of(self, name: str) -> Optional[Vertex]:
        index = self.previous[self.graph.get_vertex(name).index]
        return None if index is None else self.graph.vertex_at(index)

    def is_reachable(self, name: str) -> bool:
        return self.distance_to(name) != INFINITY

    def backtrack(self, name: str) -> List[Vertex]:
        """Predecessor chain from ``name`` back to the source."""
        return backtrack(self, self.graph.get_vertex(name))

    def path_to(self, name: str) -> List[Vertex]:
        """Predecessor chain from the source to ``name``."""
        path = self.backtrack(name)
        path.reverse()
        return path

    def cloud(self) -> List[Vertex]:
        """Settled vertices in settle order."""
        return [self.graph.vertex_at(i) for i in self.settled]


def _relax(
    u: int,
    v: int,
    weight: int,
    distances: List[float],
    previous: List[Optional[int]],
    in_cloud: Sequence[bool],
) -> None:
    if v == u:
        return
    if distances[v] == INFINITY:
        distances[v] = distances[u] + weight
        previous[v] = u
    elif in_cloud[v]:
        through = distances[v] + weight
        if through <= distances[u]:
            distances[u] = through
            previous[u] = v


def _check_tree(
    graph: Graph,
    source: int,
    distances: Sequence[float],
    previous: Sequence[Optional[int]],
    settled: Sequence[int],
) -> None:
    limit = graph.vertex_count()
    for index in settled:
        if index == source or distances[index] == INFINITY:
            continue
        current: Optional[int] = index
        steps = 0
        while current is not None and current != source:
            current = previous[current]
            steps += 1
            if steps > limit:
                break
        if current != source:
            name = graph.vertex_at(index).name
            raise InvariantViolationError(
                f"Predecessor chain of {name} does not reach the source",
                vertex_name=name,
            )


def dijkstra(
    graph: Graph, source: str, destination: Optional[str] = None
) -> ShortestPathTree:
    """Run the search from ``source``.

    Parameters
    ----------
    graph:
        Graph as produced by ``build_graph``.
    source:
        Name of the start vertex.
    destination:
        Optional name of a destination. When given, the search stops as
        soon as the destination is settled with a finite distance.

    Returns
    -------
    ShortestPathTree
        Distances and predecessors for every vertex the search settled.

    Raises
    ------
    VertexNotFoundError
        If ``source`` or ``destination`` is not in the graph.
    InvariantViolationError
        If the predecessor links do not form a tree rooted at ``source``.
    """
    start = graph.get_vertex(source).index
    target = graph.get_vertex(destination).index if destination is not None else None

    count = graph.vertex_count()
    distances: List[float] = [INFINITY] * count
    previous: List[Optional[int]] = [None] * count
    in_cloud = [False] * count
    distances[start] = 0

    fringe = list(range(count))
    cloud: List[int] = []
    found = False

    while fringe:
        fringe.sort(key=distances.__getitem__)
        u = fringe.pop(0)

        if distances[u] != INFINITY:
            for edge in graph.vertex_at(u).edges:
                _relax(u, edge.target, edge.weight, distances, previous, in_cloud)

        in_cloud[u] = True
        cloud.append(u)

        if u == target and distances[u] != INFINITY:
            found = True
            break

    _check_tree(graph, start, distances, previous, cloud)

    logger.debug(
        "Search finished",
        extra={
            "source": source,
            "destination": destination,
            "settled": len(cloud),
            "found": found,
        },
    )

    return ShortestPathTree(
        graph=graph,
        source=start,
        distances=tuple(distances),
        previous=tuple(previous),
        settled=tuple(cloud),
        target=target,
        found=found,
    )


def backtrack(tree: ShortestPathTree, vertex: Vertex) -> List[Vertex]:
    """Follow predecessor links from ``vertex`` until none is left.

    The list starts at ``vertex`` and ends at the source. A vertex the
    search never reached yields a single-element list.
    """
    path: List[Vertex] = []
    current: Optional[int] = vertex.index
    while current is not None:
        path.append(tree.graph.vertex_at(current))
        current = tree.previous[current]
    return path


def shortest_path(graph: Graph, source: str, destination: str) -> List[Vertex]:
    """Compute the shortest path between two vertices.

    Returns
    -------
    list[Vertex]
        The path from ``source`` to ``destination`` (inclusive). If the
        destination cannot be reached, the search runs until the fringe
        is empty and every settled vertex is returned in settle order.
    """
    tree = dijkstra(graph, source, destination)
    if not tree.found:
        return tree.cloud()
    return tree.path_to(destination)


def shortest_path_to_all(graph: Graph, source: str) -> ShortestPathTree:
    """Settle every vertex of the graph from ``source``."""
    return dijkstra(graph, source)
