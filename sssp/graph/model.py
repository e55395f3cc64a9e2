"""In-memory graph representation.

Vertices live in an arena owned by the Graph and are identified by
their position in it. Edges refer to vertices by index, never by
reference, so a Graph holds no cycles and no per-query scratch state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence

from ..domain.errors import VertexNotFoundError

INFINITY = float("inf")


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed edge record between two vertex indices."""

    source: int
    target: int
    weight: int


@dataclass(frozen=True, slots=True)
class Vertex:
    """A named vertex and the edge records leaving it.

    Attributes:
        index: Position in the graph's arena, assigned once at build time
        name: Display name, unique within a graph (case-sensitive)
        edges: Incident edge records in insertion order
    """

    index: int
    name: str
    edges: List[Edge] = field(default_factory=list, compare=False, repr=False)

    def has_edge_to(self, target: int) -> bool:
        return any(edge.target == target for edge in self.edges)


class Graph:
    """Undirected weighted graph stored as per-vertex adjacency lists.

    Each undirected connection is held as two directed edge records, one
    in each endpoint's list.
    """

    def __init__(self, vertices: Sequence[Vertex], edge_count: int) -> None:
        self._vertices: List[Vertex] = list(vertices)
        self._index: Dict[str, int] = {v.name: v.index for v in self._vertices}
        self._vertex_count = len(self._vertices)
        self._edge_count = edge_count

    def __len__(self) -> int:
        return self._vertex_count

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Graph(vertices={self._vertex_count}, edges={self._edge_count})"

    def vertex_count(self) -> int:
        return self._vertex_count

    def edge_count(self) -> int:
        """Number of distinct undirected connections."""
        return self._edge_count

    def all_vertices(self) -> List[Vertex]:
        """Return every vertex in first-seen order."""
        return list(self._vertices)

    def vertex_at(self, index: int) -> Vertex:
        return self._vertices[index]

    def get_vertex(self, name: str) -> Vertex:
        """Look a vertex up by name.

        Raises:
            VertexNotFoundError: If no vertex has this name.
        """
        index = self._index.get(name)
        if index is None:
            raise VertexNotFoundError(
                f"Vertex not in graph: {name}",
                vertex_name=name,
            )
        return self._vertices[index]

    def incident_edges(self, name: str) -> List[Edge]:
        return list(self.get_vertex(name).edges)

    def neighbors(self, name: str) -> List[Vertex]:
        """Return the targets of the vertex's edges, in edge order."""
        return [self._vertices[e.target] for e in self.get_vertex(name).edges]

    def degree(self, name: str) -> int:
        """Number of edge records incident on the vertex."""
        return len(self.get_vertex(name).edges)

    def are_adjacent(self, first: str, second: str) -> bool:
        """True if an edge record of ``first`` targets ``second``."""
        source = self.get_vertex(first)
        target = self.get_vertex(second).index
        return source.has_edge_to(target)
