"""Graph construction from (source, destination, weight) rows.

Each row describes an undirected connection. The builder keeps one
vertex per distinct name and stores the connection as a pair of
directed edge records, skipping any ordered pair that already exists.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..domain.errors import RowParseError
from ..domain.models import RejectedRow
from .model import Edge, Graph, Vertex

RawWeight = Union[str, int]
Row = Tuple[str, str, RawWeight]

logger = logging.getLogger(__name__)


def parse_weight(raw: object, row_number: Optional[int] = None) -> int:
    """Interpret a weight cell as a non-negative integer.

    Accepts ints and strings of ASCII digits (surrounding whitespace
    is ignored). ``"0"`` is a valid weight; anything unparseable raises
    instead of being read as zero.

    Raises:
        RowParseError: If the value is not a non-negative integer.
    """
    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        digits = raw.strip()
        value = int(digits) if digits.isascii() and digits.isdigit() else None
    else:
        value = None

    if value is None or value < 0:
        raise RowParseError(
            f"Weight is not a non-negative integer: {raw!r}",
            row_number=row_number,
            field_name="weight",
            raw_value=raw,
        )
    return value


def _check_name(raw: object, field_name: str, row_number: Optional[int]) -> str:
    if not isinstance(raw, str) or not raw:
        raise RowParseError(
            f"Empty or invalid {field_name} name: {raw!r}",
            row_number=row_number,
            field_name=field_name,
            raw_value=raw,
        )
    return raw


class GraphBuilder:
    """Incrementally builds a Graph from rows.

    By default the first malformed row raises RowParseError. With
    ``skip_invalid_rows=True`` malformed rows are dropped, logged and
    listed in ``rejected_rows`` instead.
    """

    def __init__(self, skip_invalid_rows: bool = False) -> None:
        self.skip_invalid_rows = skip_invalid_rows
        self.rejected_rows: List[RejectedRow] = []
        self._vertices: List[Vertex] = []
        self._registry: Dict[str, int] = {}
        self._edge_count = 0
        self._rows_seen = 0

    def add_vertex(self, name: str) -> Vertex:
        """Return the vertex called ``name``, registering it if new."""
        index = self._registry.get(name)
        if index is not None:
            return self._vertices[index]
        vertex = Vertex(index=len(self._vertices), name=name)
        self._vertices.append(vertex)
        self._registry[name] = vertex.index
        return vertex

    def add_row(
        self,
        source: str,
        destination: str,
        weight: RawWeight,
        row_number: Optional[int] = None,
    ) -> bool:
        """Add one undirected connection.

        Returns:
            True if the row was applied, False if it was rejected in
            lenient mode.

        Raises:
            RowParseError: On a malformed row in strict mode.
        """
        self._rows_seen += 1
        if row_number is None:
            row_number = self._rows_seen

        try:
            source_name = _check_name(source, "source", row_number)
            destination_name = _check_name(destination, "destination", row_number)
            parsed = parse_weight(weight, row_number)
        except RowParseError as e:
            if not self.skip_invalid_rows:
                raise
            self.rejected_rows.append(
                RejectedRow(
                    row_number=row_number,
                    values=(source, destination, weight),
                    reason=e.message,
                )
            )
            logger.warning(
                "Row rejected",
                extra={"row_number": row_number, "reason": e.message},
            )
            return False

        # Resolve both names before allocating so a self-loop row maps to one vertex.
        src = self.add_vertex(source_name)
        dst = self.add_vertex(destination_name)

        forward = src.has_edge_to(dst.index)
        backward = dst.has_edge_to(src.index)
        if not forward and not backward:
            self._edge_count += 1
        if not forward:
            src.edges.append(Edge(src.index, dst.index, parsed))
        if not backward and src.index != dst.index:
            dst.edges.append(Edge(dst.index, src.index, parsed))
        return True

    def add_rows(self, rows: Iterable[Row]) -> GraphBuilder:
        """Add every row of ``rows``, numbering them from 1."""
        for row_number, (source, destination, weight) in enumerate(rows, start=1):
            self.add_row(source, destination, weight, row_number=row_number)
        return self

    def build(self) -> Graph:
        # Copy the edge lists so later rows never reach a built graph.
        graph = Graph(
            [Vertex(v.index, v.name, list(v.edges)) for v in self._vertices],
            self._edge_count,
        )
        logger.debug(
            "Graph built",
            extra={
                "vertices": graph.vertex_count(),
                "edges": graph.edge_count(),
                "rejected_rows": len(self.rejected_rows),
            },
        )
        return graph


def build_graph(rows: Iterable[Row], skip_invalid_rows: bool = False) -> Graph:
    """Build a graph from an iterable of (source, destination, weight) rows."""
    return GraphBuilder(skip_invalid_rows=skip_invalid_rows).add_rows(rows).build()
