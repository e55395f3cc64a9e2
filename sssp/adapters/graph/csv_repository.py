"""CSV row source and graph repository adapters.

The row source reads (source, destination, weight) triples from a
delimited file. The repository feeds those rows to the GraphBuilder
and adds:
- Configuration injection (path, delimiter, header, strictness)
- Caching of the built graph
- File errors wrapped in GraphError
"""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import RejectedRow
from ...graph.load_graph import GraphBuilder, Row
from ...graph.model import Graph
from ...ports.graph import RowSourcePort


@dataclass
class CSVRowSource:
    """Row source reading the first three columns of a CSV file.

    Fully blank lines are skipped and cells are stripped. Extra columns
    are ignored; short rows are padded with empty cells so the builder
    reports them instead of this adapter guessing.

    Attributes:
        config: Graph configuration (path, delimiter, encoding, header)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)

    def rows(self) -> Iterator[Row]:
        with self.config.edges_path.open(
            newline="", encoding=self.config.encoding
        ) as f:
            reader = csv.reader(f, delimiter=self.config.delimiter)
            if self.config.has_header:
                next(reader, None)
            for record in reader:
                cells = [cell.strip() for cell in record]
                if not any(cells):
                    continue
                cells += [""] * (3 - len(cells))
                yield cells[0], cells[1], cells[2]


@dataclass
class CSVGraphRepository:
    """Graph repository that builds from a row source.

    This adapter implements GraphRepositoryPort. The graph is built on
    the first load() and cached until clear_cache().

    Attributes:
        config: Graph configuration (paths, parsing policy)
        source: Row source, defaults to a CSVRowSource over config
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    source: Optional[RowSourcePort] = None
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)
    _rejected: List[RejectedRow] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.source is None:
            self.source = CSVRowSource(self.config)

    def load(self) -> Graph:
        """Load the graph from the row source.

        Returns:
            The graph built from every accepted row.

        Raises:
            GraphError: If the source cannot be read.
            RowParseError: If a row is malformed and rows are not skipped.
        """
        with self._lock:
            if self._graph is not None:
                return self._graph

            self._logger.debug(
                "Loading graph",
                extra={"edges_path": str(self.config.edges_path)},
            )

            builder = GraphBuilder(skip_invalid_rows=self.config.skip_invalid_rows)
            assert self.source is not None
            try:
                builder.add_rows(self.source.rows())
            except (OSError, UnicodeDecodeError, csv.Error) as e:
                raise GraphError(
                    f"Failed to load graph: {e}",
                    file_path=str(self.config.edges_path),
                    cause=e,
                )

            graph = builder.build()
            self._graph = graph
            self._rejected = list(builder.rejected_rows)
            self._logger.info(
                "Graph loaded",
                extra={
                    "vertices": graph.vertex_count(),
                    "edges": graph.edge_count(),
                    "rejected_rows": len(self._rejected),
                },
            )
            return graph

    def rejected_rows(self) -> Sequence[RejectedRow]:
        """Rows refused while building the cached graph."""
        return tuple(self._rejected)

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        with self._lock:
            self._graph = None
            self._rejected = []
            self._logger.debug("Graph cache cleared")
