"""In-memory row source.

Serves rows held in a list, for tests and for callers that already
have their triples in memory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from ...graph.load_graph import Row


@dataclass
class InMemoryRowSource:
    """Row source over a fixed list of triples.

    Example:
        source = InMemoryRowSource([("A", "B", 5), ("B", "C", "3")])
        repository = CSVGraphRepository(source=source)
    """

    data: List[Row] = field(default_factory=list)

    @classmethod
    def of(cls, rows: Iterable[Row]) -> InMemoryRowSource:
        return cls(list(rows))

    def rows(self) -> Iterator[Row]:
        return iter(self.data)
