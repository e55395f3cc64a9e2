"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVRowSource: Reads edge rows from a CSV file
- InMemoryRowSource: Serves edge rows held in memory
- CSVGraphRepository: Builds and caches the graph from a row source
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository, CSVRowSource
from .dijkstra_solver import DijkstraRouteSolver
from .memory_source import InMemoryRowSource

__all__ = [
    "CSVRowSource",
    "InMemoryRowSource",
    "CSVGraphRepository",
    "DijkstraRouteSolver",
]
