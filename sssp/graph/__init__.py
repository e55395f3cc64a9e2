"""Graph representation and path finding.

This subpackage builds an in-memory undirected graph from
(source, destination, weight) rows and runs the shortest-path search
on top of it.
"""

from .dijkstra import (
    ShortestPathTree,
    backtrack,
    dijkstra,
    shortest_path,
    shortest_path_to_all,
)
from .load_graph import GraphBuilder, Row, build_graph, parse_weight
from .model import INFINITY, Edge, Graph, Vertex

__all__ = [
    "INFINITY",
    "Edge",
    "Graph",
    "Vertex",
    "Row",
    "GraphBuilder",
    "build_graph",
    "parse_weight",
    "ShortestPathTree",
    "backtrack",
    "dijkstra",
    "shortest_path",
    "shortest_path_to_all",
]
