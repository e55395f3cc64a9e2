"""Top-level package for the sssp shortest-route project.

This package builds an undirected weighted graph from tabular
(source, destination, weight) rows and computes shortest routes over
it, either between pairs of vertices or from one source to every
vertex.
"""

__version__ = "0.1.0"
