"""Top-level package for the pathgraph project.

This package exposes an in-memory weighted undirected graph of planar
nodes and the layers around it: loaders that build the graph from
tabular data, a solver answering minimum-cost queries with Dijkstra's
algorithm, and the service, configuration and command-line entry points
that wire them together.
"""

from .domain.models import UNREACHABLE, Edge, Node, RouteCost
from .graph.graph import Graph

__all__ = ["Edge", "Graph", "Node", "RouteCost", "UNREACHABLE"]
