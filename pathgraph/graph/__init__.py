"""Graph core: the in-memory graph and its shortest-path search state."""

from .frontier import Frontier, SearchState, State
from .graph import Graph

__all__ = ["Frontier", "Graph", "SearchState", "State"]
