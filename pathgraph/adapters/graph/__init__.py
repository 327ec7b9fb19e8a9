"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the graph from CSV files
- InMemoryGraphRepository: Builds the graph from records already in memory
- DijkstraRouteSolver: Finds minimum costs using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraRouteSolver
from .memory_repository import InMemoryGraphRepository

__all__ = ["CSVGraphRepository", "DijkstraRouteSolver", "InMemoryGraphRepository"]
