"""Graph ports - Abstractions for graph loading and cost queries.

These protocols define the contracts between the graph core and the
code that feeds it or consumes its answers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Node, RouteCost
    from ..graph.graph import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementations:
    - adapters/graph/csv_repository.py (CSVGraphRepository)
    - adapters/graph/memory_repository.py (InMemoryGraphRepository)

    The repository reads node and edge records from wherever they are
    stored and builds the in-memory graph from them, caching the result.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The graph built from every node and edge record.
        """
        ...

    def get_node(self, node_id: int) -> Optional[Node]:
        """Get a node record by identifier.

        Args:
            node_id: The identifier to look up.

        Returns:
            The node, or None if not found.
        """
        ...

    def list_nodes(self) -> Sequence[Node]:
        """List all node records.

        Returns:
            Sequence of every node in the graph.
        """
        ...

    def clear_cache(self) -> None:
        """Forget the cached graph so the next load() reads it again."""
        ...


class RouteSolverPort(Protocol):
    """Port for minimum-cost computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, source: int, target: int) -> RouteCost:
        """Find the minimum cost between two nodes.

        Args:
            graph: The graph to search.
            source: Source node identifier.
            target: Target node identifier.

        Returns:
            RouteCost holding the cost of the cheapest path.
        """
        ...

    def solve_safe(self, graph: Graph, source: int, target: int) -> RouteCost:
        """Like solve(), but returns an empty RouteCost instead of raising."""
        ...
