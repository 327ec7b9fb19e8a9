"""Route service - Cost query orchestrator.

Loads the graph through a repository once and answers minimum-cost
queries through a solver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.models import RouteCost
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RouteService:
    """Service answering cost queries between node identifiers.

    Attributes:
        graph_repository: Loads the graph
        route_solver: Computes minimum costs
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def cost(self, source: int, target: int) -> RouteCost:
        """Return the minimum cost between two nodes.

        Raises:
            GraphError: If the graph cannot be loaded.
            NodeNotFoundError: If source or target is unknown.
            NoRouteFoundError: If the nodes are not connected.
        """
        graph = self.graph_repository.load()
        return self.route_solver.solve(graph, source, target)

    def cost_or_sentinel(self, source: int, target: int) -> int:
        """Return the minimum cost, or UNREACHABLE when there is no path.

        Unknown identifiers are not an error here; they are unreachable.
        """
        graph = self.graph_repository.load()
        return self.route_solver.solve_safe(graph, source, target).as_sentinel()

    def reload(self) -> None:
        """Drop the cached graph so the next query reads fresh data."""
        self.graph_repository.clear_cache()
        self._logger.info("Graph reload requested")
