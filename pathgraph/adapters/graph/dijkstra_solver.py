"""Dijkstra Route Solver adapter.

Wraps Graph.shortest_path and turns its sentinel-based answer into a
RouteCost, raising typed errors for unknown nodes and missing paths.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NodeNotFoundError, NoRouteFoundError
from ...domain.models import UNREACHABLE, RouteCost
from ...graph.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Minimum-cost solver using Dijkstra's algorithm.

    Implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, source: int, target: int) -> RouteCost:
        """Find the minimum cost between two nodes.

        Args:
            graph: The graph to search.
            source: Source node identifier.
            target: Target node identifier.

        Returns:
            RouteCost with the cost of the cheapest path.

        Raises:
            NodeNotFoundError: If source or target is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target},
        )

        if source != target:
            for node_id, role in ((source, "Source"), (target, "Target")):
                if node_id not in graph:
                    raise NodeNotFoundError(
                        f"{role} node not in graph: {node_id}",
                        node_id=node_id,
                    )

        cost = graph.shortest_path(source, target)

        if cost == UNREACHABLE:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            raise NoRouteFoundError(
                f"No path from {source} to {target}",
                source=source,
                target=target,
            )

        self._logger.info(
            "Route found",
            extra={"source": source, "target": target, "cost": cost},
        )
        return RouteCost(source=source, target=target, cost=cost)

    def solve_safe(self, graph: Graph, source: int, target: int) -> RouteCost:
        """Find the minimum cost, returning an empty result on failure.

        Like solve(), but returns a RouteCost without a cost instead of
        raising when the nodes are unknown or not connected.
        """
        cost = graph.shortest_path(source, target)
        if cost == UNREACHABLE:
            return RouteCost(source=source, target=target)
        return RouteCost(source=source, target=target, cost=cost)
