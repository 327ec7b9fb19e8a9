"""In-memory weighted undirected graph.

Nodes are kept in a mapping keyed by identifier and adjacency in a
mapping from node identifier to the list of outgoing arcs. Every edge
inserted is materialised as two arcs, ``a -> b`` and ``b -> a``, so a
lookup in either direction is a single dictionary access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..domain.errors import NegativeWeightError
from ..domain.models import UNREACHABLE, Edge, Node
from .frontier import SearchState


@dataclass
class Graph:
    """Weighted undirected graph over integer node identifiers.

    The adjacency mapping may reference identifiers that have no entry
    in the node mapping; path-finding only needs identifiers and arcs.

    Not thread-safe. Read-only queries may run concurrently as long as
    no insertion happens at the same time.

    Attributes:
        nodes: Node records keyed by identifier
        edges: Outgoing arcs keyed by source identifier
    """

    nodes: Dict[int, Node] = field(default_factory=dict)
    edges: Dict[int, List[Edge]] = field(default_factory=dict)

    @classmethod
    def from_records(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> Graph:
        """Build a graph by inserting every node, then every edge."""
        graph = cls()
        for node in nodes:
            graph.add_node(node)
        for edge in edges:
            graph.add_edge(edge)
        return graph

    def add_node(self, node: Node) -> None:
        """Insert a node, replacing any node with the same identifier."""
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        """Insert an undirected edge as two arcs.

        Parallel edges are kept side by side and endpoints are not
        checked against the node mapping.

        Raises:
            NegativeWeightError: If the edge weight is below zero.
        """
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Negative weight {edge.weight} on edge "
                f"{edge.node_a_id}-{edge.node_b_id}",
                node_a_id=edge.node_a_id,
                node_b_id=edge.node_b_id,
                weight=edge.weight,
            )

        forward = Edge(edge.node_a_id, edge.node_b_id, edge.weight)
        self.edges.setdefault(forward.node_a_id, []).append(forward)

        reverse = edge.reversed()
        self.edges.setdefault(reverse.node_a_id, []).append(reverse)

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.nodes.get(node_id)

    def neighbors(self, node_id: int) -> List[Edge]:
        """Return a copy of the outgoing arcs of ``node_id``."""
        return list(self.edges.get(node_id, ()))

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def arc_count(self) -> int:
        return sum(len(arcs) for arcs in self.edges.values())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes or node_id in self.edges

    def __len__(self) -> int:
        return len(self.nodes)

    def shortest_path(self, from_node_id: int, to_node_id: int) -> int:
        """Return the minimum total weight of a path between two nodes.

        Runs Dijkstra's algorithm and stops as soon as the target is
        popped from the frontier, which is optimal because weights are
        non-negative.

        Args:
            from_node_id: Identifier of the source node.
            to_node_id: Identifier of the target node.

        Returns:
            The minimum cost, 0 when both identifiers are equal, or
            UNREACHABLE when no path exists (including unknown ids).
        """
        state = SearchState.start(from_node_id)

        while state.frontier:
            cost, position = state.frontier.pop()

            if position == to_node_id:
                return cost

            if state.is_stale(cost, position):
                continue

            for arc in self.edges.get(position, ()):
                state.relax(arc.node_b_id, cost + arc.weight)

        return UNREACHABLE
