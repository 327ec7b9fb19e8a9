"""In-memory Graph Repository adapter.

Builds the graph from node and edge records that were already fetched
by another storage client, e.g. rows returned by a database query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...domain.models import Edge, Node
from ...graph.graph import Graph


@dataclass
class InMemoryGraphRepository:
    """Graph repository over in-process record sequences.

    Implements GraphRepositoryPort.

    Attributes:
        nodes: Node records, inserted in order (later ids overwrite)
        edges: Edge records, each inserted as two arcs
    """

    nodes: Sequence[Node] = field(default_factory=tuple)
    edges: Sequence[Edge] = field(default_factory=tuple)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Build the graph, or return the one built by a previous call.

        Raises:
            NegativeWeightError: If an edge has a negative weight.
        """
        if self._graph is None:
            self._graph = Graph.from_records(self.nodes, self.edges)
            self._logger.info(
                "Graph built",
                extra={
                    "nodes": self._graph.node_count,
                    "arcs": self._graph.arc_count,
                },
            )
        return self._graph

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.load().get_node(node_id)

    def list_nodes(self) -> Sequence[Node]:
        return list(self.load().nodes.values())

    def clear_cache(self) -> None:
        self._graph = None
