"""Immutable domain models for pathgraph.

All models are frozen dataclasses with slots. They mirror the rows a
storage layer hands to the loader and carry no behaviour beyond small
helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Largest signed 32-bit integer. Returned by Graph.shortest_path when the
# target cannot be reached; callers must read it as "no path".
UNREACHABLE = 2**31 - 1


@dataclass(frozen=True, slots=True)
class Node:
    """A point of the graph with planar coordinates.

    Attributes:
        id: Unique identifier assigned by the storage layer
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    id: int
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Edge:
    """A weighted connection between two node identifiers.

    Inside the graph an edge is stored as two arcs, one per direction,
    so ``node_a_id`` is the source of the arc and ``node_b_id`` its
    destination.

    Attributes:
        node_a_id: Source node identifier
        node_b_id: Destination node identifier
        weight: Non-negative traversal cost
    """

    node_a_id: int
    node_b_id: int
    weight: int

    def reversed(self) -> Edge:
        """Return a new edge running the opposite way with the same weight."""
        return Edge(
            node_a_id=self.node_b_id,
            node_b_id=self.node_a_id,
            weight=self.weight,
        )


@dataclass(frozen=True, slots=True)
class RouteCost:
    """Result of a minimum-cost query between two nodes.

    Attributes:
        source: Node identifier the query started from
        target: Node identifier the query was looking for
        cost: Minimum total weight, or None when no path exists
    """

    source: int
    target: int
    cost: Optional[int] = None

    @property
    def found(self) -> bool:
        """Check if a path was found."""
        return self.cost is not None

    def as_sentinel(self) -> int:
        """Return the cost, or UNREACHABLE when no path exists."""
        return UNREACHABLE if self.cost is None else self.cost
