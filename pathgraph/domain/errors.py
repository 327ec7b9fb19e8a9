"""Typed domain errors for pathgraph.

All errors inherit from PathGraphError and can optionally wrap a root
cause exception for debugging.

The graph core itself is total over its inputs: unknown identifiers
produce the unreachable sentinel instead of an error. The only error it
raises is NegativeWeightError, since Dijkstra's algorithm is not correct
with negative weights. The remaining errors belong to the loader, solver
and configuration layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PathGraphError(Exception):
    """Base error for the pathgraph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(PathGraphError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NegativeWeightError(GraphError, ValueError):
    """An edge with a negative weight was inserted.

    Attributes:
        node_a_id: First endpoint of the rejected edge
        node_b_id: Second endpoint of the rejected edge
        weight: The offending weight
    """

    node_a_id: int = 0
    node_b_id: int = 0
    weight: int = 0


@dataclass
class NodeNotFoundError(PathGraphError):
    """Node identifier not present in the graph.

    Attributes:
        node_id: The identifier that was not found
    """

    node_id: Optional[int] = None


@dataclass
class NoRouteFoundError(PathGraphError):
    """No path exists between the requested nodes.

    Attributes:
        source: Source node identifier
        target: Target node identifier
    """

    source: Optional[int] = None
    target: Optional[int] = None


@dataclass
class ConfigurationError(PathGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
