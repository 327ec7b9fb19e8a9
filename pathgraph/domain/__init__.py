"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    NegativeWeightError,
    NodeNotFoundError,
    NoRouteFoundError,
    PathGraphError,
)
from .models import UNREACHABLE, Edge, Node, RouteCost

__all__ = [
    # Models
    "Node",
    "Edge",
    "RouteCost",
    "UNREACHABLE",
    # Errors
    "PathGraphError",
    "GraphError",
    "NegativeWeightError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
